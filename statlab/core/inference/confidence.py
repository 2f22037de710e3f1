"""statlab.core.inference.confidence

Confidence intervals for a mean and for a proportion.

- mean_z: known population sigma, normal quantile
- mean_t: sample standard deviation, Student's t quantile with n - 1 df
- proportion: Wald interval, clamped to [0, 1]

Each interval is mean +/- k * SE with k the two-sided quantile at
1 - (1 - confidence) / 2.
"""

from __future__ import annotations

from ..distributions import normal, student_t
from ..errors import InvalidParameter
from ..models.params import require_finite, require_probability
from ..results.inference_result import ConfidenceInterval
from . import standard_error


def _two_sided_level(confidence: float) -> float:
    confidence = require_probability("confidence", confidence)
    return 1.0 - (1.0 - confidence) / 2.0


def mean_z(
    sample_mean: float,
    sigma: float,
    n: int,
    confidence: float = 0.95,
) -> ConfidenceInterval:
    """CI for a mean with known sigma.

    Args:
        sample_mean: observed mean
        sigma: population standard deviation (>0)
        n: sample size (>0)
        confidence: confidence level in (0, 1)

    Returns:
        ConfidenceInterval(low, high)
    """
    require_finite("sample_mean", sample_mean)
    z = normal.inv(_two_sided_level(confidence), 0.0, 1.0)
    margin = z * standard_error.mean(sigma, n)
    return ConfidenceInterval(sample_mean - margin, sample_mean + margin)


def mean_t(
    sample_mean: float,
    sample_sd: float,
    n: int,
    confidence: float = 0.95,
) -> ConfidenceInterval:
    """CI for a mean with unknown sigma (t with n - 1 degrees of freedom).

    Args:
        sample_mean: observed mean
        sample_sd: sample standard deviation (>0)
        n: sample size (>= 2)
        confidence: confidence level in (0, 1)

    Returns:
        ConfidenceInterval(low, high)
    """
    require_finite("sample_mean", sample_mean)
    if n < 2:
        raise InvalidParameter("n must be at least 2 for a t interval")
    t = student_t.inv(_two_sided_level(confidence), n - 1)
    margin = t * standard_error.mean(sample_sd, n)
    return ConfidenceInterval(sample_mean - margin, sample_mean + margin)


def proportion(p: float, n: int, confidence: float = 0.95) -> ConfidenceInterval:
    """CI for a proportion (normal approximation), clamped to [0, 1]."""
    z = normal.inv(_two_sided_level(confidence), 0.0, 1.0)
    margin = z * standard_error.proportion(p, n)
    return ConfidenceInterval(max(0.0, p - margin), min(1.0, p + margin))
