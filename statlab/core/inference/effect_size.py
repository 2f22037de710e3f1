"""
Effect sizes: Cohen's d and its conversion to and from a correlation r.

Interpretation buckets for |d| (Cohen, 1988):
- < 0.2: negligible
- < 0.5: small
- < 0.8: medium
- otherwise: large
"""

import math

from ..errors import InvalidParameter
from ..models.params import require_finite
from .standard_error import pooled_variance

NEGLIGIBLE = "negligible"
SMALL = "small"
MEDIUM = "medium"
LARGE = "large"


def cohens_d(mean1: float, mean2: float, sd1: float, sd2: float, n1: int, n2: int) -> float:
    """Cohen's d for two independent groups, using the pooled standard deviation."""
    require_finite("mean1", mean1)
    require_finite("mean2", mean2)
    pooled_sd = math.sqrt(pooled_variance(sd1, n1, sd2, n2))
    return (mean1 - mean2) / pooled_sd


def interpret_d(d: float) -> str:
    """Qualitative label for an effect size."""
    if math.isnan(d):
        raise InvalidParameter("d must not be NaN")
    abs_d = abs(d)
    if abs_d < 0.2:
        return NEGLIGIBLE
    if abs_d < 0.5:
        return SMALL
    if abs_d < 0.8:
        return MEDIUM
    return LARGE


def d_to_r(d: float) -> float:
    """Correlation coefficient r from Cohen's d: d / sqrt(d^2 + 4)."""
    require_finite("d", d)
    return d / math.sqrt(d * d + 4.0)


def r_to_d(r: float) -> float:
    """Cohen's d from a correlation coefficient: 2r / sqrt(1 - r^2), |r| < 1."""
    require_finite("r", r)
    if not -1.0 < r < 1.0:
        raise InvalidParameter(f"r must be in (-1,1), got {r}")
    return 2.0 * r / math.sqrt(1.0 - r * r)
