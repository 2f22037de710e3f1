"""
Standard errors of common estimators.
"""

import math

from ..errors import InvalidParameter
from ..models.params import require_positive


def mean(sd: float, n: int) -> float:
    """Standard error of the mean: sd / sqrt(n)."""
    require_positive("sd", sd)
    require_positive("n", n)
    return sd / math.sqrt(n)


def proportion(p: float, n: int) -> float:
    """Standard error of a sample proportion: sqrt(p (1 - p) / n)."""
    if not 0.0 <= p <= 1.0:
        raise InvalidParameter(f"p must be in [0,1], got {p}")
    require_positive("n", n)
    return math.sqrt(p * (1.0 - p) / n)


def difference_independent(sd1: float, n1: int, sd2: float, n2: int) -> float:
    """Standard error of the difference of two independent means (unequal variances)."""
    require_positive("sd1", sd1)
    require_positive("sd2", sd2)
    require_positive("n1", n1)
    require_positive("n2", n2)
    return math.sqrt(sd1 * sd1 / n1 + sd2 * sd2 / n2)


def pooled_variance(sd1: float, n1: int, sd2: float, n2: int) -> float:
    """Pooled variance ((n1-1) sd1^2 + (n2-1) sd2^2) / (n1 + n2 - 2)."""
    require_positive("sd1", sd1)
    require_positive("sd2", sd2)
    require_positive("n1", n1)
    require_positive("n2", n2)
    if n1 + n2 <= 2:
        raise InvalidParameter("n1 + n2 must exceed 2 to pool variances")
    return ((n1 - 1) * sd1 * sd1 + (n2 - 1) * sd2 * sd2) / (n1 + n2 - 2)


def pooled(sd1: float, n1: int, sd2: float, n2: int) -> float:
    """Pooled standard error for a two-sample t test (equal variances).

    SE = sqrt(s_p^2 * (1/n1 + 1/n2))
    """
    return math.sqrt(pooled_variance(sd1, n1, sd2, n2) * (1.0 / n1 + 1.0 / n2))
