"""statlab.core.distributions.normal

Normal distribution N(mean, sd).

Implemented:
- pdf: Gaussian density
- cdf: 0.5 * erfc(-(x - mean) / (sd * sqrt(2))), so the lower tail keeps
  relative precision
- inv: Acklam's rational approximation (relative error < 1.15e-9) refined by
  one Halley step against the cdf, which brings it to full double precision
- sample: Box-Muller transform
- curve: density over [mean - 4 sd, mean + 4 sd]
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np

from ..models.params import NormalParams, require_probability
from ..sampling.variates import RandomSource, draw, normal_variate
from ..special.functions import erfc
from .curve import DEFAULT_NUM_POINTS, Curve


_SQRT2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)

# Acklam's coefficients
_A = (-3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
      1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00)
_B = (-5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
      6.680131188771972e+01, -1.328068155288572e+01)
_C = (-7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
      -2.549671324517906e+00, 4.374664141464968e+00, 2.938163982698783e+00)
_D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
      3.754408661907416e+00)
_P_LOW = 0.02425
_P_HIGH = 1.0 - _P_LOW
_HALLEY_EXP_LIMIT = 700.0


def standard_cdf(z: float) -> float:
    """Standard normal CDF."""
    return 0.5 * erfc(-float(z) / _SQRT2)


def _tail_approximation(q: float) -> float:
    # Lower-tail rational approximation in q = sqrt(-2 ln p)
    c, d = _C, _D
    num = ((((c[0] * q + c[1]) * q + c[2]) * q + c[3]) * q + c[4]) * q + c[5]
    den = (((d[0] * q + d[1]) * q + d[2]) * q + d[3]) * q + 1.0
    return num / den


def standard_ppf(p: float) -> float:
    """Standard normal quantile (inverse CDF).

    Args:
        p: probability in (0, 1)

    Returns:
        z such that P(Z <= z) = p
    """
    p = require_probability("p", p)

    if p < _P_LOW:
        z = _tail_approximation(math.sqrt(-2.0 * math.log(p)))
    elif p <= _P_HIGH:
        q = p - 0.5
        r = q * q
        a, b = _A, _B
        z = (((((a[0] * r + a[1]) * r + a[2]) * r + a[3]) * r + a[4]) * r + a[5]) * q / \
            (((((b[0] * r + b[1]) * r + b[2]) * r + b[3]) * r + b[4]) * r + 1.0)
    else:
        z = -_tail_approximation(math.sqrt(-2.0 * math.log1p(-p)))

    # Past exp overflow p is subnormal and the cdf has no digits to refine with
    if 0.5 * z * z > _HALLEY_EXP_LIMIT:
        return z

    # One Halley step on cdf(z) - p
    e = standard_cdf(z) - p
    u = e * _SQRT_2PI * math.exp(0.5 * z * z)
    return z - u / (1.0 + 0.5 * z * u)


def pdf(x: float, mean: float = 0.0, sd: float = 1.0) -> float:
    """Normal density at x."""
    NormalParams(mean, sd)
    z = (float(x) - mean) / sd
    return math.exp(-0.5 * z * z) / (sd * _SQRT_2PI)


def cdf(x: float, mean: float = 0.0, sd: float = 1.0) -> float:
    """P(X <= x) for X ~ N(mean, sd)."""
    NormalParams(mean, sd)
    return standard_cdf((float(x) - mean) / sd)


def inv(p: float, mean: float = 0.0, sd: float = 1.0) -> float:
    """Quantile: x such that P(X <= x) = p, for p in (0, 1)."""
    NormalParams(mean, sd)
    return mean + sd * standard_ppf(p)


def sample(
    mean: float = 0.0,
    sd: float = 1.0,
    size: Optional[int] = None,
    rng: RandomSource = None,
) -> Union[float, np.ndarray]:
    """Random draw(s) from N(mean, sd).

    Returns a float when ``size`` is None, otherwise an array of ``size`` draws.
    """
    NormalParams(mean, sd)
    return draw(lambda gen: normal_variate(gen, mean, sd), size, rng)


def curve(mean: float = 0.0, sd: float = 1.0, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
    """Density curve over [mean - 4 sd, mean + 4 sd]."""
    NormalParams(mean, sd)
    return Curve(lambda x: pdf(x, mean, sd), mean - 4.0 * sd, mean + 4.0 * sd, num_points)
