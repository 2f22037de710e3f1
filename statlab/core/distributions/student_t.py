"""statlab.core.distributions.student_t

Student's t distribution with df degrees of freedom (df may be fractional).

pdf:
  Gamma((df+1)/2) / (sqrt(df pi) Gamma(df/2)) * (1 + x^2/df)^{-(df+1)/2}
  evaluated in logs via log_gamma.

cdf:
  With w = x^2 / (df + x^2),
      P(|T| <= |x|) = I_w(1/2, df/2)
      P(|T| >  |x|) = I_{1-w}(df/2, 1/2)
  Near the center the first form is used (0.5 +/- half of it), in the tails
  the second, so neither side loses precision to cancellation.

inv:
  Closed forms for df = 1 (Cauchy) and df = 2. Otherwise the cdf is inverted
  on [-50, 0] or [0, 50] (expanded outward as needed), starting from the
  normal quantile and using the pdf as derivative.
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np

from ..models.options import SolverOptions
from ..models.params import TParams, require_probability
from ..sampling.variates import RandomSource, draw, inverse_transform_variate
from ..solver.root_finding import invert
from ..special.functions import betainc_reg, log_gamma
from .curve import DEFAULT_NUM_POINTS, Curve
from .normal import standard_ppf


_BRACKET = 50.0
_CURVE_WINDOW = (-4.0, 4.0)


def pdf(x: float, df: float) -> float:
    """Student's t density at x."""
    TParams(df)
    x = float(x)
    log_norm = log_gamma(0.5 * (df + 1.0)) - log_gamma(0.5 * df) - 0.5 * math.log(df * math.pi)
    return math.exp(log_norm - 0.5 * (df + 1.0) * math.log1p(x * x / df))


def _cdf(x: float, df: float, eps: float, max_it: int) -> float:
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        return 0.5
    x2 = x * x
    if x2 < df:
        half_central = 0.5 * betainc_reg(x2 / (df + x2), 0.5, 0.5 * df, eps, max_it)
        return 0.5 + half_central if x > 0.0 else 0.5 - half_central
    if math.isinf(x2):
        tail = 0.0
    else:
        tail = 0.5 * betainc_reg(df / (df + x2), 0.5 * df, 0.5, eps, max_it)
    return 1.0 - tail if x > 0.0 else tail


def cdf(x: float, df: float) -> float:
    """P(T <= x) for T ~ t(df)."""
    TParams(df)
    defaults = SolverOptions()
    return _cdf(float(x), df, defaults.series_tolerance, defaults.series_max_iterations)


def inv(p: float, df: float, options: Optional[SolverOptions] = None) -> float:
    """Quantile: x such that P(T <= x) = p, for p in (0, 1).

    Args:
        p: probability in (0, 1)
        df: degrees of freedom (>0)
        options: solver tolerances and caps (defaults to SolverOptions())

    Returns:
        t quantile
    """
    TParams(df)
    p = require_probability("p", p)

    if df == 1.0:
        return math.tan(math.pi * (p - 0.5))
    if df == 2.0:
        return (2.0 * p - 1.0) / math.sqrt(2.0 * p * (1.0 - p))
    if p == 0.5:
        return 0.0

    opts = options if options is not None else SolverOptions()
    if p < 0.5:
        lo, hi, direction = -_BRACKET, 0.0, "down"
    else:
        lo, hi, direction = 0.0, _BRACKET, "up"

    return invert(
        lambda t: _cdf(t, df, opts.series_tolerance, opts.series_max_iterations),
        p,
        lo,
        hi,
        tol=opts.tolerance * min(p, 1.0 - p),
        derivative=lambda t: pdf(t, df),
        x0=standard_ppf(p),
        expand=direction,
        max_iter=opts.max_iterations,
        max_expansions=opts.max_expansions,
    )


def sample(
    df: float,
    size: Optional[int] = None,
    rng: RandomSource = None,
) -> Union[float, np.ndarray]:
    """Random draw(s) from t(df) by inverse transform."""
    TParams(df)
    return draw(lambda gen: inverse_transform_variate(gen, lambda u: inv(u, df)), size, rng)


def curve(df: float, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
    """Density curve over the fixed window [-4, 4] (independent of df)."""
    TParams(df)
    return Curve(lambda x: pdf(x, df), _CURVE_WINDOW[0], _CURVE_WINDOW[1], num_points)
