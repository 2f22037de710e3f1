"""statlab.core.distributions.f_dist

Fisher F distribution with (df1, df2) degrees of freedom.

With a = df1/2 and b = df2/2:
  pdf(x) = (df1/df2)^a x^{a-1} (1 + df1 x/df2)^{-(a+b)} / B(a, b)
  cdf(x) = I_u(a, b),  u = df1 x / (df1 x + df2)

Support is x >= 0; pdf and cdf return 0 for negative x. For u > 1/2 the cdf
is evaluated as 1 - I_w(b, a) with w = df2 / (df1 x + df2) computed
directly, so large x does not lose precision forming 1 - u.

Quantiles invert the cdf on [0, 5], expanded upward as needed.
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np

from ..models.options import SolverOptions
from ..models.params import FParams, require_probability
from ..sampling.variates import RandomSource, draw, inverse_transform_variate
from ..solver.root_finding import invert
from ..special.functions import betainc_reg, log_beta
from .curve import DEFAULT_NUM_POINTS, Curve


_BRACKET_HI = 5.0
_CURVE_WINDOW = (0.01, 5.0)


def pdf(x: float, df1: float, df2: float) -> float:
    """F density at x."""
    FParams(df1, df2)
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x < 0.0 or math.isinf(x):
        return 0.0
    a = 0.5 * df1
    b = 0.5 * df2
    if x == 0.0:
        if a < 1.0:
            return math.inf
        return 1.0 if a == 1.0 else 0.0
    log_pdf = (
        a * math.log(df1 / df2)
        + (a - 1.0) * math.log(x)
        - (a + b) * math.log1p(df1 * x / df2)
        - log_beta(a, b)
    )
    return math.exp(log_pdf)


def _cdf(x: float, df1: float, df2: float, eps: float, max_it: int) -> float:
    if math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    a = 0.5 * df1
    b = 0.5 * df2
    denom = df1 * x + df2
    u = df1 * x / denom
    w = df2 / denom
    if u <= w:
        return betainc_reg(u, a, b, eps, max_it)
    return 1.0 - betainc_reg(w, b, a, eps, max_it)


def cdf(x: float, df1: float, df2: float) -> float:
    """P(X <= x) for X ~ F(df1, df2)."""
    FParams(df1, df2)
    defaults = SolverOptions()
    return _cdf(float(x), df1, df2, defaults.series_tolerance, defaults.series_max_iterations)


def _initial_guess(p: float, df1: float, df2: float) -> Optional[float]:
    # Small-x expansion I_u(a, b) ~ u^a / (a B(a, b))
    if p >= 0.5:
        return None
    a = 0.5 * df1
    u = math.exp((math.log(p) + math.log(a) + log_beta(a, 0.5 * df2)) / a)
    if not 0.0 < u < 1.0:
        return None
    return df2 * u / (df1 * (1.0 - u))


def inv(p: float, df1: float, df2: float, options: Optional[SolverOptions] = None) -> float:
    """Quantile: x such that P(X <= x) = p, for p in (0, 1).

    Args:
        p: probability in (0, 1)
        df1: numerator degrees of freedom (>0)
        df2: denominator degrees of freedom (>0)
        options: solver tolerances and caps (defaults to SolverOptions())

    Returns:
        F quantile
    """
    FParams(df1, df2)
    p = require_probability("p", p)
    opts = options if options is not None else SolverOptions()

    return invert(
        lambda x: _cdf(x, df1, df2, opts.series_tolerance, opts.series_max_iterations),
        p,
        0.0,
        _BRACKET_HI,
        tol=opts.tolerance * min(p, 1.0 - p),
        derivative=lambda x: pdf(x, df1, df2),
        x0=_initial_guess(p, df1, df2),
        expand="up",
        max_iter=opts.max_iterations,
        max_expansions=opts.max_expansions,
    )


def sample(
    df1: float,
    df2: float,
    size: Optional[int] = None,
    rng: RandomSource = None,
) -> Union[float, np.ndarray]:
    """Random draw(s) from F(df1, df2) by inverse transform."""
    FParams(df1, df2)
    return draw(lambda gen: inverse_transform_variate(gen, lambda u: inv(u, df1, df2)), size, rng)


def curve(df1: float, df2: float, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
    """Density curve over the fixed window [0.01, 5]."""
    FParams(df1, df2)
    return Curve(lambda x: pdf(x, df1, df2), _CURVE_WINDOW[0], _CURVE_WINDOW[1], num_points)
