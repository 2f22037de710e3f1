"""statlab.core.distributions.chi_squared

Chi-square distribution with df degrees of freedom.

Chi-square:
  If X ~ ChiSquare(df), then X = 2 * Gamma(a=df/2, scale=1).
  CDF is regularized lower incomplete gamma P(a, x/2).

Support is x >= 0; pdf and cdf return 0 for negative x.

Quantiles use a safeguarded Newton inversion of the cdf on a bracket starting
at [0, max(3 df, 20)] and expanded upward, seeded with the Wilson-Hilferty
approximation (or the small-x expansion P(a, y) ~ y^a / Gamma(a+1) deep in
the lower tail, where Wilson-Hilferty goes negative).
"""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

import numpy as np

from ..models.options import SolverOptions
from ..models.params import ChiSquaredParams, require_probability
from ..sampling.variates import RandomSource, draw, inverse_transform_variate
from ..solver.root_finding import invert
from ..special.functions import gammainc_lower_reg, log_gamma
from .curve import DEFAULT_NUM_POINTS, Curve
from .normal import standard_ppf


_CURVE_X_MIN = 0.01


def _upper_window(df: float) -> float:
    return max(3.0 * df, 20.0)


def pdf(x: float, df: float) -> float:
    """PDF of chi-square distribution."""
    ChiSquaredParams(df)
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x < 0.0 or math.isinf(x):
        return 0.0
    k = 0.5 * float(df)
    if x == 0.0:
        if k < 1.0:
            return math.inf
        return 0.5 if k == 1.0 else 0.0
    # log(pdf) = (k-1)log(x) - x/2 - k log(2) - lgamma(k)
    log_pdf = (k - 1.0) * math.log(x) - 0.5 * x - k * math.log(2.0) - log_gamma(k)
    return math.exp(log_pdf)


def _cdf(x: float, df: float, eps: float, max_it: int) -> float:
    if math.isnan(x):
        return math.nan
    if x <= 0.0:
        return 0.0
    return gammainc_lower_reg(0.5 * float(df), 0.5 * x, eps, max_it)


def cdf(x: float, df: float) -> float:
    """CDF of chi-square distribution.

    Args:
        x: value (0 is returned for x < 0)
        df: degrees of freedom (>0)

    Returns:
        P(X <= x)
    """
    ChiSquaredParams(df)
    defaults = SolverOptions()
    return _cdf(float(x), df, defaults.series_tolerance, defaults.series_max_iterations)


def _initial_guess(p: float, df: float) -> float:
    k = float(df)
    t = 1.0 - 2.0 / (9.0 * k) + standard_ppf(p) * math.sqrt(2.0 / (9.0 * k))
    if t > 0.0:
        return k * t ** 3
    a = 0.5 * k
    return 2.0 * math.exp((math.log(p) + log_gamma(a + 1.0)) / a)


def inv(p: float, df: float, options: Optional[SolverOptions] = None) -> float:
    """Quantile (inverse CDF) of chi-square distribution.

    Args:
        p: probability in (0,1)
        df: degrees of freedom (>0)
        options: solver tolerances and caps (defaults to SolverOptions())

    Returns:
        x such that cdf(x, df) = p
    """
    ChiSquaredParams(df)
    p = require_probability("p", p)
    opts = options if options is not None else SolverOptions()

    return invert(
        lambda x: _cdf(x, df, opts.series_tolerance, opts.series_max_iterations),
        p,
        0.0,
        _upper_window(df),
        tol=opts.tolerance * min(p, 1.0 - p),
        derivative=lambda x: pdf(x, df),
        x0=_initial_guess(p, df),
        expand="up",
        max_iter=opts.max_iterations,
        max_expansions=opts.max_expansions,
    )


def critical_interval(df: float, alpha: float) -> Tuple[float, float]:
    """Two-sided chi-square critical interval.

    Returns (lower, upper) such that P(lower <= X <= upper) = 1 - alpha.
    """
    alpha = require_probability("alpha", alpha)
    lower = inv(alpha / 2.0, df)
    upper = inv(1.0 - alpha / 2.0, df)
    return float(lower), float(upper)


def sample(
    df: float,
    size: Optional[int] = None,
    rng: RandomSource = None,
) -> Union[float, np.ndarray]:
    """Random draw(s) from ChiSquare(df) by inverse transform."""
    ChiSquaredParams(df)
    return draw(lambda gen: inverse_transform_variate(gen, lambda u: inv(u, df)), size, rng)


def curve(df: float, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
    """Density curve over [0.01, max(3 df, 20)]."""
    ChiSquaredParams(df)
    return Curve(lambda x: pdf(x, df), _CURVE_X_MIN, _upper_window(df), num_points)
