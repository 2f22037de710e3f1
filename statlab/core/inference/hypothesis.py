"""statlab.core.inference.hypothesis

Hypothesis-testing quantities built on the distribution engine.

Includes:
- z-score and one-sample t statistic
- p-values for z and t statistics (one- or two-tailed)
- Critical values from the normal or Student's t quantile
- Complete test runners returning HypothesisTestResult:
  one-sample z and t tests, chi-square test of a variance, F test of two
  variances
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

from ..distributions import chi_squared, f_dist, normal, student_t
from ..errors import InvalidParameter
from ..models.params import require_finite, require_positive, require_probability
from ..results.inference_result import HypothesisTestResult
from . import standard_error

TWO_SIDED = "two-sided"
GREATER = "greater"
LESS = "less"
_ALTERNATIVES = (TWO_SIDED, GREATER, LESS)


def z_score(x: float, mean: float, sd: float) -> float:
    """Standardize x: (x - mean) / sd."""
    require_positive("sd", sd)
    return (x - mean) / sd


def t_statistic(sample_mean: float, population_mean: float, sample_sd: float, n: int) -> float:
    """One-sample t statistic: (sample_mean - population_mean) / (sample_sd / sqrt(n))."""
    se = standard_error.mean(sample_sd, n)
    return (sample_mean - population_mean) / se


def z_test_p_value(z: float, two_tailed: bool = True) -> float:
    """p-value of a z statistic.

    Uses the tail beyond |z|; the two-tailed value doubles it.
    """
    if math.isnan(z):
        return math.nan
    p = normal.standard_cdf(-abs(z))
    return 2.0 * p if two_tailed else p


def t_test_p_value(t: float, df: float, two_tailed: bool = True) -> float:
    """p-value of a t statistic with df degrees of freedom."""
    if math.isnan(t):
        return math.nan
    p = student_t.cdf(-abs(t), df)
    return 2.0 * p if two_tailed else p


def critical_value(alpha: float, df: Optional[float] = None, two_tailed: bool = True) -> float:
    """Critical value for significance level alpha.

    k = F^{-1}(1 - alpha/2) for two-tailed tests, F^{-1}(1 - alpha) otherwise,
    where F is the standard normal (df is None) or Student's t(df).

    Args:
        alpha: significance level in (0, 1)
        df: degrees of freedom for a t test; None for a z test
        two_tailed: whether alpha is split over both tails

    Returns:
        critical value k (positive for alpha < 1/2 one-tailed)
    """
    alpha = require_probability("alpha", alpha)
    p = 1.0 - alpha / 2.0 if two_tailed else 1.0 - alpha
    if df is not None:
        return student_t.inv(p, df)
    return normal.inv(p, 0.0, 1.0)


def _check_alternative(alternative: str) -> None:
    if alternative not in _ALTERNATIVES:
        raise InvalidParameter(
            f"alternative must be one of {', '.join(_ALTERNATIVES)}, got {alternative!r}"
        )


def _location_test(
    test_name: str,
    statistic: float,
    cdf: Callable[[float], float],
    df: Optional[float],
    alpha: float,
    alternative: str,
) -> HypothesisTestResult:
    """Shared decision logic for z and t tests of a mean."""
    if alternative == TWO_SIDED:
        k = critical_value(alpha, df, two_tailed=True)
        lower, upper = -k, k
        p_value = 2.0 * cdf(-abs(statistic))
    elif alternative == GREATER:
        lower, upper = -math.inf, critical_value(alpha, df, two_tailed=False)
        p_value = cdf(-statistic)
    else:
        lower, upper = -critical_value(alpha, df, two_tailed=False), math.inf
        p_value = cdf(statistic)

    return HypothesisTestResult(
        test_name=test_name,
        test_statistic=float(statistic),
        p_value=float(min(p_value, 1.0)),
        critical_lower=float(lower),
        critical_upper=float(upper),
        alpha=alpha,
        alternative=alternative,
        reject_null=not (lower <= statistic <= upper),
        degrees_of_freedom=df,
    )


def one_sample_z_test(
    sample_mean: float,
    population_mean: float,
    sigma: float,
    n: int,
    alpha: float = 0.05,
    alternative: str = TWO_SIDED,
) -> HypothesisTestResult:
    """One-sample z test of a mean with known population sigma.

    Test statistic:
        z = (sample_mean - population_mean) / (sigma / sqrt(n))

    Args:
        sample_mean: observed mean
        population_mean: mean under the null hypothesis
        sigma: known population standard deviation
        n: sample size
        alpha: significance level
        alternative: "two-sided", "greater" or "less"

    Returns:
        HypothesisTestResult
    """
    alpha = require_probability("alpha", alpha)
    _check_alternative(alternative)
    require_finite("sample_mean", sample_mean)
    require_finite("population_mean", population_mean)
    z = (sample_mean - population_mean) / standard_error.mean(sigma, n)
    return _location_test("z", z, normal.standard_cdf, None, alpha, alternative)


def one_sample_t_test(
    sample_mean: float,
    population_mean: float,
    sample_sd: float,
    n: int,
    alpha: float = 0.05,
    alternative: str = TWO_SIDED,
) -> HypothesisTestResult:
    """One-sample t test of a mean with df = n - 1.

    Args:
        sample_mean: observed mean
        population_mean: mean under the null hypothesis
        sample_sd: sample standard deviation
        n: sample size (>= 2)
        alpha: significance level
        alternative: "two-sided", "greater" or "less"

    Returns:
        HypothesisTestResult
    """
    alpha = require_probability("alpha", alpha)
    _check_alternative(alternative)
    if n < 2:
        raise InvalidParameter("n must be at least 2 for a t test")
    require_finite("sample_mean", sample_mean)
    require_finite("population_mean", population_mean)
    df = float(n - 1)
    t = t_statistic(sample_mean, population_mean, sample_sd, n)
    return _location_test("t", t, lambda x: student_t.cdf(x, df), df, alpha, alternative)


def chi_square_variance_test(
    sample_variance: float,
    n: int,
    population_variance: float = 1.0,
    alpha: float = 0.05,
) -> HypothesisTestResult:
    """Two-sided chi-square test of a variance.

    Test statistic:
        T = (n - 1) * s^2 / sigma0^2

    Decision (two-sided):
        chi2_{alpha/2, n-1} <= T <= chi2_{1-alpha/2, n-1}

    Args:
        sample_variance: sample variance s^2
        n: sample size (>= 2)
        population_variance: variance under the null hypothesis (sigma0^2)
        alpha: significance level

    Returns:
        HypothesisTestResult (with p-value and reject decision)
    """
    alpha = require_probability("alpha", alpha)
    if n < 2:
        raise InvalidParameter("n must be at least 2")
    require_positive("population_variance", population_variance)
    require_finite("sample_variance", sample_variance)
    if sample_variance < 0:
        raise InvalidParameter("sample_variance cannot be negative")

    dof = float(n - 1)
    test_stat = dof * float(sample_variance) / float(population_variance)
    lower, upper = chi_squared.critical_interval(dof, alpha)

    # Two-sided p-value around the center of the distribution
    cdf = chi_squared.cdf(test_stat, dof)
    p_value = float(2.0 * min(cdf, 1.0 - cdf))

    return HypothesisTestResult(
        test_name="chi_square_variance",
        test_statistic=test_stat,
        p_value=p_value,
        critical_lower=lower,
        critical_upper=upper,
        alpha=alpha,
        alternative=TWO_SIDED,
        reject_null=not (lower <= test_stat <= upper),
        degrees_of_freedom=dof,
    )


def f_variance_test(
    variance1: float,
    n1: int,
    variance2: float,
    n2: int,
    alpha: float = 0.05,
) -> HypothesisTestResult:
    """Two-sided F test for equality of two variances.

    F = s1^2 / s2^2 with (n1 - 1, n2 - 1) degrees of freedom.

    Returns:
        HypothesisTestResult with degrees_of_freedom = (df1, df2)
    """
    alpha = require_probability("alpha", alpha)
    if n1 < 2 or n2 < 2:
        raise InvalidParameter("n1 and n2 must be at least 2")
    require_positive("variance1", variance1)
    require_positive("variance2", variance2)

    dfs: Tuple[float, float] = (float(n1 - 1), float(n2 - 1))
    test_stat = float(variance1) / float(variance2)
    lower = f_dist.inv(alpha / 2.0, *dfs)
    upper = f_dist.inv(1.0 - alpha / 2.0, *dfs)
    cdf = f_dist.cdf(test_stat, *dfs)
    p_value = float(2.0 * min(cdf, 1.0 - cdf))

    return HypothesisTestResult(
        test_name="f_variance",
        test_statistic=test_stat,
        p_value=p_value,
        critical_lower=lower,
        critical_upper=upper,
        alpha=alpha,
        alternative=TWO_SIDED,
        reject_null=not (lower <= test_stat <= upper),
        degrees_of_freedom=dfs,
    )
