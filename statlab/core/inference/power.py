"""statlab.core.inference.power

Power and sample size for a two-sided one-sample z test.

With standardized effect size d, sample size n and k = z_{1-alpha/2}, the
noncentrality is delta = d * sqrt(n) and

    power = 1 - Phi(k - delta) + Phi(-k - delta)

Solving the dominant term for n gives the usual closed form

    n = ceil(((z_{1-alpha/2} + z_{power}) / d)^2)

so no root finding is needed.
"""

from __future__ import annotations

import math

from ..distributions import normal
from ..errors import InvalidParameter
from ..models.params import require_finite, require_positive, require_probability


def one_sample_z(effect_size: float, n: int, alpha: float = 0.05) -> float:
    """Power of a two-sided one-sample z test.

    Args:
        effect_size: standardized effect size d (mean difference / sigma)
        n: sample size (>0)
        alpha: significance level

    Returns:
        probability of rejecting the null when the effect is real
    """
    require_finite("effect_size", effect_size)
    require_positive("n", n)
    alpha = require_probability("alpha", alpha)

    critical_z = normal.inv(1.0 - alpha / 2.0, 0.0, 1.0)
    noncentrality = effect_size * math.sqrt(n)
    return (
        1.0
        - normal.standard_cdf(critical_z - noncentrality)
        + normal.standard_cdf(-critical_z - noncentrality)
    )


def sample_size_one_sample(effect_size: float, power: float = 0.8, alpha: float = 0.05) -> int:
    """Sample size needed to reach the given power in a two-sided one-sample z test.

    Args:
        effect_size: standardized effect size d (non-zero)
        power: desired power in (0, 1)
        alpha: significance level

    Returns:
        smallest integer n from the closed-form approximation
    """
    require_finite("effect_size", effect_size)
    if effect_size == 0:
        raise InvalidParameter("effect_size must be non-zero")
    power = require_probability("power", power)
    alpha = require_probability("alpha", alpha)

    z_alpha = normal.inv(1.0 - alpha / 2.0, 0.0, 1.0)
    z_beta = normal.inv(power, 0.0, 1.0)
    return int(math.ceil(((z_alpha + z_beta) / effect_size) ** 2))
