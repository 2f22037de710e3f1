"""Special functions used by the distribution engine.

Pure numeric kernels with no SciPy dependency:
- log-gamma and log-beta
- Regularized incomplete gamma (lower and upper)
- Regularized incomplete beta
- Error function and its complement
"""

from .functions import (
    log_gamma,
    log_beta,
    gammainc_lower_reg,
    gammainc_upper_reg,
    betainc_reg,
    erf,
    erf_via_gamma,
    erfc,
)

__all__ = [
    "log_gamma",
    "log_beta",
    "gammainc_lower_reg",
    "gammainc_upper_reg",
    "betainc_reg",
    "erf",
    "erf_via_gamma",
    "erfc",
]
