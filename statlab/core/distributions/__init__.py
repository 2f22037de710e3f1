"""Distribution engine.

One module per distribution with the same function set
(pdf, cdf, inv, sample, curve), plus object variants built on them:
- normal: Normal(mean, sd)
- student_t: Student's t(df)
- chi_squared: Chi-square(df)
- f_dist: F(df1, df2)
"""

from . import normal, student_t, chi_squared, f_dist
from .curve import Curve
from .variants import (
    Normal,
    StudentT,
    ChiSquared,
    FDist,
    Distribution,
    make_distribution,
    distribution_from_dict,
)

__all__ = [
    "normal",
    "student_t",
    "chi_squared",
    "f_dist",
    "Curve",
    "Normal",
    "StudentT",
    "ChiSquared",
    "FDist",
    "Distribution",
    "make_distribution",
    "distribution_from_dict",
]
