"""
StatLab - statistical distribution and inference engine

Probability density, cumulative probability and quantiles for the Normal,
Student's t, Chi-squared and F distributions, computed from first principles
(log-gamma, incomplete gamma/beta, erf, safeguarded root finding), plus
hypothesis tests, confidence intervals, effect sizes, power analysis and
seeded random sampling.

Conventions:
- Functions take scalar parameters and return scalars, except sampling
  batches and curves
- Randomness comes from an explicit numpy Generator (or int seed)
- Invalid parameters raise InvalidParameter (a ValueError); nothing is clamped
- Default parameters (mean=0, sd=1, two_tailed=True, ...) live in signatures
"""

import logging

__version__ = "1.0.0"
__author__ = "StatLab"

from .core import (
    StatlabError,
    InvalidParameter,
    RootNotBracketed,
    ConvergenceFailure,
    DegradedPrecision,
)
from .core import (
    DistributionType,
    DistributionPoint,
    NormalParams,
    TParams,
    ChiSquaredParams,
    FParams,
    SolverOptions,
)
from .core import ConfidenceInterval, HypothesisTestResult
from .core import (
    normal,
    student_t,
    chi_squared,
    f_dist,
    Curve,
    Normal,
    StudentT,
    ChiSquared,
    FDist,
    Distribution,
    make_distribution,
    distribution_from_dict,
)
from .core import standard_error, hypothesis, confidence, effect_size, power, sampling

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",

    # Errors
    "StatlabError",
    "InvalidParameter",
    "RootNotBracketed",
    "ConvergenceFailure",
    "DegradedPrecision",

    # Models
    "DistributionType",
    "DistributionPoint",
    "NormalParams",
    "TParams",
    "ChiSquaredParams",
    "FParams",
    "SolverOptions",

    # Results
    "ConfidenceInterval",
    "HypothesisTestResult",

    # Distributions
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

    # Inference
    "standard_error",
    "hypothesis",
    "confidence",
    "effect_size",
    "power",

    # Sampling
    "sampling",
]
