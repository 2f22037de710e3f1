"""
Core module of the statistical distribution engine.

This module contains pure Python implementations of the special functions,
the quantile root finder, the four distributions, the inference formulas and
the sampling layer. It has no I/O and no shared mutable state.
"""

from .errors import (
    StatlabError,
    InvalidParameter,
    RootNotBracketed,
    ConvergenceFailure,
    DegradedPrecision,
)

from .models import (
    DistributionType,
    DistributionPoint,
    NormalParams,
    TParams,
    ChiSquaredParams,
    FParams,
    SolverOptions,
)

from .results import ConfidenceInterval, HypothesisTestResult

from .distributions import (
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

from .inference import standard_error, hypothesis, confidence, effect_size, power

from . import sampling

__all__ = [
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
