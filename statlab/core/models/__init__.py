"""
Data models for the distribution engine.
"""

from .params import (
    DistributionType,
    DistributionPoint,
    NormalParams,
    TParams,
    ChiSquaredParams,
    FParams,
    require_finite,
    require_positive,
    require_probability,
)
from .options import SolverOptions

__all__ = [
    "DistributionType",
    "DistributionPoint",
    "NormalParams",
    "TParams",
    "ChiSquaredParams",
    "FParams",
    "SolverOptions",
    "require_finite",
    "require_positive",
    "require_probability",
]
