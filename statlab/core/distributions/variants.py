"""
Object form of the distribution engine.

Each variant carries a validated parameter set and exposes the same
capability set: pdf, cdf, inv, sample, curve. ``Distribution`` is the closed
union of the four variants; ``make_distribution`` builds one from a type name
such as "normal", "t", "chi-squared" or "f".
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Union

import numpy as np

from ..errors import InvalidParameter
from ..models.options import SolverOptions
from ..models.params import (
    ChiSquaredParams,
    DistributionType,
    FParams,
    NormalParams,
    TParams,
)
from ..sampling.variates import RandomSource
from . import chi_squared, f_dist, normal, student_t
from .curve import DEFAULT_NUM_POINTS, Curve


@dataclass(frozen=True)
class Normal:
    """Normal distribution N(mean, sd)."""

    params: NormalParams = field(default_factory=NormalParams)
    kind: ClassVar[DistributionType] = DistributionType.NORMAL

    def pdf(self, x: float) -> float:
        return normal.pdf(x, self.params.mean, self.params.sd)

    def cdf(self, x: float) -> float:
        return normal.cdf(x, self.params.mean, self.params.sd)

    def inv(self, p: float) -> float:
        return normal.inv(p, self.params.mean, self.params.sd)

    def sample(self, size: Optional[int] = None, rng: RandomSource = None) -> Union[float, np.ndarray]:
        return normal.sample(self.params.mean, self.params.sd, size=size, rng=rng)

    def curve(self, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
        return normal.curve(self.params.mean, self.params.sd, num_points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize distribution to dictionary."""
        return {"type": self.kind.value, **self.params.to_dict()}


@dataclass(frozen=True)
class StudentT:
    """Student's t distribution."""

    params: TParams
    options: SolverOptions = field(default_factory=SolverOptions)
    kind: ClassVar[DistributionType] = DistributionType.STUDENT_T

    def pdf(self, x: float) -> float:
        return student_t.pdf(x, self.params.df)

    def cdf(self, x: float) -> float:
        return student_t.cdf(x, self.params.df)

    def inv(self, p: float) -> float:
        return student_t.inv(p, self.params.df, self.options)

    def sample(self, size: Optional[int] = None, rng: RandomSource = None) -> Union[float, np.ndarray]:
        return student_t.sample(self.params.df, size=size, rng=rng)

    def curve(self, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
        return student_t.curve(self.params.df, num_points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize distribution to dictionary."""
        return {"type": self.kind.value, **self.params.to_dict()}


@dataclass(frozen=True)
class ChiSquared:
    """Chi-square distribution."""

    params: ChiSquaredParams
    options: SolverOptions = field(default_factory=SolverOptions)
    kind: ClassVar[DistributionType] = DistributionType.CHI_SQUARED

    def pdf(self, x: float) -> float:
        return chi_squared.pdf(x, self.params.df)

    def cdf(self, x: float) -> float:
        return chi_squared.cdf(x, self.params.df)

    def inv(self, p: float) -> float:
        return chi_squared.inv(p, self.params.df, self.options)

    def sample(self, size: Optional[int] = None, rng: RandomSource = None) -> Union[float, np.ndarray]:
        return chi_squared.sample(self.params.df, size=size, rng=rng)

    def curve(self, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
        return chi_squared.curve(self.params.df, num_points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize distribution to dictionary."""
        return {"type": self.kind.value, **self.params.to_dict()}


@dataclass(frozen=True)
class FDist:
    """Fisher F distribution."""

    params: FParams
    options: SolverOptions = field(default_factory=SolverOptions)
    kind: ClassVar[DistributionType] = DistributionType.F

    def pdf(self, x: float) -> float:
        return f_dist.pdf(x, self.params.df1, self.params.df2)

    def cdf(self, x: float) -> float:
        return f_dist.cdf(x, self.params.df1, self.params.df2)

    def inv(self, p: float) -> float:
        return f_dist.inv(p, self.params.df1, self.params.df2, self.options)

    def sample(self, size: Optional[int] = None, rng: RandomSource = None) -> Union[float, np.ndarray]:
        return f_dist.sample(self.params.df1, self.params.df2, size=size, rng=rng)

    def curve(self, num_points: int = DEFAULT_NUM_POINTS) -> Curve:
        return f_dist.curve(self.params.df1, self.params.df2, num_points)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize distribution to dictionary."""
        return {"type": self.kind.value, **self.params.to_dict()}


Distribution = Union[Normal, StudentT, ChiSquared, FDist]


def make_distribution(kind: Union[str, DistributionType], **params: float) -> Distribution:
    """
    Build a distribution from its type name and parameters.

    Args:
        kind: "normal", "t", "chi-squared", "f" (or a DistributionType)
        **params: mean/sd, df, or df1/df2 as appropriate

    Returns:
        Distribution variant

    Raises:
        InvalidParameter: If the type is unknown or parameters are invalid
    """
    try:
        dist_type = kind if isinstance(kind, DistributionType) else DistributionType(str(kind).lower())
    except ValueError:
        raise InvalidParameter(f"Unknown distribution type: {kind}") from None

    try:
        if dist_type is DistributionType.NORMAL:
            return Normal(NormalParams(**params))
        if dist_type is DistributionType.STUDENT_T:
            return StudentT(TParams(**params))
        if dist_type is DistributionType.CHI_SQUARED:
            return ChiSquared(ChiSquaredParams(**params))
        return FDist(FParams(**params))
    except TypeError as exc:
        raise InvalidParameter(f"Invalid parameters for {dist_type.value}: {exc}") from None


def distribution_from_dict(data: Dict[str, Any]) -> Distribution:
    """Inverse of ``to_dict`` on the variants."""
    data = dict(data)
    if "type" not in data:
        raise InvalidParameter("distribution dict has no 'type' key")
    kind = data.pop("type")
    return make_distribution(kind, **{k: float(v) for k, v in data.items()})
