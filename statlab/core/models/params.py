"""
Parameter sets for the supported distributions.

Conventions:
- Parameter sets are immutable and validated on construction
- Degrees of freedom may be fractional
- Curve points are plain (x, y) pairs with y the density at x
"""

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..errors import InvalidParameter


class DistributionType(Enum):
    """
    Distribution families supported by the engine.

    Values match the names used by plotting front ends:
    - NORMAL: "normal"
    - STUDENT_T: "t"
    - CHI_SQUARED: "chi-squared"
    - F: "f"
    """
    NORMAL = "normal"
    STUDENT_T = "t"
    CHI_SQUARED = "chi-squared"
    F = "f"


def require_finite(name: str, value: float) -> None:
    """Raise InvalidParameter unless ``value`` is a finite real number (bools excluded)."""
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InvalidParameter(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")


def require_positive(name: str, value: float) -> None:
    """Raise InvalidParameter unless ``value`` is finite and strictly positive."""
    require_finite(name, value)
    if value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class DistributionPoint:
    """
    One sample of a density curve.

    Attributes:
        x: Abscissa
        y: Density at x (non-negative for a valid pdf)
    """

    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        """Serialize point to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class NormalParams:
    """
    Parameters of a normal distribution.

    Attributes:
        mean: Location (default: 0.0)
        sd: Standard deviation, must be positive (default: 1.0)
    """

    mean: float = 0.0
    sd: float = 1.0

    def __post_init__(self):
        """Validate parameters after initialization."""
        require_finite("mean", self.mean)
        require_positive("sd", self.sd)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize parameters to dictionary."""
        return {"mean": self.mean, "sd": self.sd}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NormalParams':
        """Create parameters from a dictionary, defaulting to the standard normal."""
        return cls(mean=float(data.get("mean", 0.0)), sd=float(data.get("sd", 1.0)))


@dataclass(frozen=True)
class TParams:
    """
    Parameters of a Student's t distribution.

    Attributes:
        df: Degrees of freedom, must be positive
    """

    df: float

    def __post_init__(self):
        """Validate parameters after initialization."""
        require_positive("df", self.df)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize parameters to dictionary."""
        return {"df": self.df}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TParams':
        """Create parameters from a dictionary."""
        return cls(df=float(data["df"]))


@dataclass(frozen=True)
class ChiSquaredParams:
    """
    Parameters of a chi-squared distribution.

    Attributes:
        df: Degrees of freedom, must be positive
    """

    df: float

    def __post_init__(self):
        """Validate parameters after initialization."""
        require_positive("df", self.df)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize parameters to dictionary."""
        return {"df": self.df}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChiSquaredParams':
        """Create parameters from a dictionary."""
        return cls(df=float(data["df"]))


@dataclass(frozen=True)
class FParams:
    """
    Parameters of an F distribution.

    Attributes:
        df1: Numerator degrees of freedom, must be positive
        df2: Denominator degrees of freedom, must be positive
    """

    df1: float
    df2: float

    def __post_init__(self):
        """Validate parameters after initialization."""
        require_positive("df1", self.df1)
        require_positive("df2", self.df2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize parameters to dictionary."""
        return {"df1": self.df1, "df2": self.df2}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FParams':
        """Create parameters from a dictionary."""
        return cls(df1=float(data["df1"]), df2=float(data["df2"]))


def require_probability(name: str, value: float) -> float:
    """Return ``value`` as float if it lies in the open interval (0, 1)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not 0.0 < value < 1.0:
        raise InvalidParameter(f"{name} must be in (0,1), got {value!r}")
    return float(value)
