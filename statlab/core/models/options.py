"""
Numerical options for the distribution engine.

This module defines the tolerances and iteration caps used by the special
functions and the root finder when computing quantiles.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import InvalidParameter


@dataclass(frozen=True)
class SolverOptions:
    """
    Configuration options for quantile root finding.

    Attributes:
        tolerance: Absolute tolerance on |cdf(x) - p| (default: 1e-12)
        max_iterations: Root finder iteration cap (default: 200)
        max_expansions: Bracket doublings allowed before giving up (default: 1100)
        series_tolerance: Relative tolerance for series / continued fractions (default: 1e-14)
        series_max_iterations: Iteration cap for series / continued fractions (default: 2000)
    """

    tolerance: float = 1e-12
    max_iterations: int = 200
    max_expansions: int = 1100
    series_tolerance: float = 1e-14
    series_max_iterations: int = 2000

    def __post_init__(self):
        """Validate options after initialization."""
        if not self.tolerance > 0:
            raise InvalidParameter("tolerance must be positive")

        if self.max_iterations < 1:
            raise InvalidParameter("max_iterations must be at least 1")

        if self.max_expansions < 0:
            raise InvalidParameter("max_expansions cannot be negative")

        if not self.series_tolerance > 0:
            raise InvalidParameter("series_tolerance must be positive")

        if self.series_max_iterations < 1:
            raise InvalidParameter("series_max_iterations must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "tolerance": self.tolerance,
            "max_iterations": self.max_iterations,
            "max_expansions": self.max_expansions,
            "series_tolerance": self.series_tolerance,
            "series_max_iterations": self.series_max_iterations,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SolverOptions':
        """
        Create options from a dictionary.

        Missing keys fall back to the defaults.

        Args:
            data: Dictionary with option values

        Returns:
            New SolverOptions instance
        """
        defaults = cls()
        return cls(
            tolerance=float(data.get("tolerance", defaults.tolerance)),
            max_iterations=int(data.get("max_iterations", defaults.max_iterations)),
            max_expansions=int(data.get("max_expansions", defaults.max_expansions)),
            series_tolerance=float(data.get("series_tolerance", defaults.series_tolerance)),
            series_max_iterations=int(
                data.get("series_max_iterations", defaults.series_max_iterations)
            ),
        )
