"""
Result types for the inference layer.

Confidence intervals are (low, high) named tuples so they unpack like plain
pairs. Hypothesis test results carry the statistic, p-value, acceptance
region and the reject decision.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


class ConfidenceInterval(NamedTuple):
    """Ordered interval (low, high) with low <= high."""

    low: float
    high: float

    @property
    def width(self) -> float:
        """Length of the interval."""
        return self.high - self.low

    @property
    def midpoint(self) -> float:
        """Center of the interval."""
        return 0.5 * (self.low + self.high)

    def contains(self, value: float) -> bool:
        """True if value lies in [low, high]."""
        return self.low <= value <= self.high

    def to_dict(self) -> Dict[str, float]:
        """Serialize interval to dictionary."""
        return {"low": self.low, "high": self.high}


@dataclass(frozen=True)
class HypothesisTestResult:
    """
    Result of a hypothesis test.

    The acceptance region is [critical_lower, critical_upper]; an infinite
    bound means the test is one-sided on that side.

    Attributes:
        test_name: Name of the test ("z", "t", "chi_square_variance", "f_variance")
        test_statistic: Computed test statistic
        p_value: Probability of a result at least as extreme under the null
        critical_lower: Lower bound of the acceptance region
        critical_upper: Upper bound of the acceptance region
        alpha: Significance level
        alternative: "two-sided", "greater" or "less"
        reject_null: True if the statistic falls outside the acceptance region
        degrees_of_freedom: Degrees of freedom (None for z tests; (df1, df2) for F)
    """

    test_name: str
    test_statistic: float
    p_value: float
    critical_lower: float
    critical_upper: float
    alpha: float
    alternative: str
    reject_null: bool
    degrees_of_freedom: Optional[Any] = None

    @property
    def confidence_level(self) -> float:
        """Complement of the significance level."""
        return 1.0 - self.alpha

    @property
    def passed(self) -> bool:
        """True if the null hypothesis is not rejected."""
        return not self.reject_null

    def to_dict(self) -> Dict[str, Any]:
        """Serialize test result to dictionary."""
        dof = self.degrees_of_freedom
        return {
            "test_name": self.test_name,
            "test_statistic": _json_safe_value(self.test_statistic),
            "p_value": _json_safe_value(self.p_value),
            "critical_lower": _json_safe_value(self.critical_lower),
            "critical_upper": _json_safe_value(self.critical_upper),
            "alpha": self.alpha,
            "alternative": self.alternative,
            "reject_null": self.reject_null,
            "degrees_of_freedom": list(dof) if isinstance(dof, tuple) else dof,
        }
