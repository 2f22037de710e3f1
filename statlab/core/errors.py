"""statlab.core.errors

Error kinds raised by the distribution engine.

- InvalidParameter: a parameter is outside its domain (sd <= 0, p not in (0,1), ...)
- RootNotBracketed: bracket expansion hit its cap without enclosing the target
- ConvergenceFailure: the root finder hit its iteration cap
- DegradedPrecision: warning category for series / continued fractions that
  stopped at their iteration cap and returned a best estimate
"""


class StatlabError(Exception):
    """Base class for all engine errors."""


class InvalidParameter(StatlabError, ValueError):
    """A distribution or function parameter violates its domain."""


class RootNotBracketed(StatlabError, ArithmeticError):
    """The target value could not be enclosed by a bracket."""


class ConvergenceFailure(StatlabError, ArithmeticError):
    """An iterative solver exhausted its iteration budget."""


class DegradedPrecision(RuntimeWarning):
    """A leaf numeric routine returned an estimate without reaching its tolerance."""
