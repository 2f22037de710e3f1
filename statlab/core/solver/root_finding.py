"""statlab.core.solver.root_finding

Inversion of monotone functions (used for distribution quantiles).

Algorithm:
- Safeguarded Newton that always maintains a bracket [lo, hi] around the root
  (Numerical Recipes ``rtsafe``). A bisection step is taken whenever the
  Newton point leaves the bracket or does not shrink the step fast enough,
  so convergence is guaranteed even where the derivative is ~0 (CDF tails).
- The derivative is supplied by the caller (a pdf) or estimated by a central
  finite difference.
- Callers without a valid bracket can ask for geometric expansion of the
  bracket in one direction until it encloses the target.

Failures:
- RootNotBracketed: expansion cap exceeded, or the bracket does not enclose
  the target.
- ConvergenceFailure: iteration cap exceeded. For the built-in distributions
  this indicates a numerical bug rather than a bad input.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Tuple

from ..errors import ConvergenceFailure, InvalidParameter, RootNotBracketed


logger = logging.getLogger(__name__)

_DEF_TOL = 1e-12
_DEF_MAX_IT = 200
_DEF_MAX_EXPANSIONS = 1100

_EXPAND_UP = "up"
_EXPAND_DOWN = "down"


def expand_bracket(
    f: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    direction: str = _EXPAND_UP,
    max_expansions: int = _DEF_MAX_EXPANSIONS,
) -> Tuple[float, float]:
    """Grow [lo, hi] geometrically until it encloses ``target``.

    direction="up" moves the upper end until f(hi) >= target;
    direction="down" moves the lower end until f(lo) <= target.
    Each expansion doubles the bracket width and moves the stale end onto
    the previous boundary, since the root is known to lie beyond it.

    Args:
        f: non-decreasing function
        target: value to enclose
        lo, hi: starting bracket (lo < hi)
        direction: "up" or "down"
        max_expansions: maximum number of doublings

    Returns:
        (lo, hi) enclosing the target on the expanded side
    """
    if direction not in (_EXPAND_UP, _EXPAND_DOWN):
        raise InvalidParameter(f"direction must be 'up' or 'down', got {direction!r}")
    if not lo < hi:
        raise InvalidParameter("lo must be less than hi")

    for expansion in range(max_expansions + 1):
        width = hi - lo
        if direction == _EXPAND_UP:
            if f(hi) >= target:
                break
            lo, hi = hi, hi + 2.0 * width
        else:
            if f(lo) <= target:
                break
            lo, hi = lo - 2.0 * width, lo
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise RootNotBracketed(f"bracket overflowed while searching for {target}")
    else:
        raise RootNotBracketed(
            f"target {target} not bracketed after {max_expansions} expansions "
            f"(last bracket [{lo}, {hi}])"
        )

    if expansion:
        logger.debug("bracket expanded %s %d times to [%g, %g]", direction, expansion, lo, hi)
    return lo, hi


def _central_difference(f: Callable[[float], float], x: float, lo: float, hi: float) -> float:
    h = 1e-7 * max(1.0, abs(x))
    xa = max(lo, x - h)
    xb = min(hi, x + h)
    if xb <= xa:
        return 0.0
    return (f(xb) - f(xa)) / (xb - xa)


def invert(
    f: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    tol: float = _DEF_TOL,
    *,
    derivative: Optional[Callable[[float], float]] = None,
    x0: Optional[float] = None,
    expand: Optional[str] = None,
    max_iter: int = _DEF_MAX_IT,
    max_expansions: int = _DEF_MAX_EXPANSIONS,
) -> float:
    """Solve f(x) = target for a non-decreasing f.

    Args:
        f: function, non-decreasing on the bracket
        target: value to reach
        lo, hi: bracket with f(lo) <= target <= f(hi) (after expansion)
        tol: absolute tolerance on |f(x) - target|
        derivative: f' if known; otherwise a finite difference is used
        x0: starting point (ignored when outside the bracket)
        expand: None, "up" or "down" to expand the bracket first
        max_iter: iteration cap
        max_expansions: cap on bracket doublings

    Returns:
        x with |f(x) - target| <= tol, or the best representable x when
        the bracket has shrunk to adjacent floating-point numbers
    """
    target = float(target)
    lo = float(lo)
    hi = float(hi)
    if not math.isfinite(target):
        raise InvalidParameter(f"target must be finite, got {target}")
    if not lo < hi:
        raise InvalidParameter("lo must be less than hi")

    if expand is not None:
        lo, hi = expand_bracket(f, target, lo, hi, expand, max_expansions)

    f_lo = f(lo)
    f_hi = f(hi)
    if not (f_lo <= target <= f_hi):
        raise RootNotBracketed(
            f"f({lo})={f_lo} and f({hi})={f_hi} do not bracket target {target}"
        )
    if f_lo == target:
        return lo
    if f_hi == target:
        return hi

    if x0 is not None and lo < x0 < hi:
        x = float(x0)
    else:
        x = 0.5 * (lo + hi)

    dx_old = hi - lo
    dx = dx_old

    for iteration in range(1, max_iter + 1):
        resid = f(x) - target
        if abs(resid) <= tol:
            logger.debug("inverted target %g at x=%g in %d iterations", target, x, iteration)
            return x

        if resid < 0.0:
            lo = x
        else:
            hi = x

        mid = 0.5 * (lo + hi)
        if mid <= lo or mid >= hi:
            logger.debug("bracket collapsed at x=%g (residual %g)", x, resid)
            return x

        slope = derivative(x) if derivative is not None else _central_difference(f, x, lo, hi)

        use_newton = slope > 0.0 and math.isfinite(slope)
        if use_newton:
            x_new = x - resid / slope
            # Safeguard: keep inside bracket and require the step to halve
            use_newton = lo < x_new < hi and abs(2.0 * resid) <= abs(dx_old * slope)

        dx_old = dx
        if use_newton:
            dx = x_new - x
            x = x_new
        else:
            dx = mid - x
            x = mid

    raise ConvergenceFailure(
        f"no convergence to target {target} within {max_iter} iterations "
        f"(bracket [{lo}, {hi}])"
    )
