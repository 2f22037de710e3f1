"""
Tests for the safeguarded root finder and bracket expansion.
"""

import logging
import math
import sys
import os

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from statlab.core.errors import ConvergenceFailure, InvalidParameter, RootNotBracketed
from statlab.core.solver.root_finding import expand_bracket, invert


def _cube(x):
    return x ** 3


class TestInvert:
    """Tests for invert()."""

    def test_cube_root_with_derivative(self):
        """Newton with an analytic derivative finds the cube root."""
        x = invert(_cube, 8.0, 0.0, 5.0, tol=1e-12, derivative=lambda x: 3.0 * x * x)
        assert x == pytest.approx(2.0, abs=1e-12)

    def test_cube_root_finite_difference(self):
        """Without a derivative a finite difference is used."""
        x = invert(_cube, 8.0, 0.0, 5.0, tol=1e-12)
        assert abs(_cube(x) - 8.0) <= 1e-12

    def test_flat_tail_falls_back_to_bisection(self):
        """A derivative that is ~0 over most of the bracket still converges."""
        f = lambda x: math.tanh(x)
        x = invert(f, 0.999, -30.0, 30.0, tol=1e-13, derivative=lambda x: 0.0)
        assert f(x) == pytest.approx(0.999, abs=1e-13)

    def test_starting_point_inside_bracket_is_used(self):
        """An x0 at the root returns immediately."""
        x = invert(_cube, 27.0, 0.0, 10.0, x0=3.0)
        assert x == 3.0

    def test_starting_point_outside_bracket_is_ignored(self):
        """An x0 outside the bracket falls back to the midpoint."""
        x = invert(_cube, 27.0, 0.0, 10.0, x0=50.0)
        assert x == pytest.approx(3.0, abs=1e-10)

    def test_target_at_bracket_end(self):
        """A target equal to f(lo) or f(hi) returns that end."""
        assert invert(_cube, 0.0, 0.0, 2.0) == 0.0
        assert invert(_cube, 8.0, 0.0, 2.0) == 2.0

    def test_not_bracketed(self):
        """A bracket that does not straddle the target raises."""
        with pytest.raises(RootNotBracketed):
            invert(_cube, 1000.0, 0.0, 2.0)

    def test_convergence_failure(self):
        """Running out of iterations is a hard error."""
        with pytest.raises(ConvergenceFailure):
            invert(_cube, 2.0, 0.0, 5.0, tol=1e-15, max_iter=1)

    def test_invalid_bracket(self):
        """lo must be below hi."""
        with pytest.raises(InvalidParameter):
            invert(_cube, 1.0, 2.0, 2.0)

    def test_non_finite_target(self):
        """NaN or infinite targets are rejected."""
        with pytest.raises(InvalidParameter):
            invert(_cube, float("nan"), 0.0, 2.0)

    def test_bracket_collapse_returns_best_x(self):
        """A step function cannot meet tol; the last representable x is returned."""
        f = lambda x: 0.0 if x < 1.0 else 1.0
        x = invert(f, 0.5, 0.0, 2.0, tol=1e-12)
        assert x == pytest.approx(1.0, abs=1e-12)


class TestExpandBracket:
    """Tests for bracket expansion."""

    def test_expand_up(self):
        """The upper end grows until f(hi) >= target."""
        lo, hi = expand_bracket(lambda x: x, 1000.0, 0.0, 1.0, "up")
        assert lo <= 1000.0 <= hi

    def test_expand_down(self):
        """The lower end falls until f(lo) <= target."""
        lo, hi = expand_bracket(lambda x: x, -1000.0, -1.0, 0.0, "down")
        assert lo <= -1000.0 <= hi

    def test_already_bracketed(self):
        """No expansion when the bracket is already valid."""
        assert expand_bracket(lambda x: x, 0.5, 0.0, 1.0, "up") == (0.0, 1.0)

    def test_cap_exceeded(self):
        """Too few doublings raise RootNotBracketed."""
        with pytest.raises(RootNotBracketed):
            expand_bracket(lambda x: x, 1e6, 0.0, 1.0, "up", max_expansions=2)

    def test_bounded_function_never_brackets(self):
        """A function that never reaches the target fails with RootNotBracketed."""
        with pytest.raises(RootNotBracketed):
            invert(lambda x: math.atan(x), 2.0, 0.0, 1.0, expand="up")

    def test_unknown_direction(self):
        """Only 'up' and 'down' are accepted."""
        with pytest.raises(InvalidParameter):
            expand_bracket(lambda x: x, 1.0, 0.0, 1.0, "sideways")

    def test_invert_with_expansion(self):
        """invert() expands first when asked."""
        x = invert(math.exp, 1e6, 0.0, 1.0, expand="up", derivative=math.exp, tol=1e-6)
        assert x == pytest.approx(math.log(1e6), rel=1e-10)

    def test_expansion_is_logged(self, caplog):
        """Expansions are reported at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="statlab.core.solver.root_finding"):
            invert(lambda x: x, 100.0, 0.0, 1.0, expand="up")
        assert any("expanded" in record.getMessage() for record in caplog.records)
