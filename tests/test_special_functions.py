"""
Tests for the special-function kernels (log-gamma, incomplete gamma/beta, erf).
"""

import math
import sys
import os
import warnings

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from statlab.core.errors import DegradedPrecision, InvalidParameter
from statlab.core.special.functions import (
    betainc_reg,
    erf,
    erf_via_gamma,
    erfc,
    gammainc_lower_reg,
    gammainc_upper_reg,
    log_beta,
    log_gamma,
)


class TestLogGamma:
    """Tests for the Lanczos log-gamma."""

    @pytest.mark.parametrize("x", [1e-8, 0.001, 0.1, 0.3, 0.5, 1.0, 1.5, 2.0, 3.7, 10.0, 50.5, 171.2, 1e5, 1e10])
    def test_matches_stdlib(self, x):
        """log_gamma agrees with math.lgamma to 12 significant digits."""
        expected = math.lgamma(x)
        assert log_gamma(x) == pytest.approx(expected, rel=1e-12, abs=1e-13)

    def test_factorials(self):
        """Gamma(n) = (n-1)! at integers."""
        for n in range(1, 20):
            assert log_gamma(n) == pytest.approx(math.log(math.factorial(n - 1)), abs=1e-12)

    def test_half(self):
        """Gamma(1/2) = sqrt(pi)."""
        assert log_gamma(0.5) == pytest.approx(0.5 * math.log(math.pi), abs=1e-13)

    @pytest.mark.parametrize("x", [0.0, -1.0, -0.5])
    def test_non_positive_rejected(self, x):
        """Non-positive arguments are a domain error."""
        with pytest.raises(InvalidParameter):
            log_gamma(x)

    def test_nan_propagates(self):
        """NaN input gives NaN output."""
        assert math.isnan(log_gamma(float("nan")))

    def test_log_beta(self):
        """B(a, b) = Gamma(a) Gamma(b) / Gamma(a + b)."""
        assert log_beta(2.0, 3.0) == pytest.approx(math.log(1.0 / 12.0), abs=1e-13)


class TestIncompleteGamma:
    """Tests for the regularized incomplete gamma P(a, x) and Q(a, x)."""

    @pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 2.0, 5.0, 20.0])
    def test_exponential_case(self, x):
        """P(1, x) = 1 - exp(-x)."""
        assert gammainc_lower_reg(1.0, x) == pytest.approx(-math.expm1(-x), rel=1e-13)

    @pytest.mark.parametrize("x", [0.1, 0.7, 1.3, 2.5, 4.0])
    def test_half_shape_is_erf(self, x):
        """P(1/2, x^2) = erf(x)."""
        assert gammainc_lower_reg(0.5, x * x) == pytest.approx(math.erf(x), rel=1e-13)

    @pytest.mark.parametrize("a, x", [(0.5, 0.3), (2.0, 1.0), (3.0, 7.0), (10.0, 12.0), (100.0, 90.0), (250.0, 300.0)])
    def test_lower_plus_upper_is_one(self, a, x):
        """P(a, x) + Q(a, x) = 1 on both branches."""
        assert gammainc_lower_reg(a, x) + gammainc_upper_reg(a, x) == pytest.approx(1.0, abs=1e-14)

    def test_upper_tail_keeps_relative_precision(self):
        """Q(1, 40) = exp(-40) without cancellation."""
        assert gammainc_upper_reg(1.0, 40.0) == pytest.approx(math.exp(-40.0), rel=1e-12)

    def test_boundaries(self):
        """P(a, 0) = 0 and P(a, inf) = 1."""
        assert gammainc_lower_reg(2.0, 0.0) == 0.0
        assert gammainc_lower_reg(2.0, math.inf) == 1.0
        assert gammainc_upper_reg(2.0, 0.0) == 1.0
        assert gammainc_upper_reg(2.0, math.inf) == 0.0

    def test_domain_errors(self):
        """a <= 0 or x < 0 raise InvalidParameter."""
        with pytest.raises(InvalidParameter):
            gammainc_lower_reg(0.0, 1.0)
        with pytest.raises(InvalidParameter):
            gammainc_lower_reg(1.0, -0.1)
        with pytest.raises(InvalidParameter):
            gammainc_upper_reg(-2.0, 1.0)

    def test_nan_propagates(self):
        """NaN inputs return NaN rather than raising or clamping."""
        assert math.isnan(gammainc_lower_reg(float("nan"), 1.0))
        assert math.isnan(gammainc_lower_reg(1.0, float("nan")))

    def test_iteration_cap_warns_and_returns_estimate(self):
        """Hitting the iteration cap is a warning, not an error."""
        with pytest.warns(DegradedPrecision):
            value = gammainc_lower_reg(100.0, 50.0, eps=0.0, max_it=3)
        assert 0.0 <= value <= 1.0

    def test_no_warning_at_default_cap(self):
        """Typical arguments converge without a precision warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", DegradedPrecision)
            gammainc_lower_reg(500.0, 510.0)
            gammainc_upper_reg(500.0, 480.0)

    def test_large_shape_converges(self):
        """The iteration cap grows with the shape, so P(a, a) is right for huge a."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", DegradedPrecision)
            value = gammainc_lower_reg(5e5, 5e5)
        # P(a, a) ~ 1/2 + 1 / (3 sqrt(2 pi a))
        assert value == pytest.approx(0.50018806, abs=1e-7)


class TestIncompleteBeta:
    """Tests for the regularized incomplete beta I_x(a, b)."""

    @pytest.mark.parametrize("x", [0.0, 0.1, 0.37, 0.5, 0.9, 1.0])
    def test_uniform_case(self, x):
        """I_x(1, 1) = x."""
        assert betainc_reg(x, 1.0, 1.0) == pytest.approx(x, abs=1e-14)

    @pytest.mark.parametrize("x, a", [(0.2, 2.5), (0.6, 3.0), (0.95, 0.5)])
    def test_power_case(self, x, a):
        """I_x(a, 1) = x^a."""
        assert betainc_reg(x, a, 1.0) == pytest.approx(x ** a, rel=1e-12)

    @pytest.mark.parametrize("x, b", [(0.2, 2.5), (0.6, 3.0), (0.05, 7.0)])
    def test_complement_power_case(self, x, b):
        """I_x(1, b) = 1 - (1 - x)^b."""
        assert betainc_reg(x, 1.0, b) == pytest.approx(1.0 - (1.0 - x) ** b, rel=1e-12)

    @pytest.mark.parametrize("a", [0.5, 2.0, 15.0, 300.0])
    def test_symmetric_midpoint(self, a):
        """I_{1/2}(a, a) = 1/2."""
        assert betainc_reg(0.5, a, a) == pytest.approx(0.5, abs=1e-11)

    @pytest.mark.parametrize("x, a, b", [(0.3, 2.0, 5.0), (0.8, 0.5, 4.0), (0.05, 10.0, 1.5)])
    def test_reflection(self, x, a, b):
        """I_x(a, b) = 1 - I_{1-x}(b, a)."""
        assert betainc_reg(x, a, b) == pytest.approx(1.0 - betainc_reg(1.0 - x, b, a), abs=1e-12)

    def test_domain_errors(self):
        """x outside [0, 1] or non-positive shapes raise InvalidParameter."""
        with pytest.raises(InvalidParameter):
            betainc_reg(1.5, 1.0, 1.0)
        with pytest.raises(InvalidParameter):
            betainc_reg(-0.1, 1.0, 1.0)
        with pytest.raises(InvalidParameter):
            betainc_reg(0.5, 0.0, 1.0)

    def test_iteration_cap_warns(self):
        """A capped continued fraction warns with DegradedPrecision."""
        with pytest.warns(DegradedPrecision):
            betainc_reg(0.3, 5.0, 5.0, eps=0.0, max_it=1)


class TestErf:
    """Tests for erf, erfc and the incomplete-gamma cross-check."""

    @pytest.mark.parametrize("x", [-3.0, -1.0, -0.2, 0.0, 0.3, 1.0, 2.2, 4.5])
    def test_matches_stdlib(self, x):
        """erf agrees with math.erf."""
        assert erf(x) == pytest.approx(math.erf(x), abs=1e-13)

    def test_cross_check_with_incomplete_gamma(self):
        """The direct series and sign(x) P(1/2, x^2) agree to 1e-10 on [-5, 5]."""
        for x in np.linspace(-5.0, 5.0, 201):
            assert abs(erf(x) - erf_via_gamma(x)) <= 1e-10

    def test_odd_function(self):
        """erf(-x) = -erf(x)."""
        for x in (0.1, 0.9, 2.7):
            assert erf(-x) == -erf(x)

    def test_saturation_and_infinity(self):
        """erf saturates to +/-1."""
        assert erf(7.0) == 1.0
        assert erf(-math.inf) == -1.0
        assert erf_via_gamma(math.inf) == 1.0

    def test_monotone_near_saturation(self):
        """erf never decreases on its way to 1."""
        values = [erf(y) for y in np.linspace(5.5, 6.0, 501)]
        assert np.all(np.diff(values) >= 0.0)

    def test_tail_complement(self):
        """1 - erf(x) keeps the size of the true tail for large x."""
        assert 1.0 - erf(3.0) == pytest.approx(math.erfc(3.0), rel=1e-9)

    @pytest.mark.parametrize("x", [-6.5, -3.0, -1.0, -0.3, 0.0, 0.4, 0.6, 1.5, 3.0, 5.0, 8.0])
    def test_erfc_relative_precision(self, x):
        """erfc keeps relative precision deep in the upper tail."""
        assert erfc(x) == pytest.approx(math.erfc(x), rel=1e-11)

    def test_nan_propagates(self):
        """NaN in, NaN out."""
        assert math.isnan(erf(float("nan")))
        assert math.isnan(erfc(float("nan")))
        assert math.isnan(erf_via_gamma(float("nan")))
