"""
Tests for density curves and the object form of the distributions.
"""

import dataclasses
import math
import sys
import os

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from statlab.core.distributions import (
    ChiSquared,
    Curve,
    FDist,
    Normal,
    StudentT,
    chi_squared,
    distribution_from_dict,
    f_dist,
    make_distribution,
    normal,
    student_t,
)
from statlab.core.errors import InvalidParameter
from statlab.core.models import (
    ChiSquaredParams,
    DistributionPoint,
    DistributionType,
    NormalParams,
    SolverOptions,
    TParams,
)


class TestCurve:
    """Tests for Curve."""

    def test_point_count(self):
        """A curve has num_points + 1 points."""
        c = normal.curve(0.0, 1.0, 10)
        assert len(c) == 11
        assert len(list(c)) == 11

    def test_default_point_count(self):
        assert len(normal.curve()) == 101

    def test_window_ends_are_exact(self):
        c = normal.curve(5.0, 2.0, 7)
        points = c.to_list()
        assert points[0].x == -3.0
        assert points[-1].x == 13.0

    def test_even_spacing(self):
        c = student_t.curve(3, 8)
        xs = [point.x for point in c]
        assert np.allclose(np.diff(xs), 1.0)

    def test_restartable(self):
        """Iterating twice gives the same points."""
        c = chi_squared.curve(4, 20)
        assert list(c) == list(c)

    def test_points_are_density_values(self):
        c = f_dist.curve(3, 9, 5)
        for point in c:
            assert isinstance(point, DistributionPoint)
            assert point.y == f_dist.pdf(point.x, 3, 9)
            assert point.y >= 0.0

    def test_indexing(self):
        c = normal.curve(0.0, 1.0, 4)
        assert c[0].x == -4.0
        assert c[-1].x == 4.0
        assert c[2] == DistributionPoint(x=0.0, y=normal.pdf(0.0))
        assert [p.x for p in c[1:3]] == [-2.0, 0.0]
        with pytest.raises(IndexError):
            c[5]

    def test_to_arrays(self):
        xs, ys = normal.curve(0.0, 1.0, 50).to_arrays()
        assert xs.shape == (51,)
        assert ys.shape == (51,)
        assert ys[25] == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))

    @pytest.mark.parametrize(
        "curve, x_min, x_max",
        [
            (student_t.curve(1), -4.0, 4.0),
            (chi_squared.curve(3), 0.01, 20.0),
            (chi_squared.curve(15), 0.01, 45.0),
            (f_dist.curve(2, 7), 0.01, 5.0),
        ],
    )
    def test_default_windows(self, curve, x_min, x_max):
        assert curve.x_min == x_min
        assert curve.x_max == x_max
        assert curve[0].x == x_min
        assert curve[-1].x == x_max

    @pytest.mark.parametrize("num_points", [0, -5, 2.5, True])
    def test_invalid_num_points(self, num_points):
        with pytest.raises(InvalidParameter):
            normal.curve(0.0, 1.0, num_points)

    def test_invalid_window(self):
        with pytest.raises(InvalidParameter):
            Curve(lambda x: 1.0, 2.0, 1.0)
        with pytest.raises(InvalidParameter):
            Curve(lambda x: 1.0, 0.0, math.inf)

    def test_point_to_dict(self):
        assert DistributionPoint(1.5, 0.25).to_dict() == {"x": 1.5, "y": 0.25}


class TestVariants:
    """Tests for the Normal / StudentT / ChiSquared / FDist objects."""

    def test_normal_defaults_to_standard(self):
        dist = Normal()
        assert dist.cdf(0.0) == 0.5
        assert dist.inv(0.975) == pytest.approx(1.959963984540054, rel=1e-12)

    def test_methods_delegate_to_modules(self):
        dist = StudentT(TParams(7))
        assert dist.pdf(1.2) == student_t.pdf(1.2, 7)
        assert dist.cdf(1.2) == student_t.cdf(1.2, 7)
        assert dist.inv(0.9) == student_t.inv(0.9, 7)
        assert len(dist.curve(12)) == 13

    def test_options_are_used(self):
        loose = ChiSquared(ChiSquaredParams(5), SolverOptions(tolerance=1e-3))
        tight = ChiSquared(ChiSquaredParams(5))
        assert loose.inv(0.5) == pytest.approx(tight.inv(0.5), abs=1e-2)

    def test_sample_shapes(self):
        dist = make_distribution("f", df1=4, df2=6)
        assert isinstance(dist.sample(rng=3), float)
        assert dist.sample(size=5, rng=3).shape == (5,)

    def test_immutable(self):
        dist = Normal(NormalParams(1.0, 2.0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            dist.params = NormalParams()

    @pytest.mark.parametrize(
        "kind, params, cls",
        [
            ("normal", {"mean": 1.0, "sd": 2.0}, Normal),
            ("t", {"df": 5}, StudentT),
            ("chi-squared", {"df": 3}, ChiSquared),
            ("F", {"df1": 2, "df2": 8}, FDist),
            (DistributionType.STUDENT_T, {"df": 9}, StudentT),
        ],
    )
    def test_make_distribution(self, kind, params, cls):
        dist = make_distribution(kind, **params)
        assert isinstance(dist, cls)

    def test_make_distribution_unknown_type(self):
        with pytest.raises(InvalidParameter):
            make_distribution("poisson", mean=1.0)

    def test_make_distribution_wrong_params(self):
        with pytest.raises(InvalidParameter):
            make_distribution("t", mean=0.0)
        with pytest.raises(InvalidParameter):
            make_distribution("chi-squared", df=-2)

    def test_dict_roundtrip(self):
        dist = make_distribution("f", df1=3, df2=11)
        data = dist.to_dict()
        assert data == {"type": "f", "df1": 3, "df2": 11}
        assert distribution_from_dict(data) == dist

    def test_from_dict_requires_type(self):
        """A dict without a type tag is an invalid parameter, not a KeyError."""
        with pytest.raises(InvalidParameter):
            distribution_from_dict({"df": 3})

    def test_kind(self):
        assert Normal.kind is DistributionType.NORMAL
        assert FDist.kind.value == "f"
