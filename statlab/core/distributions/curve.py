"""
Density curves for plotting.

A Curve samples a pdf at ``num_points + 1`` evenly spaced abscissae over a
closed window [x_min, x_max]. Points are computed on access, so a Curve can
be iterated any number of times without holding the points in memory.

The default windows used by the distribution modules are visualization
conventions; a fixed window can clip heavy tails (e.g. Student's t with
small df).
"""

from collections.abc import Sequence
import math
from typing import Callable, Iterator, List, Tuple

import numpy as np

from ..errors import InvalidParameter
from ..models.params import DistributionPoint


DEFAULT_NUM_POINTS = 100


class Curve(Sequence):
    """
    Lazy, restartable sequence of DistributionPoint.

    Attributes:
        x_min: Left end of the window (first point)
        x_max: Right end of the window (last point)
        num_points: Number of steps; the curve has num_points + 1 points
    """

    def __init__(
        self,
        density: Callable[[float], float],
        x_min: float,
        x_max: float,
        num_points: int = DEFAULT_NUM_POINTS,
    ):
        if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
            raise InvalidParameter(f"num_points must be an integer, got {num_points!r}")
        if num_points < 1:
            raise InvalidParameter("num_points must be at least 1")
        if not (math.isfinite(x_min) and math.isfinite(x_max)) or not x_min < x_max:
            raise InvalidParameter(f"invalid curve window [{x_min}, {x_max}]")

        self._density = density
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.num_points = int(num_points)

    @property
    def step(self) -> float:
        """Spacing between consecutive abscissae."""
        return (self.x_max - self.x_min) / self.num_points

    def _x(self, i: int) -> float:
        # Last point is pinned to x_max to avoid accumulated rounding
        if i == self.num_points:
            return self.x_max
        return self.x_min + i * self.step

    def __len__(self) -> int:
        return self.num_points + 1

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("curve index out of range")
        x = self._x(index)
        return DistributionPoint(x=x, y=self._density(x))

    def __iter__(self) -> Iterator[DistributionPoint]:
        for i in range(len(self)):
            x = self._x(i)
            yield DistributionPoint(x=x, y=self._density(x))

    def to_list(self) -> List[DistributionPoint]:
        """Materialize all points."""
        return list(self)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return the curve as (x, y) numpy arrays."""
        xs = np.array([self._x(i) for i in range(len(self))], dtype=float)
        ys = np.array([self._density(x) for x in xs], dtype=float)
        return xs, ys

    def __repr__(self) -> str:
        return f"Curve([{self.x_min:g}, {self.x_max:g}], points={len(self)})"
