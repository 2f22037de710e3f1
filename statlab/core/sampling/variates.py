"""statlab.core.sampling.variates

Scalar random variates driven by an explicit numpy Generator.

The random source is always a parameter. ``resolve_rng`` turns the accepted
forms (Generator, int seed, None) into a Generator; None gives a fresh
generator private to the call, never a module-level one.

Methods:
- Uniform: affine map of Generator.random()
- Normal: Box-Muller transform (one of the pair is used per draw)
- Exponential: inverse transform, -ln(U) / rate
- Any distribution with a quantile function: inverse transform inv(U)
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Union

import numpy as np

from ..errors import InvalidParameter
from ..models.params import NormalParams

RandomSource = Union[np.random.Generator, int, None]


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a numpy Generator for the given random source.

    Args:
        rng: Generator (used as is), int seed, or None for a fresh generator

    Returns:
        numpy.random.Generator
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise InvalidParameter(f"rng must be a numpy Generator, an int seed or None, got {rng!r}")


def uniform_open(rng: np.random.Generator) -> float:
    """Uniform draw on the open interval (0, 1)."""
    u = rng.random()
    while u == 0.0:
        u = rng.random()
    return float(u)


def uniform_variate(rng: np.random.Generator, low: float = 0.0, high: float = 1.0) -> float:
    """Uniform draw on [low, high)."""
    if not (math.isfinite(low) and math.isfinite(high)) or not low < high:
        raise InvalidParameter(f"uniform bounds must satisfy low < high, got [{low}, {high}]")
    return low + (high - low) * float(rng.random())


def normal_variate(rng: np.random.Generator, mean: float = 0.0, sd: float = 1.0) -> float:
    """Normal draw by the Box-Muller transform."""
    NormalParams(mean, sd)
    u1 = uniform_open(rng)
    u2 = float(rng.random())
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
    return mean + sd * z


def exponential_variate(rng: np.random.Generator, rate: float = 1.0) -> float:
    """Exponential draw with the given rate (mean 1/rate)."""
    if not (math.isfinite(rate) and rate > 0):
        raise InvalidParameter(f"rate must be positive, got {rate}")
    return -math.log(uniform_open(rng)) / rate


def inverse_transform_variate(rng: np.random.Generator, inv: Callable[[float], float]) -> float:
    """Draw by inverse transform: inv(U) with U uniform on (0, 1)."""
    return float(inv(uniform_open(rng)))


def draw(
    variate: Callable[[np.random.Generator], float],
    size: Optional[int] = None,
    rng: RandomSource = None,
) -> Union[float, np.ndarray]:
    """Draw one value (size=None) or an array of ``size`` independent values.

    Args:
        variate: function producing one draw from a Generator
        size: number of draws, or None for a scalar
        rng: random source (see resolve_rng)

    Returns:
        float, or numpy array of length ``size``
    """
    gen = resolve_rng(rng)
    if size is None:
        return variate(gen)
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 0:
        raise InvalidParameter(f"size must be a non-negative integer, got {size!r}")
    out = np.empty(int(size), dtype=float)
    for i in range(int(size)):
        out[i] = variate(gen)
    return out
