"""statlab.core.sampling.batch

Batches of independent random draws.

Every function takes an explicit random source (numpy Generator, int seed or
None) and returns a numpy array of ``n`` draws in generation order.
"""

from __future__ import annotations

import math

import numpy as np

from ..errors import InvalidParameter
from ..models.params import NormalParams
from .variates import (
    RandomSource,
    draw,
    exponential_variate,
    normal_variate,
    uniform_variate,
)


def _check_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise InvalidParameter(f"n must be a non-negative integer, got {n!r}")
    return int(n)


def normal(n: int, mean: float = 0.0, sd: float = 1.0, rng: RandomSource = None) -> np.ndarray:
    """``n`` draws from N(mean, sd)."""
    NormalParams(mean, sd)
    return draw(lambda gen: normal_variate(gen, mean, sd), _check_count(n), rng)


def uniform(n: int, low: float = 0.0, high: float = 1.0, rng: RandomSource = None) -> np.ndarray:
    """``n`` draws from Uniform[low, high)."""
    if not (math.isfinite(low) and math.isfinite(high)) or not low < high:
        raise InvalidParameter(f"uniform bounds must satisfy low < high, got [{low}, {high}]")
    return draw(lambda gen: uniform_variate(gen, low, high), _check_count(n), rng)


def exponential(n: int, rate: float = 1.0, rng: RandomSource = None) -> np.ndarray:
    """``n`` draws from Exponential(rate)."""
    if not (math.isfinite(rate) and rate > 0):
        raise InvalidParameter(f"rate must be positive, got {rate}")
    return draw(lambda gen: exponential_variate(gen, rate), _check_count(n), rng)


def bimodal(
    n: int,
    mean1: float,
    sd1: float,
    mean2: float,
    sd2: float,
    mix: float = 0.5,
    rng: RandomSource = None,
) -> np.ndarray:
    """``n`` draws from a two-component normal mixture.

    Each draw first picks component 1 with probability ``mix`` (otherwise
    component 2), then draws from that component's normal distribution.

    Args:
        n: number of draws
        mean1, sd1: first component
        mean2, sd2: second component
        mix: probability of the first component, in [0, 1]
        rng: random source

    Returns:
        numpy array of ``n`` draws
    """
    NormalParams(mean1, sd1)
    NormalParams(mean2, sd2)
    if not (isinstance(mix, (int, float)) and 0.0 <= mix <= 1.0):
        raise InvalidParameter(f"mix must be in [0,1], got {mix!r}")

    def mixture_variate(gen: np.random.Generator) -> float:
        if gen.random() < mix:
            return normal_variate(gen, mean1, sd1)
        return normal_variate(gen, mean2, sd2)

    return draw(mixture_variate, _check_count(n), rng)
