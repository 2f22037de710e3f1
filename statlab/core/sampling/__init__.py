"""Random sampling driven by an explicit numpy Generator."""

from .variates import (
    resolve_rng,
    uniform_variate,
    normal_variate,
    exponential_variate,
    inverse_transform_variate,
)
from .batch import normal, uniform, exponential, bimodal

__all__ = [
    "resolve_rng",
    "uniform_variate",
    "normal_variate",
    "exponential_variate",
    "inverse_transform_variate",
    "normal",
    "uniform",
    "exponential",
    "bimodal",
]
