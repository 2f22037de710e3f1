"""Inference layer: hypothesis tests, standard errors, confidence intervals,
effect sizes and power analysis, composed from the distribution engine.
"""

from . import standard_error
from . import hypothesis
from . import confidence
from . import effect_size
from . import power

__all__ = [
    "standard_error",
    "hypothesis",
    "confidence",
    "effect_size",
    "power",
]
