"""
Result types returned by the inference layer.
"""

from .inference_result import ConfidenceInterval, HypothesisTestResult

__all__ = ["ConfidenceInterval", "HypothesisTestResult"]
