"""Golden ratio estimation from Fibonacci terms, with explicit numeric widths."""
from goldenratio.config import GOLDEN_RATIO, RunSettings
from goldenratio.errors import (
    CapacityExceededError,
    IndexOutOfRangeError,
    NumericOverflowError,
    RatioEstimatorError,
)
from goldenratio.estimator import EstimationRun, RatioEstimator
from goldenratio.numeric import FloatWidth, IntegerWidth, max_safe_length
from goldenratio.ratio import ratio_at, ratios, truncated_ratio_at
from goldenratio.sequence import SequenceBuffer, generate

__all__ = [
    "GOLDEN_RATIO",
    "RunSettings",
    "CapacityExceededError",
    "IndexOutOfRangeError",
    "NumericOverflowError",
    "RatioEstimatorError",
    "EstimationRun",
    "RatioEstimator",
    "FloatWidth",
    "IntegerWidth",
    "max_safe_length",
    "ratio_at",
    "ratios",
    "truncated_ratio_at",
    "SequenceBuffer",
    "generate",
]
