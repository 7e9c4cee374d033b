"""Exceptions raised by the ratio estimator."""
from __future__ import annotations

from typing import Optional


class RatioEstimatorError(Exception):
    """Base class for all estimator failures."""


class CapacityExceededError(RatioEstimatorError, ValueError):
    """Raised when more terms are requested than the buffer can hold."""

    def __init__(self, requested: int, capacity: int) -> None:
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"Requested {requested} terms, but the sequence buffer holds at most {capacity}."
        )


class IndexOutOfRangeError(RatioEstimatorError, IndexError):
    """Raised when a ratio is requested for an index without two defined terms."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"Ratio index {index} is undefined; it must satisfy 2 <= i < {length}."
        )


class NumericOverflowError(RatioEstimatorError, OverflowError):
    """Raised in strict mode when a term does not fit the integer width."""

    def __init__(self, index: int, width: str, max_safe: Optional[int] = None) -> None:
        self.index = index
        self.width = width
        self.max_safe = max_safe
        super().__init__(
            f"Term {index} overflows {width}; the largest safe length is {max_safe}."
        )
