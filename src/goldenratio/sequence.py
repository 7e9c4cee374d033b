"""
Sequence Buffer
===============
Fixed-capacity storage for the terms of the Fibonacci sequence.

A buffer is created for every run and handed explicitly to the ratio
functions; nothing here keeps module level state.

Classes:
    SequenceBuffer: The terms of one run and the width they are stored in.

Functions:
    generate: Populate a fresh buffer with the first `n` terms.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional, TYPE_CHECKING

import numpy as np

from goldenratio.config import DEFAULT_CAPACITY, DEFAULT_INTEGER_WIDTH
from goldenratio.errors import CapacityExceededError, NumericOverflowError
from goldenratio.numeric import IntegerWidth, max_safe_length

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class SequenceBuffer:
    """
    Ordered terms indexed from 0, stored in a numpy array of fixed capacity.

    Only the first `length` slots are populated. `overflow_index` is the first
    index whose stored value differs from the exact sum of its predecessors,
    or None while every term is exact.
    """
    capacity: int = DEFAULT_CAPACITY
    width: IntegerWidth = DEFAULT_INTEGER_WIDTH
    length: int = 0
    overflow_index: Optional[int] = None
    storage: npt.NDArray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.width = IntegerWidth(self.width)
        if self.capacity < 0:
            raise ValueError(f"Buffer capacity must be non-negative, got {self.capacity}.")
        self.storage = np.zeros(self.capacity, dtype=self.width.dtype)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int):
        if not 0 <= index < self.length:
            raise IndexError(f"Term {index} is not populated (length {self.length}).")
        return self.storage[index]

    @property
    def terms(self) -> npt.NDArray:
        """View of the populated terms."""
        return self.storage[:self.length]

    @property
    def overflowed(self) -> bool:
        return self.overflow_index is not None

    def to_list(self) -> List[int]:
        return [int(term) for term in self.terms]


def generate(
    n: int,
    capacity: int = DEFAULT_CAPACITY,
    width: IntegerWidth = DEFAULT_INTEGER_WIDTH,
    strict: bool = False,
) -> SequenceBuffer:
    """
    Produce the first `n` terms of the sequence 0, 1, 1, 2, 3, 5, ...

    Terms that do not fit a fixed-width integer wrap around exactly as the
    native representation does. The wrapped value is kept so the limitation
    stays visible, and the first such index is recorded on the buffer.

    Args:
        n: Number of terms to generate.
        capacity: Size of the buffer allocated for the terms.
        width: Integer representation of the terms.
        strict: Raise on the first overflow instead of keeping the wrapped value.

    Raises:
        ValueError: If `n` is negative.
        CapacityExceededError: If `n` exceeds `capacity`.
        NumericOverflowError: If `strict` is set and a term overflows `width`.

    Returns:
        A fully populated buffer of length `n`.
    """
    if n < 0:
        raise ValueError(f"Sequence length must be non-negative, got {n}.")
    if n > capacity:
        logger.error(f"Cannot generate {n} terms into a buffer of capacity {capacity}.")
        raise CapacityExceededError(n, capacity)

    buffer = SequenceBuffer(capacity=capacity, width=width)
    terms = buffer.storage

    if n > 1:
        terms[1] = 1

    # Scalar overflow of fixed-width numpy integers wraps; the check below reports it
    with np.errstate(over="ignore"):
        for i in range(2, n):
            terms[i] = terms[i - 1] + terms[i - 2]

            if buffer.overflow_index is None and int(terms[i]) != int(terms[i - 1]) + int(terms[i - 2]):
                buffer.overflow_index = i
                safe = max_safe_length(buffer.width)
                if strict:
                    raise NumericOverflowError(i, str(buffer.width), safe)
                logger.warning(
                    f"Term {i} overflows {buffer.width} (stored as {int(terms[i])}); "
                    f"results past length {safe} are not meaningful."
                )

    buffer.length = n
    logger.debug(f"Generated {n} terms as {buffer.width}.")
    return buffer
