"""
Numeric Width Policy
====================
Maps the supported integer and floating-point representations onto numpy
dtypes and answers how long a sequence each integer width can hold.

Every conversion between the two families goes through `FloatWidth.widen`
(integer to float) or `FloatWidth.narrow` (exact rational to float), so no
division ever relies on numpy's automatic type promotion.
"""
from __future__ import annotations

from enum import StrEnum
from fractions import Fraction
from functools import cache
from typing import Any, Optional, Union

import numpy as np


class IntegerWidth(StrEnum):
    INT32 = "int32"
    INT64 = "int64"
    ARBITRARY = "arbitrary"

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype used for the sequence buffer."""
        if self is IntegerWidth.ARBITRARY:
            # Object arrays hold plain Python ints, which never overflow
            return np.dtype(object)
        return np.dtype(self.value)

    @property
    def is_fixed(self) -> bool:
        return self is not IntegerWidth.ARBITRARY

    @property
    def max_value(self) -> Optional[int]:
        """Largest representable term, or None for arbitrary precision."""
        if not self.is_fixed:
            return None
        return int(np.iinfo(self.dtype).max)


class FloatWidth(StrEnum):
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    LONGDOUBLE = "longdouble"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def epsilon(self) -> float:
        return float(np.finfo(self.dtype).eps)

    def widen(self, value: Any) -> np.floating:
        """
        Explicitly convert an integer term to this floating-point width.

        Args:
            value: A numpy integer scalar or a Python int.

        Raises:
            OverflowError: If the value is beyond the range of this width.

        Returns:
            The value as a numpy floating scalar of this width.
        """
        try:
            # float32 and longdouble saturate to inf, float64 raises
            with np.errstate(over="ignore"):
                widened = self.dtype.type(int(value))
        except OverflowError:
            widened = None

        if widened is None or not np.isfinite(widened):
            raise OverflowError(f"Integer of {int(value).bit_length()} bits does not fit {self}.")
        return widened

    def narrow(self, value: Fraction) -> np.floating:
        """
        Round an exact rational to this floating-point width.

        Extended precision is rounded through float64 first.
        """
        return self.dtype.type(float(value))

    @property
    def max_value(self) -> int:
        """Largest finite value, as an integer."""
        return int(np.finfo(self.dtype).max)


@cache
def max_safe_length(width: Union[IntegerWidth, FloatWidth]) -> Optional[int]:
    """
    Largest sequence length whose last term fits into the given width.

    Args:
        width: Integer representation of the sequence terms, or the
            floating-point width the terms are widened to.

    Returns:
        47 for int32, 93 for int64, 187 for float32, None when the width
        is unbounded.
    """
    if not isinstance(width, FloatWidth):
        width = IntegerWidth(width)
    limit = width.max_value
    if limit is None:
        return None

    previous, current = 0, 1
    length = 2
    while previous + current <= limit:
        previous, current = current, previous + current
        length += 1
    return length
