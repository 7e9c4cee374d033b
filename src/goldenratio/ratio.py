"""
Ratio of Consecutive Terms
==========================
Two named ways of dividing term[i] by term[i-1]:

* `ratio_at` widens both terms to a non-integer representation first and
  divides afterwards. This converges to the golden ratio. Fixed-width terms
  are widened to the float width; arbitrary precision terms become an exact
  `Fraction`, which is rounded to the float width only after the division,
  so terms beyond the float range still give a finite estimate.
* `truncated_ratio_at` divides the native integers first and converts the
  quotient afterwards. The quotient is floored, so the result is stuck at
  1.0 (or 2.0 for i = 3). It is kept on purpose to show the conversion bug.
"""
from __future__ import annotations

import logging
from fractions import Fraction
from typing import List, Tuple

import numpy as np

from goldenratio.config import DEFAULT_FLOAT_WIDTH
from goldenratio.errors import IndexOutOfRangeError, NumericOverflowError
from goldenratio.numeric import FloatWidth, max_safe_length
from goldenratio.sequence import SequenceBuffer

logger = logging.getLogger(__name__)


def _check_index(sequence: SequenceBuffer, i: int) -> None:
    if not 2 <= i < len(sequence):
        raise IndexOutOfRangeError(i, len(sequence))


def ratio_at(
    sequence: SequenceBuffer,
    i: int,
    float_width: FloatWidth = DEFAULT_FLOAT_WIDTH,
) -> np.floating:
    """
    Estimate the golden ratio as term[i] / term[i-1].

    Args:
        sequence: A populated sequence buffer.
        i: Index of the numerator term, 2 <= i < len(sequence).
        float_width: Floating-point width the division is performed in.

    Raises:
        IndexOutOfRangeError: If term[i] or term[i-1] is undefined.
        NumericOverflowError: If a fixed-width term does not fit `float_width`.

    Returns:
        The ratio as a numpy floating scalar of `float_width`.
    """
    _check_index(sequence, i)
    float_width = FloatWidth(float_width)

    if not sequence.width.is_fixed:
        return float_width.narrow(Fraction(int(sequence[i]), int(sequence[i - 1])))

    try:
        numerator = float_width.widen(sequence[i])
        denominator = float_width.widen(sequence[i - 1])
    except OverflowError as e:
        logger.error(f"Cannot widen term {i} to {float_width}: {e}")
        raise NumericOverflowError(i, str(float_width), max_safe_length(float_width)) from e
    return numerator / denominator


def truncated_ratio_at(
    sequence: SequenceBuffer,
    i: int,
    float_width: FloatWidth = DEFAULT_FLOAT_WIDTH,
) -> np.floating:
    """
    Integer-division variant of `ratio_at`.

    The quotient is computed on the stored integers and only then converted,
    which floors it. Same arguments and errors as `ratio_at`.
    """
    _check_index(sequence, i)
    float_width = FloatWidth(float_width)

    quotient = sequence[i] // sequence[i - 1]
    return float_width.widen(quotient)


def ratios(
    sequence: SequenceBuffer,
    float_width: FloatWidth = DEFAULT_FLOAT_WIDTH,
    truncated: bool = False,
) -> List[Tuple[int, np.floating]]:
    """All defined `(i, ratio)` pairs of a sequence, in index order."""
    estimate = truncated_ratio_at if truncated else ratio_at
    result = [(i, estimate(sequence, i, float_width)) for i in range(2, len(sequence))]
    logger.debug(f"Computed {len(result)} {'truncated ' if truncated else ''}ratios in {float_width}.")
    return result
