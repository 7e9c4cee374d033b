"""Tests for the golden ratio estimates and the integer-division variant."""
import warnings

import numpy as np
import pytest

from goldenratio.config import GOLDEN_RATIO
from goldenratio.errors import IndexOutOfRangeError, NumericOverflowError
from goldenratio.numeric import FloatWidth, IntegerWidth
from goldenratio.ratio import ratio_at, ratios, truncated_ratio_at
from goldenratio.sequence import generate


def test_ratio_at_nine():
    sequence = generate(10)
    assert ratio_at(sequence, 9) == pytest.approx(34 / 21)
    assert ratio_at(sequence, 9) == pytest.approx(1.619047619, abs=1e-9)


@pytest.mark.parametrize("index", [-1, 0, 1, 10, 11])
def test_undefined_index_is_rejected(index):
    sequence = generate(10)
    with pytest.raises(IndexOutOfRangeError):
        ratio_at(sequence, index)
    with pytest.raises(IndexOutOfRangeError):
        truncated_ratio_at(sequence, index)


def test_index_error_is_an_index_error():
    with pytest.raises(IndexError):
        ratio_at(generate(10), 1)


def test_no_ratio_for_two_terms():
    with pytest.raises(IndexOutOfRangeError):
        ratio_at(generate(2), 2)


def test_truncated_ratio_is_floored():
    sequence = generate(10)

    assert truncated_ratio_at(sequence, 2) == 1.0
    assert truncated_ratio_at(sequence, 3) == 2.0
    assert truncated_ratio_at(sequence, 9) == 1.0
    assert ratio_at(sequence, 9) != truncated_ratio_at(sequence, 9)


def test_truncated_ratio_never_converges():
    sequence = generate(50)
    values = [float(value) for _, value in ratios(sequence, truncated=True)]
    assert set(values[2:]) == {1.0}


def test_error_shrinks_monotonically():
    sequence = generate(31)
    errors = [abs(float(ratio_at(sequence, i)) - GOLDEN_RATIO) for i in range(2, 31)]

    for previous, current in zip(errors, errors[1:]):
        assert current < previous


def test_estimate_reaches_double_precision():
    sequence = generate(50)
    assert abs(float(ratio_at(sequence, 49)) - GOLDEN_RATIO) < 1e-15


@pytest.mark.parametrize(
    "float_width, scalar_type",
    [
        (FloatWidth.FLOAT32, np.float32),
        (FloatWidth.FLOAT64, np.float64),
        (FloatWidth.LONGDOUBLE, np.longdouble),
    ],
)
def test_division_happens_in_requested_width(float_width, scalar_type):
    value = ratio_at(generate(31), 30, float_width)
    assert isinstance(value, scalar_type)
    assert float(value) == pytest.approx(GOLDEN_RATIO, rel=1e-6)


def test_single_precision_is_coarser_than_double():
    sequence = generate(50)
    single = abs(float(ratio_at(sequence, 49, FloatWidth.FLOAT32)) - GOLDEN_RATIO)
    double = abs(float(ratio_at(sequence, 49, FloatWidth.FLOAT64)) - GOLDEN_RATIO)
    assert single > double


def test_int32_overflow_breaks_the_estimate():
    sequence = generate(50, width=IntegerWidth.INT32)
    assert ratio_at(sequence, 46) == pytest.approx(GOLDEN_RATIO)
    assert ratio_at(sequence, 47) < 0


def test_arbitrary_precision_terms_beyond_int64():
    sequence = generate(200, capacity=200, width=IntegerWidth.ARBITRARY)
    assert ratio_at(sequence, 199) == pytest.approx(GOLDEN_RATIO, abs=1e-15)


def test_ratios_cover_every_defined_index():
    result = ratios(generate(10))
    assert [i for i, _ in result] == list(range(2, 10))
    assert float(result[0][1]) == 1.0


def test_arbitrary_terms_beyond_double_range():
    sequence = generate(1500, capacity=1500, width=IntegerWidth.ARBITRARY)
    assert sequence.to_list()[1499] > int(np.finfo(np.float64).max)

    value = ratio_at(sequence, 1499)

    assert isinstance(value, np.float64)
    assert np.isfinite(value)
    assert value == pytest.approx(GOLDEN_RATIO, abs=1e-15)


def test_arbitrary_terms_beyond_single_range():
    sequence = generate(200, capacity=200, width=IntegerWidth.ARBITRARY)
    assert sequence.to_list()[199] > int(np.finfo(np.float32).max)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        value = ratio_at(sequence, 199, FloatWidth.FLOAT32)

    assert isinstance(value, np.float32)
    assert np.isfinite(value)
    assert float(value) == pytest.approx(GOLDEN_RATIO, rel=1e-6)


def test_every_arbitrary_estimate_is_finite():
    sequence = generate(1500, capacity=1500, width=IntegerWidth.ARBITRARY)
    values = np.array([float(value) for _, value in ratios(sequence, FloatWidth.FLOAT32)])
    assert np.all(np.isfinite(values))


def test_unwidenable_term_raises_overflow_error(monkeypatch):
    def widen(self, value):
        raise OverflowError("too large")

    monkeypatch.setattr(FloatWidth, "widen", widen)

    with pytest.raises(NumericOverflowError) as exc_info:
        ratio_at(generate(10), 9, FloatWidth.FLOAT32)

    assert exc_info.value.index == 9
    assert exc_info.value.width == "float32"
    assert exc_info.value.max_safe == 187
