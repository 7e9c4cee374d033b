"""
Configuration & Constants
=========================
This module serves as the central registry for global constants and the
settings of a single estimation run.

Exports:
    DEFAULT_CAPACITY (int): Fixed upper bound of the sequence buffer.
    DEFAULT_LENGTH (int): Number of terms generated when nothing is requested.
    GOLDEN_RATIO (float): Limit of the ratio of consecutive terms.
    RunSettings: Data class with the parameters of one run.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict

from goldenratio.numeric import IntegerWidth, FloatWidth


# Global Constants
DEFAULT_CAPACITY: int = 50
DEFAULT_LENGTH: int = 50
GOLDEN_RATIO: float = 1.6180339887498949

DEFAULT_INTEGER_WIDTH: IntegerWidth = IntegerWidth.INT64
DEFAULT_FLOAT_WIDTH: FloatWidth = FloatWidth.FLOAT64


@dataclass
class RunSettings:
    """
    Parameters of one estimation run.

    `length` is the number of generated terms, `capacity` the size of the
    buffer allocated for them.
    """
    length: int = DEFAULT_LENGTH
    capacity: int = DEFAULT_CAPACITY
    integer_width: IntegerWidth = DEFAULT_INTEGER_WIDTH
    float_width: FloatWidth = DEFAULT_FLOAT_WIDTH
    strict: bool = False
    show_truncated: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings, e.g. from the command line or a saved file
        self.integer_width = IntegerWidth(self.integer_width)
        self.float_width = FloatWidth(self.float_width)

        if self.length < 0:
            raise ValueError(f"Sequence length must be non-negative, got {self.length}.")
        if self.capacity < 0:
            raise ValueError(f"Buffer capacity must be non-negative, got {self.capacity}.")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["integer_width"] = str(self.integer_width)
        data["float_width"] = str(self.float_width)
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> RunSettings:
        return RunSettings(**data)
