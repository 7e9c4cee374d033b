"""
Ratio Estimator
===============
Runs one complete estimation: generate the sequence, then estimate the golden
ratio at every defined index.

Classes:
    EstimationRun: Result of a single run.
    RatioEstimator: Orchestrates generation and ratio computation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional, Tuple

import numpy as np

from goldenratio.config import GOLDEN_RATIO, RunSettings
from goldenratio.numeric import max_safe_length
from goldenratio.ratio import ratio_at, ratios, truncated_ratio_at
from goldenratio.sequence import SequenceBuffer, generate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimationRun:
    """
    Result of one run: the settings used, the generated sequence and the
    `(i, ratio)` pairs computed from it.

    `truncated_ratios` is empty unless the settings asked for them.
    """
    settings: RunSettings
    sequence: SequenceBuffer
    ratios: List[Tuple[int, np.floating]]
    truncated_ratios: List[Tuple[int, np.floating]] = field(default_factory=list)

    @property
    def final_ratio(self) -> Optional[np.floating]:
        """Estimate at the highest defined index, if any."""
        if not self.ratios:
            return None
        return self.ratios[-1][1]

    @property
    def final_error(self) -> Optional[float]:
        """Absolute distance of the final estimate from the golden ratio."""
        if self.final_ratio is None:
            return None
        return abs(float(self.final_ratio) - GOLDEN_RATIO)


class RatioEstimator:
    """
    Estimates the golden ratio from consecutive Fibonacci terms.

    The estimator only holds the settings; every call to `generate` or `run`
    creates a new buffer that belongs to the caller.
    """

    def __init__(self, settings: Optional[RunSettings] = None) -> None:
        self.settings = settings or RunSettings()

    def generate(self, n: Optional[int] = None) -> SequenceBuffer:
        s = self.settings
        return generate(
            s.length if n is None else n,
            capacity=s.capacity,
            width=s.integer_width,
            strict=s.strict,
        )

    def ratio_at(self, sequence: SequenceBuffer, i: int) -> np.floating:
        return ratio_at(sequence, i, self.settings.float_width)

    def truncated_ratio_at(self, sequence: SequenceBuffer, i: int) -> np.floating:
        return truncated_ratio_at(sequence, i, self.settings.float_width)

    def run(self) -> EstimationRun:
        s = self.settings
        logger.info(
            f"Estimating golden ratio from {s.length} terms "
            f"({s.integer_width} terms, {s.float_width} division)."
        )

        safe = max_safe_length(s.integer_width)
        if safe is not None and s.length > safe:
            logger.warning(
                f"{s.integer_width} holds at most {safe} terms; {s.length} were requested."
            )

        sequence = self.generate()
        run = EstimationRun(
            settings=s,
            sequence=sequence,
            ratios=ratios(sequence, s.float_width),
            truncated_ratios=ratios(sequence, s.float_width, truncated=True) if s.show_truncated else [],
        )

        if run.final_ratio is not None:
            logger.info(f"Final estimate {float(run.final_ratio):.16f} (error {run.final_error:.3e}).")
        return run
