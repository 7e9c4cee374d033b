"""
Run Report
==========
Text and plot output of an estimation run.

Text layout:
    one line per index: "<i> <ratio>" (plus the truncated ratio when requested)
    one final line with all generated terms separated by spaces
"""
from __future__ import annotations

import logging
from typing import List, Optional, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from goldenratio.config import GOLDEN_RATIO

if TYPE_CHECKING:
    from matplotlib.figure import Figure
    from goldenratio.estimator import EstimationRun

logger = logging.getLogger(__name__)

RATIO_DECIMALS = 16


def format_ratio(value: np.floating) -> str:
    """Fixed number of decimals, taken from the value in its own width."""
    return np.format_float_positional(value, precision=RATIO_DECIMALS, unique=False)


def format_run(run: EstimationRun) -> List[str]:
    lines = []
    truncated = dict(run.truncated_ratios)
    for i, value in run.ratios:
        line = f"{i} {format_ratio(value)}"
        if i in truncated:
            line += f" {format_ratio(truncated[i])}"
        lines.append(line)

    lines.append(" ".join(str(term) for term in run.sequence.to_list()))
    return lines


def print_run(run: EstimationRun) -> None:
    for line in format_run(run):
        print(line)


def plot_convergence(run: EstimationRun, show: bool = True, filename: Optional[str] = None) -> Figure:
    """
    Plot the distance of every estimate from the golden ratio.

    Args:
        run: Finished estimation run.
        show: Open an interactive window.
        filename: Optional path to save the figure to.

    Returns:
        The matplotlib figure.
    """
    indices = np.array([i for i, _ in run.ratios], dtype=np.int64)
    errors = np.array([abs(float(value) - GOLDEN_RATIO) for _, value in run.ratios])
    # Exact hits would vanish on a log axis
    errors = np.maximum(errors, np.finfo(np.float64).tiny)

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 5))
    ax = fig.add_subplot()

    ax.semilogy(indices, errors, 'b.-', lw=1.5, label=f"{run.settings.float_width} division")

    if run.truncated_ratios:
        truncated_errors = np.array([abs(float(value) - GOLDEN_RATIO) for _, value in run.truncated_ratios])
        ax.semilogy(indices, truncated_errors, 'r.--', lw=1.0, label="integer division")

    if run.sequence.overflowed:
        ax.axvline(run.sequence.overflow_index, color='gray', linestyle=':', label=f"{run.settings.integer_width} overflow")

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    ax.set_title("Convergence to the Golden Ratio")
    ax.set_xlabel("Index i")
    ax.set_ylabel("|term[i] / term[i-1] - φ|")
    ax.legend()

    if filename:
        fig.savefig(filename)
        logger.info(f"Convergence plot saved to: {filename}")
    if show:
        plt.show()
    return fig
