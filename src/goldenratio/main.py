"""
Command Line Entry Point
========================
Parses the run settings, executes one estimation and prints the report.

Usage:
    $ python -m goldenratio -n 50 --int-width int32 --show-truncated
"""
from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional, Sequence

from goldenratio.config import DEFAULT_CAPACITY, DEFAULT_LENGTH, RunSettings
from goldenratio.errors import RatioEstimatorError
from goldenratio.estimator import RatioEstimator
from goldenratio.io import IOManager
from goldenratio.logging_config import setup_logging
from goldenratio.numeric import FloatWidth, IntegerWidth
from goldenratio.report import plot_convergence, print_run

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="goldenratio",
        description="Estimate the golden ratio from consecutive Fibonacci terms.",
    )
    parser.add_argument("-n", "--length", type=int, default=DEFAULT_LENGTH, help="Number of terms to generate")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="Size of the sequence buffer")
    parser.add_argument(
        "--int-width",
        choices=[str(width) for width in IntegerWidth],
        default=str(IntegerWidth.INT64),
        help="Integer representation of the terms",
    )
    parser.add_argument(
        "--float-width",
        choices=[str(width) for width in FloatWidth],
        default=str(FloatWidth.FLOAT64),
        help="Floating-point representation used for the division",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on the first integer overflow")
    parser.add_argument(
        "--show-truncated",
        action="store_true",
        help="Also print the ratio computed with integer division",
    )
    parser.add_argument("--plot", action="store_true", help="Show a convergence plot")
    parser.add_argument("--save", metavar="PATH", help="Save the run to an HDF5 file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _parse_args(list(argv) if argv is not None else None)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        settings = RunSettings(
            length=args.length,
            capacity=args.capacity,
            integer_width=args.int_width,
            float_width=args.float_width,
            strict=args.strict,
            show_truncated=args.show_truncated,
        )
        run = RatioEstimator(settings).run()
    except (RatioEstimatorError, ValueError) as e:
        logger.error(f"Estimation failed: {e}")
        return 2

    print_run(run)

    if args.save:
        IOManager.save_run(run, args.save)

    if args.plot:
        plot_convergence(run)

    return 0
