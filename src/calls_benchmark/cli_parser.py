#!/usr/bin/env python3
"""
Command-line interface parser for the dispatch benchmark.

Defines and parses all command-line arguments for benchmark configuration.
"""

import argparse
import math
from pathlib import Path

from .benchmark_results import CYCLES
from .warmup import DEFAULT_WARMUP_SECONDS


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def non_negative_float(value: str) -> float:
    number = float(value)
    if not math.isfinite(number) or number < 0:
        raise argparse.ArgumentTypeError(f"must be a finite number >= 0, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="calls-benchmark",
        description="Method call dispatch benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default run: 10M calls per mode, 5s warm-up, one round
  calls-benchmark

  # Stability check over ten rounds, no warm-up
  calls-benchmark --rounds 10 --warmup-seconds 0

  # Quick run with progress on stderr and a JSON copy of the results
  calls-benchmark --iterations 100000 --verbose --json-output results/calls.json

Dispatch modes (in execution order):
  - NORMAL                            : plain method call (reference time)
  - VIRTUAL                           : call through an abstract interface
  - CLOSURE                           : call a closure capturing the state
  - BOUND METHOD                      : call a pre-bound method object
  - REFLECT BOUND (types.MethodType)  : method looked up by name, bound once
  - REFLECT DELEGATE (dynamic_invoke) : method looked up by name, untyped delegate
  - REFLECT INVOKE                    : method descriptor invoked per call
""",
    )

    # Benchmark parameters
    parser.add_argument(
        "--iterations", type=positive_int, default=CYCLES, help=f"Calls per mode per round (default: {CYCLES:,})"
    )
    parser.add_argument("--rounds", type=positive_int, default=1, help="Number of rounds (default: 1)")
    parser.add_argument(
        "--warmup-seconds",
        type=non_negative_float,
        default=DEFAULT_WARMUP_SECONDS,
        help=f"Warm-up budget in seconds, 0 to disable (default: {DEFAULT_WARMUP_SECONDS})",
    )
    parser.add_argument(
        "--no-gc", action="store_true", help="Do not request a garbage collection before each mode"
    )

    # Output options
    parser.add_argument("--json-output", type=Path, help="Also write results to this JSON file")
    parser.add_argument("--verbose", action="store_true", help="Print progress to standard error")

    return parser
