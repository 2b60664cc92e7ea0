#!/usr/bin/env python3
"""
Method call dispatch benchmark - main entry point.

Measures the relative cost of seven ways to invoke a method, each timed over
the same number of calls and reported relative to a plain method call.
"""

import sys

from .benchmark_runner import run_benchmarks
from .cli_parser import create_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the benchmark."""
    parser = create_parser()
    args = parser.parse_args(argv)

    return run_benchmarks(args)


if __name__ == "__main__":
    sys.exit(main())
