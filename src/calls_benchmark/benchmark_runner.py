#!/usr/bin/env python3
"""
Benchmark runner and orchestration logic.

Handles benchmark execution, cleanup, and result reporting.
"""

import gc
import json
from pathlib import Path

from .benchmark_results import CYCLES
from .benchmark_run import BenchRun
from .benchmark_suite import BenchmarkSuite
from .reflection import MethodLookupError
from .reporter import print_summary
from .verbose_logger import VerboseLogger
from .warmup import DEFAULT_WARMUP_SECONDS


def run(
    rounds: int = 1,
    iterations: int = CYCLES,
    warmup_seconds: float = DEFAULT_WARMUP_SECONDS,
    collect_garbage: bool = True,
) -> float:
    """
    Run every dispatch mode `rounds` times and return the total measured seconds.

    Prints one line per mode per round followed by the summary line.
    """
    bench_run = BenchRun(
        iterations=iterations,
        rounds=rounds,
        warmup_seconds=warmup_seconds,
        collect_garbage=collect_garbage,
    )
    total = BenchmarkSuite().execute_all(bench_run)
    print_summary(bench_run.state.result, total)
    return total


def run_benchmarks(args) -> int:
    """
    Execute the benchmark based on parsed command-line arguments.

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Process exit code
    """
    logger = VerboseLogger(verbose=args.verbose)

    bench_run = BenchRun(
        iterations=args.iterations,
        rounds=args.rounds,
        warmup_seconds=args.warmup_seconds,
        collect_garbage=not args.no_gc,
    )
    suite = BenchmarkSuite(logger)
    suite.create_modes(bench_run)
    logger.log_info(
        f"📋 {len(suite.modes)} modes x {bench_run.iterations:,} calls x {bench_run.rounds} round(s)", indent=False
    )

    try:
        total = suite.execute_all(bench_run)
    except MethodLookupError as e:
        logger.log_error(f"Method lookup failed, cannot run benchmark: {e}")
        return 1
    except KeyboardInterrupt:
        logger.log_error("Benchmark interrupted by user")
        return 1

    print_summary(bench_run.state.result, total)

    if args.json_output is not None:
        write_results(bench_run, args.json_output)
        logger.log_info(f"💾 Results written to {args.json_output}", indent=False)

    perform_final_cleanup(logger)
    return 0


def write_results(bench_run: BenchRun, path: Path) -> None:
    """Write the run configuration and measurements as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(bench_run.to_dict(), f, indent=2)
        f.write("\n")


def perform_final_cleanup(logger: VerboseLogger) -> None:
    """Release whatever the run left for the collector."""
    logger.log_step("CLEANUP")
    collected = gc.collect()
    logger.log_info(f"🔄 Final cleanup collected {collected} objects")
