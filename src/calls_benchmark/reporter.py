#!/usr/bin/env python3
"""
Result formatting for the dispatch benchmark.

Writes one line per measured mode to standard output, e.g.

    NORMAL :: 0.4213s (23.74mil. calls/sec) (100.0%)
"""

from .benchmark_results import CYCLES, calls_per_second_millions, percent_of_reference


def format_info(name: str, duration: float, reference: float, iterations: int = CYCLES) -> str:
    """Build the report line for one mode."""
    parts = [
        name,
        "::",
        f"{duration:.4f}s",
        f"({calls_per_second_millions(iterations, duration):.2f}mil. calls/sec)",
        f"({percent_of_reference(duration, reference):.1f}%)",
    ]
    return " ".join(parts)


def print_info(name: str, duration: float, reference: float, iterations: int = CYCLES) -> None:
    print(format_info(name, duration, reference, iterations), flush=True)


def print_round_header(round_index: int, rounds: int) -> None:
    print(f"--- round {round_index}/{rounds} ---", flush=True)


def print_summary(result: int, total: float) -> None:
    print(f"Result: {result} => {total:.4f}", flush=True)
