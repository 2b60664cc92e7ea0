#!/usr/bin/env python3
"""
Time tracking utilities for benchmark measurement.

Provides the monotonic Timer used around every dispatch loop and structured
tracking for all phases of a benchmark run.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union


def measure(func: Callable[[], object]) -> float:
    """
    Run `func` and return the elapsed wall-clock time in seconds.

    Exceptions raised by `func` propagate unchanged.
    """
    start = time.perf_counter()
    func()
    return time.perf_counter() - start


@dataclass
class TimeLog:
    """
    Tracks timing for each step of the benchmark process.

    All times are in seconds (float).
    """

    # Preparation steps
    method_lookup: Union[float, None] = None
    warmup: Union[float, None] = None
    gc_priming: float = 0.0

    # One {mode name: elapsed} mapping per round, in execution order
    round_times: list[dict[str, float]] = field(default_factory=list)

    def start_timer(self) -> float:
        """Start a timer and return the start time."""
        return time.perf_counter()

    def end_timer(self, start_time: float) -> float:
        """End a timer and return elapsed time in seconds."""
        return time.perf_counter() - start_time

    def start_round(self) -> None:
        self.round_times.append({})

    def add_mode_time(self, mode_name: str, duration: float) -> None:
        """Record a mode's elapsed time in the current round."""
        if not self.round_times:
            self.start_round()
        self.round_times[-1][mode_name] = duration

    def get_round_total(self, round_index: int) -> float:
        """Total measured time of one round (0-based index)."""
        return sum(self.round_times[round_index].values())

    def get_average_mode_time(self, mode_name: str) -> float:
        """Average elapsed time of a mode over all rounds it ran in."""
        times = [times[mode_name] for times in self.round_times if mode_name in times]
        if not times:
            return 0.0
        return sum(times) / len(times)

    def get_total_time(self) -> float:
        """Total measured time across every mode and round."""
        return sum(sum(times.values()) for times in self.round_times)

    def get_overhead_time(self) -> float:
        """Time spent outside the measured loops (lookup, warm-up, GC priming)."""
        total = self.gc_priming
        for value in (self.method_lookup, self.warmup):
            if value is not None:
                total += value
        return total
