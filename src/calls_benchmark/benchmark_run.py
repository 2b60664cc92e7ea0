#!/usr/bin/env python3
"""
Benchmark run configuration and context.

Defines the BenchRun class that encapsulates all benchmark execution parameters.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from .benchmark_results import CYCLES, Measurement
from .benchmark_state import BenchmarkState
from .dispatch_modes import DEFAULT_METHOD_NAME
from .mode_factory import get_available_modes
from .time_tracking import TimeLog
from .warmup import DEFAULT_WARMUP_SECONDS


@dataclass
class BenchRun:
    """
    Configuration and execution context for a benchmark run.

    This class encapsulates all the information needed to run the benchmark
    and stores the measurements and timing information.
    """

    # Benchmark configuration
    iterations: int = CYCLES
    rounds: int = 1
    warmup_seconds: float = DEFAULT_WARMUP_SECONDS
    collect_garbage: bool = True

    # Method resolved by name in the reflective modes
    method_name: str = DEFAULT_METHOD_NAME
    mode_ids: list[str] = field(default_factory=get_available_modes)

    # Results and timing (populated during execution)
    state: BenchmarkState = field(default_factory=BenchmarkState)
    time_log: TimeLog = field(default_factory=TimeLog)
    measurements: list[Measurement] = field(default_factory=list)
    total_seconds: float = 0.0

    # Execution state
    is_executed: bool = False
    execution_error: str | None = None

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")
        if not math.isfinite(self.warmup_seconds) or self.warmup_seconds < 0:
            raise ValueError(f"warmup_seconds must be a finite number >= 0, got {self.warmup_seconds}")
        if not self.mode_ids:
            raise ValueError("at least one dispatch mode is required")

    def expected_calls(self, mode_count: int | None = None) -> int:
        """Increments the counter must receive over the whole run."""
        if mode_count is None:
            mode_count = len(self.mode_ids)
        return self.iterations * mode_count * self.rounds

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "config": {
                "iterations": self.iterations,
                "rounds": self.rounds,
                "warmup_seconds": self.warmup_seconds,
                "collect_garbage": self.collect_garbage,
                "method_name": self.method_name,
                "modes": list(self.mode_ids),
            },
            "measurements": [measurement.to_dict() for measurement in self.measurements],
            "result": self.state.result,
            "total_seconds": self.total_seconds,
            "is_executed": self.is_executed,
            "execution_error": self.execution_error,
        }
