#!/usr/bin/env python3
"""
Benchmark measurements and derived metrics.

Contains the per-mode output data of a completed round.
"""

from dataclasses import dataclass
from typing import Any

# Count of iterations performed by every mode
CYCLES = 10_000_000

# Lower bound applied to durations before dividing by them
MIN_DURATION = 0.0001


def calls_per_second_millions(iterations: int, duration: float) -> float:
    """Throughput in millions of calls per second."""
    return (iterations / max(duration, MIN_DURATION)) / 1_000_000


def percent_of_reference(duration: float, reference: float) -> float:
    """Duration as a percentage of the reference duration."""
    return (max(duration, MIN_DURATION) / max(reference, MIN_DURATION)) * 100


@dataclass
class Measurement:
    """
    Timing of one dispatch mode in one round.
    """

    name: str
    elapsed_seconds: float
    reference_seconds: float
    iterations: int = CYCLES
    round_index: int = 1

    @property
    def calls_per_second_millions(self) -> float:
        return calls_per_second_millions(self.iterations, self.elapsed_seconds)

    @property
    def percent_of_reference(self) -> float:
        return percent_of_reference(self.elapsed_seconds, self.reference_seconds)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "round": self.round_index,
            "name": self.name,
            "elapsed_seconds": self.elapsed_seconds,
            "reference_seconds": self.reference_seconds,
            "calls_per_second_millions": self.calls_per_second_millions,
            "percent_of_reference": self.percent_of_reference,
        }
