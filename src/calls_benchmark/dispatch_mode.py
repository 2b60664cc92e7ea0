#!/usr/bin/env python3
"""
Abstract dispatch mode interface.

Defines the contract that every call mechanism under measurement must follow.
"""

from abc import ABC, abstractmethod

from .benchmark_state import BenchmarkState


class DispatchMode(ABC):
    """
    Abstract base class for one way of invoking the benchmark method.

    A mode is bound to the shared state once, before timing starts; bind() is
    where any name lookup happens. run() then performs exactly one increment of
    the shared counter per iteration through the mode's call mechanism.
    """

    name: str = ""

    def __init__(self):
        self._state: BenchmarkState | None = None

    def get_mode_name(self) -> str:
        """Return the display name used in the report line."""
        return self.name

    @property
    def state(self) -> BenchmarkState:
        if self._state is None:
            raise RuntimeError(f"{self.__class__.__name__} is not bound to a benchmark state")
        return self._state

    @property
    def is_bound(self) -> bool:
        return self._state is not None

    def bind(self, state: BenchmarkState) -> None:
        """
        Prepare the call mechanism against `state`.

        Subclasses build their callable here and must call super().bind().
        """
        self._state = state

    def check_ready(self, iterations: int) -> None:
        """Raise before timing starts if the mode cannot perform `iterations` calls."""
        if not self.is_bound:
            raise RuntimeError(f"{self.__class__.__name__} is not bound to a benchmark state")
        if iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {iterations}")

    @abstractmethod
    def run(self, iterations: int) -> None:
        """
        Invoke the benchmark method `iterations` times.

        Implementations call check_ready() before entering their loop.
        """
