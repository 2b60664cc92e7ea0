#!/usr/bin/env python3
"""
Call targets for the dispatch benchmark.

Holds the shared counter that every dispatch mode increments.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class CallTarget(ABC):
    """
    Interface whose implementation is resolved at call time.

    The polymorphic dispatch mode only ever sees the target through this type.
    """

    @abstractmethod
    def method_virtual(self) -> None:
        """Overridable benchmark method."""


@dataclass
class BenchmarkState(CallTarget):
    """
    Counter to prevent the measured loops from doing no observable work.
    """

    result: int = 0

    def method_normal(self) -> None:
        """Simple non-overridden benchmark method."""
        self.result += 1

    def method_virtual(self) -> None:
        self.result += 1
