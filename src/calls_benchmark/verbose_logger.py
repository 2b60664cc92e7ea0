#!/usr/bin/env python3
"""
Verbose logging for benchmark progress.

Messages go to standard error so standard output only carries results.
"""

import sys
import time
from typing import TextIO


class VerboseLogger:
    """Step-oriented progress messages, silent unless verbose"""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None):
        self.verbose = verbose
        self.stream = stream
        self.start_time = time.perf_counter()
        self.step_times: dict[str, float] = {}
        self.current_step: str | None = None

    def _write(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr, flush=True)

    def _emit(self, message: str) -> None:
        if self.verbose:
            self._write(message)

    def log_step(self, step_name: str, details: str = "") -> None:
        """Close the running step with its duration and open `step_name`"""
        now = time.perf_counter()
        previous = self.current_step
        if previous is not None:
            self._emit(f"  ✓ {previous} completed in {now - self.step_times[previous]:.3f}s")

        self.current_step = step_name
        self.step_times[step_name] = now
        suffix = f" - {details}" if details else ""
        self._emit(f"[{now - self.start_time:.3f}s] {step_name}{suffix}")

    def log_info(self, message: str, indent: bool = True) -> None:
        self._emit(("  " if indent else "") + message)

    def log_substep(self, message: str) -> None:
        self._emit(f"    → {message}")

    def log_timing(self, operation: str, duration: float) -> None:
        self._emit(f"  ⏱️  {operation}: {duration:.3f}s")

    def log_error(self, message: str) -> None:
        """Errors are written even when verbose output is off."""
        self._write(f"❌ {message}")
