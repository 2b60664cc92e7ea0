#!/usr/bin/env python3
"""
Method call dispatch benchmark.

Compares direct, polymorphic, closure, bound-method and reflective calls by
timing the same trivial increment through each mechanism.
"""

from .benchmark_results import CYCLES, Measurement
from .benchmark_run import BenchRun
from .benchmark_runner import run, run_benchmarks
from .benchmark_state import BenchmarkState, CallTarget
from .benchmark_suite import BenchmarkSuite
from .cli_parser import create_parser
from .dispatch_mode import DispatchMode
from .mode_factory import create_mode, get_available_modes
from .reflection import MethodLookupError
from .reporter import format_info, print_info
from .time_tracking import TimeLog, measure

__all__ = [
    "CYCLES",
    "BenchRun",
    "BenchmarkState",
    "BenchmarkSuite",
    "CallTarget",
    "DispatchMode",
    "Measurement",
    "MethodLookupError",
    "TimeLog",
    "create_mode",
    "create_parser",
    "format_info",
    "get_available_modes",
    "measure",
    "print_info",
    "run",
    "run_benchmarks",
]
