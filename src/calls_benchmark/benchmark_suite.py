#!/usr/bin/env python3
"""
Benchmark suite orchestration and execution.

Manages the ordered dispatch modes and coordinates their execution over rounds.
"""

import gc

from .benchmark_results import Measurement
from .benchmark_run import BenchRun
from .dispatch_mode import DispatchMode
from .mode_factory import create_mode
from .reporter import print_info, print_round_header
from .time_tracking import measure
from .verbose_logger import VerboseLogger
from .warmup import warm_up


class BenchmarkSuite:
    """
    Runs a fixed sequence of dispatch modes against one shared state.

    The first registered mode provides the reference time of each round; every
    other mode in that round is reported relative to it.
    """

    def __init__(self, logger: VerboseLogger | None = None):
        self.modes: list[DispatchMode] = []
        self.logger = logger or VerboseLogger()

    def register_mode(self, mode: DispatchMode) -> None:
        """Append a mode to the execution order."""
        self.modes.append(mode)

    def create_modes(self, bench_run: BenchRun) -> list[DispatchMode]:
        """Create and register the modes named by the run configuration."""
        for mode_id in bench_run.mode_ids:
            self.register_mode(create_mode(mode_id, bench_run.method_name))
        return self.modes

    def bind_all(self, bench_run: BenchRun) -> None:
        """Resolve every mode against the run's state before anything is timed."""
        start_time = bench_run.time_log.start_timer()
        for mode in self.modes:
            mode.bind(bench_run.state)
            self.logger.log_substep(f"Bound {mode.get_mode_name()} ({mode.__class__.__name__})")
        bench_run.time_log.method_lookup = bench_run.time_log.end_timer(start_time)

    def run_warmup(self, bench_run: BenchRun) -> None:
        if bench_run.warmup_seconds <= 0:
            return
        start_time = bench_run.time_log.start_timer()
        draws = warm_up(bench_run.warmup_seconds)
        bench_run.time_log.warmup = bench_run.time_log.end_timer(start_time)
        self.logger.log_info(f"Warm-up drew {draws:,} random numbers")
        self.logger.log_timing("Warm-up", bench_run.time_log.warmup)

    def execute_mode(self, bench_run: BenchRun, mode: DispatchMode) -> float:
        """Time one mode for the configured number of iterations."""
        if bench_run.collect_garbage:
            start_time = bench_run.time_log.start_timer()
            gc.collect()
            bench_run.time_log.gc_priming += bench_run.time_log.end_timer(start_time)

        iterations = bench_run.iterations
        duration = measure(lambda: mode.run(iterations))
        bench_run.time_log.add_mode_time(mode.get_mode_name(), duration)
        self.logger.log_timing(mode.get_mode_name(), duration)
        return duration

    def execute_round(self, bench_run: BenchRun, round_index: int) -> float:
        """Run every mode once, in order, and report each against the first."""
        self.logger.log_step(f"ROUND {round_index}/{bench_run.rounds}")
        if bench_run.rounds > 1:
            print_round_header(round_index, bench_run.rounds)

        bench_run.time_log.start_round()
        reference_time = None
        round_total = 0.0
        for mode in self.modes:
            duration = self.execute_mode(bench_run, mode)
            if reference_time is None:
                reference_time = duration

            measurement = Measurement(
                name=mode.get_mode_name(),
                elapsed_seconds=duration,
                reference_seconds=reference_time,
                iterations=bench_run.iterations,
                round_index=round_index,
            )
            bench_run.measurements.append(measurement)
            print_info(measurement.name, duration, reference_time, bench_run.iterations)
            round_total += duration

        return round_total

    def execute_all(self, bench_run: BenchRun) -> float:
        """
        Execute the whole run and return the total measured time in seconds.

        Modes are created from the run configuration unless some were
        registered explicitly. Lookup errors raised while binding abort the
        run before warm-up and before any measurement.
        """
        if not self.modes:
            self.create_modes(bench_run)

        initial_result = bench_run.state.result
        total = 0.0
        try:
            self.logger.log_step("METHOD LOOKUP", f"{len(self.modes)} modes")
            self.bind_all(bench_run)

            self.logger.log_step("WARM-UP", f"{bench_run.warmup_seconds:.1f}s budget")
            self.run_warmup(bench_run)

            for round_index in range(1, bench_run.rounds + 1):
                total += self.execute_round(bench_run, round_index)
            self.logger.log_step("DONE")
        except Exception as e:
            bench_run.execution_error = str(e)
            bench_run.is_executed = False
            raise

        expected = initial_result + bench_run.expected_calls(len(self.modes))
        if bench_run.state.result != expected:
            bench_run.execution_error = f"counter is {bench_run.state.result}, expected {expected}"
            raise RuntimeError(f"Benchmark counter mismatch: {bench_run.execution_error}")

        bench_run.total_seconds = total
        bench_run.is_executed = True
        self.logger.log_timing("Measured total", total)
        self.logger.log_timing("Overhead (lookup, warm-up, GC)", bench_run.time_log.get_overhead_time())
        return total
