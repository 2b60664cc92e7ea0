from __future__ import annotations

import pytest

from calls_benchmark import BenchmarkState, BenchRun

SMALL_N = 1000

MODE_NAMES = [
    "NORMAL",
    "VIRTUAL",
    "CLOSURE",
    "BOUND METHOD",
    "REFLECT BOUND (types.MethodType)",
    "REFLECT DELEGATE (dynamic_invoke)",
    "REFLECT INVOKE",
]


@pytest.fixture
def state() -> BenchmarkState:
    return BenchmarkState()


@pytest.fixture
def small_run():
    def _make(**kwargs) -> BenchRun:
        kwargs.setdefault("iterations", SMALL_N)
        kwargs.setdefault("warmup_seconds", 0)
        return BenchRun(**kwargs)

    return _make
