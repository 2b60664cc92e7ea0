"""Tests for the warm-up phase."""

from __future__ import annotations

import time

from calls_benchmark.warmup import DRAWS_PER_CHECK, warm_up


def test_disabled_warmup_returns_immediately():
    assert warm_up(0) == 0
    assert warm_up(-1.0) == 0


def test_warmup_spends_its_budget():
    start = time.perf_counter()
    draws = warm_up(0.05, seed=1)
    elapsed = time.perf_counter() - start
    assert elapsed >= 0.05
    assert draws >= DRAWS_PER_CHECK
    assert draws % DRAWS_PER_CHECK == 0
