#!/usr/bin/env python3
"""
Pre-measurement warm-up.

Burns a fixed wall-clock budget on a pseudo-random number workload so that
caches and CPU frequency settle before the first measured loop.
"""

import time

import numpy as np

DEFAULT_WARMUP_SECONDS = 5.0

# Draws between clock checks
DRAWS_PER_CHECK = 1000


def warm_up(seconds: float = DEFAULT_WARMUP_SECONDS, seed: int | None = None) -> int:
    """
    Generate pseudo-random numbers until `seconds` have elapsed.

    The numbers are discarded. Returns how many were drawn.
    """
    if seconds <= 0:
        return 0

    rng = np.random.default_rng(seed)
    deadline = time.perf_counter() + seconds
    draws = 0
    while time.perf_counter() < deadline:
        for _ in range(DRAWS_PER_CHECK):
            rng.integers(0, 1 << 31)
        draws += DRAWS_PER_CHECK
    return draws
