from __future__ import annotations

import time
from typing import Optional

import numpy as np

# RandomState seeds must fit in 32 bits
_SEED_MODULUS = 2 ** 32


def time_seed() -> int:
    """Seed derived from the current wall-clock time in nanoseconds."""
    return time.time_ns() % _SEED_MODULUS


def make_rng(seed: Optional[int] = None) -> np.random.RandomState:
    """Create the session's random generator.

    - A fixed ``seed`` gives the same stream on every run
    - ``None`` seeds from the current time, so every run differs
    """
    if seed is None:
        seed = time_seed()
    return np.random.RandomState(seed % _SEED_MODULUS)
