"""Presentation order for a loaded question set."""

from __future__ import annotations

import logging
from typing import List

from .config import DEFAULT_SEED
from .utils.determinism import make_rng

logger = logging.getLogger(__name__)


def order_index(n: int, shuffle: bool = False, seed: int = DEFAULT_SEED) -> List[int]:
    """Return a permutation of ``range(n)`` giving the order questions are asked in.

    Without ``shuffle`` the permutation comes from a generator with the fixed
    ``seed``, so it is the same on every run but is not sequential order. With
    ``shuffle`` the generator is seeded from the clock.
    """
    if n < 0:
        raise ValueError(f"question count must be non-negative, got {n}")

    rng = make_rng(None if shuffle else seed)
    order = [int(i) for i in rng.permutation(n)]
    logger.debug("Order for %d questions (shuffle=%s): %s", n, shuffle, order)
    return order
