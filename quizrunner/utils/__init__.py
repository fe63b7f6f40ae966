"""Utilities for quizrunner."""

from .determinism import make_rng
from .logging import setup_logging

__all__ = [
    "setup_logging",
    "make_rng",
]
