"""Data schemas for quizrunner."""

from typing import NamedTuple


class Question(NamedTuple):
    """A prompt and the exact answer expected for it."""
    prompt: str
    answer: str
