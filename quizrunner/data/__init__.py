"""Question loading for quizrunner."""

from .schemas import Question
from .loader import load_questions

__all__ = [
    "Question",
    "load_questions",
]
