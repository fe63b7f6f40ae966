"""Exception types raised by quizrunner."""

from __future__ import annotations

from pathlib import Path


class QuizError(Exception):
    """Base exception for quizrunner errors."""
    pass


class SourceError(QuizError):
    """Raised when the question file cannot be loaded."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = path


class PromptError(QuizError):
    """Raised when no answer could be collected for a prompt."""
    pass


class TimesUp(PromptError):
    """Raised when the session deadline elapses while waiting for an answer."""

    def __init__(self, message: str = "Times up!"):
        super().__init__(message)


class InputClosed(PromptError):
    """Raised when the input stream ends before an answer is read."""

    def __init__(self, message: str = "Input closed before an answer was given"):
        super().__init__(message)


class InputError(PromptError):
    """Raised for any other failure while reading an answer."""
    pass
