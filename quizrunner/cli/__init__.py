"""Command-line entry point for quizrunner."""

from .main import main

__all__ = ["main"]
