"""quizrunner.

Timed question/answer quizzes in the terminal, loaded from CSV files.
"""

from .cli import main as cli_main
from .config import AppConfig, default_app_config
from .data import Question, load_questions
from .errors import InputClosed, InputError, PromptError, QuizError, SourceError, TimesUp
from .ordering import order_index
from .prompt import Deadline, TokenReader, ask
from .quiz import Tally, run_quiz
from .report import format_report
from .utils import make_rng, setup_logging

__all__ = [
    "__version__",
    "AppConfig",
    "default_app_config",
    "Question",
    "load_questions",
    "order_index",
    "Deadline",
    "TokenReader",
    "ask",
    "Tally",
    "run_quiz",
    "format_report",
    "QuizError",
    "SourceError",
    "PromptError",
    "TimesUp",
    "InputClosed",
    "InputError",
    "make_rng",
    "setup_logging",
    "cli_main",
]

__version__ = "0.1.0"
