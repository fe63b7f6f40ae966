from __future__ import annotations

import argparse
import json
import logging
import sys

from quizrunner.config import AppConfig, default_app_config
from quizrunner.data.loader import load_questions
from quizrunner.errors import SourceError
from quizrunner.ordering import order_index
from quizrunner.prompt import Deadline, open_input
from quizrunner.quiz import run_quiz
from quizrunner.report import print_report, summarize
from quizrunner.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quizrunner",
        description="quizrunner - timed question/answer quiz in the terminal",
        epilog="""Examples:
  # Run the quiz in problems.csv with a 30 second budget
  python -m quizrunner.cli.main

  # Another file, a shorter budget and a random order
  python -m quizrunner.cli.main -csv data/capitals.csv -timeout 10 -shuffle

  # Check that a question file loads without asking anything
  python -m quizrunner.cli.main -csv data/capitals.csv -dry-run
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-csv", "--csv", dest="csv_path", default=None,
                        help="Path to a CSV file containing problems (default: problems.csv)")
    parser.add_argument("-timeout", "--timeout", dest="timeout_seconds", type=int, default=None,
                        help="Time in seconds to complete the quiz (default: 30)")
    parser.add_argument("-shuffle", "--shuffle", action="store_true", default=None,
                        help="Shuffle the problems")
    parser.add_argument("-config", "--config", default=None,
                        help="Configuration file path (JSON, optional)")
    parser.add_argument("-dry-run", "--dry-run", dest="dry_run", action="store_true",
                        help="Load and validate the problems without asking them")
    parser.add_argument("-log-level", "--log-level", dest="log_level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: from config, WARNING)")
    return parser


def load_config(path: str | None) -> AppConfig:
    if path is None:
        return default_app_config()
    return AppConfig.from_json(path)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = logging.getLogger("quizrunner")

    try:
        cfg = load_config(args.config)
    except FileNotFoundError:
        print(f"Error: Config file '{args.config}' not found", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read config file '{args.config}': {e.strerror or e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON format in '{args.config}': {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: Config file '{args.config}' is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError) as e:
        print(f"Error: Invalid configuration in '{args.config}': {e}", file=sys.stderr)
        return 1

    try:
        cfg = cfg.with_overrides(
            csv_path=args.csv_path,
            timeout_seconds=args.timeout_seconds,
            shuffle=args.shuffle,
            log_level=args.log_level,
        )
        logger = setup_logging(cfg.logging.file_path(), cfg.logging.level, cfg.logging.console)

        # The deadline covers the whole session, starting before the file is read
        deadline = Deadline(cfg.quiz.timeout_seconds)

        try:
            questions = load_questions(cfg.quiz.csv_path)
        except SourceError as e:
            print(f"Error: {e}", file=sys.stderr)
            logger.error("SourceError: %s", e)
            return 1

        if args.dry_run:
            print(f"Loaded {len(questions)} questions from {cfg.quiz.csv_path}")
            return 0

        order = order_index(len(questions), shuffle=cfg.quiz.shuffle, seed=cfg.determinism.seed)
        logger.info(
            "Starting quiz: %d questions, %ds budget, shuffle=%s",
            len(questions), cfg.quiz.timeout_seconds, cfg.quiz.shuffle,
        )

        tally = run_quiz(questions, order, deadline, stdin=open_input(), stdout=sys.stdout, stderr=sys.stderr)
        print_report(tally, sys.stdout)
        logger.info("Quiz finished: %s", summarize(tally))

    except KeyboardInterrupt:
        print("\nQuiz interrupted by user", file=sys.stderr)
        logger.info("Quiz interrupted by user (KeyboardInterrupt)")
        return 1
    except Exception as e:
        print(f"Error: Unexpected error occurred - {e}", file=sys.stderr)
        logger.error("Unexpected error: %s", str(e), exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
