from __future__ import annotations

import logging
from logging import Logger
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_file: Optional[Union[str, Path]] = None,
    level: str = "WARNING",
    console: bool = False,
) -> Logger:
    """Configure the ``quizrunner`` logger using stdlib logging.

    Console output goes to stderr and is off unless ``console`` is set, so
    log lines never mix with the quiz itself. A log file is written only when
    ``log_file`` is given; its directory is created if needed. Multiple calls
    are safe; handlers are added only once.
    """
    logger = logging.getLogger("quizrunner")
    if getattr(logger, "_configured", False):
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(logger.level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logger.level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger._configured = True  # type: ignore[attr-defined]
    logger.debug("Logging configured")
    return logger
