from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Iterator, List, Tuple, TextIO

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from quizrunner.data.schemas import Question  # noqa: E402


ARITHMETIC = [("2+2", "4"), ("3+3", "6")]


# ====================
# Question File Fixtures
# ====================

@pytest.fixture
def write_csv(tmp_path) -> Callable[..., Path]:
    """Write a CSV file from raw text and return its path."""
    def _write(text: str, name: str = "problems.csv") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture
def arithmetic_csv(write_csv) -> Path:
    return write_csv("".join(f"{q},{a}\n" for q, a in ARITHMETIC))


@pytest.fixture
def arithmetic_questions() -> List[Question]:
    return [Question(prompt=q, answer=a) for q, a in ARITHMETIC]


# ====================
# Input Stream Fixtures
# ====================

@pytest.fixture
def silent_input() -> Iterator[Tuple[TextIO, Callable[[str], None]]]:
    """A pipe-backed input stream that stays open until the test writes or ends.

    Yields the read side and a function writing text into the pipe. Closing
    the write side on teardown releases any reader left blocked by a timeout.
    """
    r, w = os.pipe()
    reader = open(r, "r", encoding="utf-8")
    writer = open(w, "w", encoding="utf-8")

    def _send(text: str) -> None:
        writer.write(text)
        writer.flush()

    try:
        yield reader, _send
    finally:
        writer.close()
