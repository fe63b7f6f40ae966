"""Question file loading for quizrunner."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..errors import SourceError
from .schemas import Question

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 2


def _find_bare_quote(text: str) -> Optional[int]:
    """Return the line of a quote inside an unquoted field, or None.

    ``csv`` keeps such a quote as a literal character; a quote is only
    allowed to open a field or, doubled, inside a quoted one.
    """
    line = 1
    in_quotes = False
    at_field_start = True
    i = 0
    while i < len(text):
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if text[i + 1:i + 2] == '"':
                    i += 1
                else:
                    in_quotes = False
        elif ch == '"':
            if not at_field_start:
                return line
            in_quotes = True
        if ch == "\n":
            line += 1
        at_field_start = not in_quotes and ch in (",", "\n")
        i += 1
    return None


def _iter_csv(path: Path) -> Iterator[Sequence[str]]:
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()

    bad_line = _find_bare_quote(text)
    if bad_line is not None:
        raise SourceError(f'{path}: malformed CSV: bare " in non-quoted field on line {bad_line}', path=path)

    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    for row in reader:
        # csv.reader yields an empty row for a blank line
        if not row:
            continue
        if len(row) != FIELDS_PER_RECORD:
            raise SourceError(
                f"{path}: record on line {reader.line_num} has {len(row)} fields, "
                f"expected {FIELDS_PER_RECORD}",
                path=path,
            )
        yield row


def load_questions(path: str | Path) -> List[Question]:
    """Load prompt/answer pairs from a CSV file.

    Every record must hold exactly two fields: the prompt and the expected
    answer. The first record is a question too; there is no header row. The
    expected answer is kept exactly as written in the file.

    Args:
        path: Path to the CSV file

    Returns:
        List of Question objects in file order (empty for an empty file)

    Raises:
        SourceError: If the file is missing, unreadable or malformed
    """
    p = Path(path)
    if not p.exists():
        raise SourceError(f"open {p}: no such file or directory", path=p)
    if not p.is_file():
        raise SourceError(f"open {p}: not a regular file", path=p)

    try:
        questions = [Question(prompt=row[0], answer=row[1]) for row in _iter_csv(p)]
    except SourceError:
        raise
    except UnicodeDecodeError as e:
        raise SourceError(f"{p}: cannot decode file as UTF-8: {e}", path=p) from e
    except csv.Error as e:
        raise SourceError(f"{p}: malformed CSV: {e}", path=p) from e
    except OSError as e:
        raise SourceError(f"open {p}: {e.strerror or e}", path=p) from e

    logger.info("Loaded %d questions from %s", len(questions), p)
    return questions
