"""Timed prompt: one blocking token read raced against a session deadline."""

from __future__ import annotations

import logging
import queue
import sys
import threading
import time
from typing import Optional, TextIO, Union

from .data.schemas import Question
from .errors import InputClosed, InputError, TimesUp

logger = logging.getLogger(__name__)

# Whitespace that separates tokens on a line; a newline ends the line
_BLANK = frozenset(" \t\r\f\v")


class Deadline:
    """A fixed point on the monotonic clock shared by a whole session."""

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        self.expires_at = time.monotonic() + seconds

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())


class TokenReader:
    """Reads whitespace-delimited tokens from a text stream, one per call.

    Tokens left on a line stay buffered for the next call. Trailing blanks
    after the last token of a line are consumed together with the newline,
    so only a line with no token at all reads as an empty answer.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._pending = ""

    def _next(self) -> str:
        if self._pending:
            ch, self._pending = self._pending, ""
            return ch
        return self.stream.read(1)

    def read_token(self) -> Optional[str]:
        """Return the next token, ``""`` for a blank line, or None at end of input."""
        ch = self._next()
        while ch in _BLANK:
            ch = self._next()
        if ch == "":
            return None
        if ch == "\n":
            return ""

        chars = []
        while ch and not ch.isspace():
            chars.append(ch)
            ch = self._next()
        while ch in _BLANK:
            ch = self._next()
        if ch and ch != "\n":
            self._pending = ch
        return "".join(chars)


def open_input() -> TextIO:
    """Open a text stream over stdin's descriptor without taking ownership of it.

    A reader abandoned after a timeout stays blocked on this stream rather than
    on ``sys.stdin``, whose lock the interpreter needs at shutdown.
    """
    return open(sys.stdin.fileno(), "r", encoding=sys.stdin.encoding or "utf-8", closefd=False)


def _read_token(reader: TokenReader, answers: "queue.Queue[Union[str, None, BaseException]]") -> None:
    try:
        answers.put(reader.read_token())
    except (OSError, ValueError) as e:
        answers.put(e)


def ask(
    question: Question,
    deadline: Deadline,
    stdin: Union[TokenReader, TextIO],
    stdout: TextIO,
) -> str:
    """Show one question and wait for an answer until the deadline.

    Returns the next whitespace-delimited token typed, trimmed, or an empty
    string for a blank line. Pass the same TokenReader to every call of a
    session so tokens left on a line carry over to the next question.

    Raises:
        TimesUp: If the deadline passes first; the pending read is abandoned
        InputClosed: If the input stream has ended
        InputError: If reading the input failed
    """
    reader = stdin if isinstance(stdin, TokenReader) else TokenReader(stdin)

    stdout.write(f"{question.prompt} = ")
    stdout.flush()

    answers: "queue.Queue[Union[str, None, BaseException]]" = queue.Queue(maxsize=1)
    worker = threading.Thread(target=_read_token, args=(reader, answers), daemon=True)
    worker.start()

    try:
        result = answers.get(timeout=deadline.remaining())
    except queue.Empty:
        logger.info("Deadline of %ss reached while waiting on %r", deadline.seconds, question.prompt)
        stdout.write("\n")
        stdout.flush()
        raise TimesUp()

    if isinstance(result, BaseException):
        raise InputError(f"reading answer: {result}") from result
    if result is None:
        raise InputClosed()
    return result.strip()
