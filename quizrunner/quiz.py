"""Quiz loop and scoring."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TextIO

from .data.schemas import Question
from .errors import PromptError
from .prompt import Deadline, TokenReader, ask

logger = logging.getLogger(__name__)

BANNER = "Type your answer followed by the return key."


@dataclass
class Tally:
    """Answers collected during a session.

    Missed questions are not stored; they are whatever is left of ``total``.
    """

    total: int
    correct: List[str] = field(default_factory=list)
    incorrect: List[str] = field(default_factory=list)

    @property
    def answered(self) -> int:
        return len(self.correct) + len(self.incorrect)

    @property
    def missed(self) -> int:
        return self.total - self.answered


def score(question: Question, answer: str, tally: Tally) -> bool:
    """Record ``answer`` against ``question``; exact, case-sensitive match."""
    is_correct = answer == question.answer
    if is_correct:
        tally.correct.append(answer)
    else:
        tally.incorrect.append(answer)
    logger.debug("%r -> %r (%s)", question.prompt, answer, "correct" if is_correct else "incorrect")
    return is_correct


def run_quiz(
    questions: Sequence[Question],
    order: Sequence[int],
    deadline: Deadline,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> Tally:
    """Ask ``questions`` in ``order`` until they run out or an answer cannot be read.

    The first prompt error (timeout, closed or failing input) is printed to
    ``stderr`` and ends the session; every question not yet answered counts
    as missed. Prompt errors never propagate out of this function.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    tally = Tally(total=len(questions))
    reader = stdin if isinstance(stdin, TokenReader) else TokenReader(stdin)

    print(BANNER, file=stdout)
    print(file=stdout)

    for n in order:
        question = questions[n]
        try:
            answer = ask(question, deadline, reader, stdout)
        except PromptError as e:
            print(str(e), file=stderr)
            logger.info("Quiz stopped after %d of %d questions: %s", tally.answered, tally.total, e)
            break
        score(question, answer, tally)

    return tally
