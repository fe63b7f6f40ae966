from __future__ import annotations

import sys
from typing import Dict, Optional, TextIO

from .quiz import Tally


def summarize(tally: Tally) -> Dict[str, int]:
    return {
        "total": tally.total,
        "correct": len(tally.correct),
        "incorrect": len(tally.incorrect),
        "missed": tally.missed,
    }


def format_report(tally: Tally) -> str:
    """Render the one-line score summary."""
    s = summarize(tally)
    return (
        f"Total: {s['total']} "
        f"({s['correct']} correct, {s['incorrect']} incorrect, {s['missed']} missed)"
    )


def print_report(tally: Tally, stdout: Optional[TextIO] = None) -> None:
    out = stdout if stdout is not None else sys.stdout
    print(format_report(tally), file=out)
