from __future__ import annotations

import io

from quizrunner.quiz import Tally
from quizrunner.report import format_report, print_report, summarize


def test_format_report():
    t = Tally(total=4, correct=["1", "2"], incorrect=["x"])
    assert format_report(t) == "Total: 4 (2 correct, 1 incorrect, 1 missed)"


def test_summarize():
    t = Tally(total=3, correct=["1"])
    assert summarize(t) == {"total": 3, "correct": 1, "incorrect": 0, "missed": 2}


def test_print_report_writes_one_line():
    out = io.StringIO()
    print_report(Tally(total=0), out)
    assert out.getvalue() == "Total: 0 (0 correct, 0 incorrect, 0 missed)\n"


def test_print_report_defaults_to_stdout(capsys):
    print_report(Tally(total=1, incorrect=["no"]))
    assert capsys.readouterr().out == "Total: 1 (0 correct, 1 incorrect, 0 missed)\n"
