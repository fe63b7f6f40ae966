from __future__ import annotations

import importlib
import io

import pytest

# quizrunner.cli re-exports the main() function under the module's name
cli_module = importlib.import_module("quizrunner.cli.main")


@pytest.fixture
def quiz_file(arithmetic_csv, monkeypatch):
    monkeypatch.setattr(cli_module, "open_input", lambda: io.StringIO(""))
    return str(arithmetic_csv)


def test_keyboard_interrupt_exits_cleanly(quiz_file, monkeypatch, capsys):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli_module, "run_quiz", interrupted)
    rc = cli_module.main(["-csv", quiz_file])
    captured = capsys.readouterr()
    assert rc == 1
    assert "Quiz interrupted by user" in captured.err
    assert "Total:" not in captured.out


def test_unexpected_error_exits_cleanly(quiz_file, monkeypatch, capsys):
    def broken(*args, **kwargs):
        raise RuntimeError("generator exploded")

    monkeypatch.setattr(cli_module, "order_index", broken)
    rc = cli_module.main(["-csv", quiz_file])
    captured = capsys.readouterr()
    assert rc == 1
    assert "Unexpected error occurred - generator exploded" in captured.err


def test_closed_input_still_reports(quiz_file, capsys):
    rc = cli_module.main(["-csv", quiz_file])
    captured = capsys.readouterr()
    assert rc == 0
    assert "Total: 2 (0 correct, 0 incorrect, 2 missed)" in captured.out
    assert "Input closed" in captured.err
