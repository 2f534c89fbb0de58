"""Lesson runner entry point."""

from __future__ import annotations

import pytest

from funcore import __main__ as runner
from funcore.errors import LawViolation
from funcore.result import failure, success

pytestmark = pytest.mark.unit


def test_run_lessons_reports_every_outcome() -> None:
    lines = runner.run_lessons()
    text = "\n".join(lines)

    assert "sum_abs([-1, -2, -3, -5]) = 11; input untouched: True" in text
    assert (
        "mutating_sum_abs([-1, -2, -3, -5]) = 11.0; input untouched: False" in text
    )
    assert "greatest by compare: 5" in text
    assert "oldest person: Pablo" in text
    assert "greatest adapted number: 3" in text
    assert "collapse sum: 10" in text
    assert "collapse product: 24" in text
    assert "collapse string: Hello, world!" in text
    assert "invalid (The name of the plate cannot be empty)" in text
    assert "invalid (The price of the plate cannot be negative)" in text
    assert "first letter of pasta: P" in text
    assert "first letter of unnamed plate: ?" in text


def test_main_prints_lessons(capsys: pytest.CaptureFixture[str]) -> None:
    assert runner.main([]) == 0
    out = capsys.readouterr().out
    assert "collapse sum: 10" in out
    assert "all laws hold" not in out


def test_main_verifies_laws(capsys: pytest.CaptureFixture[str]) -> None:
    assert runner.main(["--verify-laws"]) == 0
    assert "all laws hold" in capsys.readouterr().out


def test_verify_laws_from_env(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("FUNCORE_VERIFY_LAWS", "1")
    assert runner.main([]) == 0
    assert "all laws hold" in capsys.readouterr().out


def test_law_violation_exits_nonzero(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        runner,
        "verify_laws",
        lambda: [success(None), failure(LawViolation("broken", law="associativity"))],
    )
    assert runner.main(["--verify-laws"]) == 1
    assert "law violated [associativity]: broken" in capsys.readouterr().out


def test_invalid_log_level_exits_with_hint(capsys: pytest.CaptureFixture[str]) -> None:
    assert runner.main(["--log-level", "LOUD"]) == 2
    err = capsys.readouterr().err
    assert "Unknown log level" in err
    assert "hint:" in err
