# topmark:header:start
#
#   project      : Colorverb
#   file         : test_mode.py
#   file_relpath : tests/terminal/test_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color-mode resolution and the terminal check."""

from __future__ import annotations

import io
from typing import TextIO

import pytest

from colorverb.terminal.mode import (
    DISABLE_COLOR,
    ENABLE_COLOR,
    PERFORM_CHECK,
    Mode,
    is_terminal,
    resolve_mode,
)


class FakeTTY(io.StringIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


class BrokenTTY(io.StringIO):
    def isatty(self) -> bool:
        raise OSError("bad file descriptor")


class CountingCheck:
    """Terminal check that records how often it runs."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.calls = 0

    def __call__(self, stream: TextIO) -> bool:
        self.calls += 1
        return self.answer


def _never_called(stream: TextIO) -> bool:
    raise AssertionError("terminal check must not run")


def test_mode_values() -> None:
    assert Mode("always") is ENABLE_COLOR is Mode.ENABLE_COLOR
    assert Mode("never") is DISABLE_COLOR is Mode.DISABLE_COLOR
    assert Mode("auto") is PERFORM_CHECK is Mode.PERFORM_CHECK


def test_explicit_modes_skip_the_check() -> None:
    out = io.StringIO()
    assert resolve_mode(ENABLE_COLOR, out, terminal_check=_never_called) is True
    assert resolve_mode(DISABLE_COLOR, FakeTTY(), terminal_check=_never_called) is False


@pytest.mark.parametrize("answer", [True, False])
def test_perform_check_calls_check_once(answer: bool) -> None:
    check = CountingCheck(answer)
    assert resolve_mode(PERFORM_CHECK, io.StringIO(), terminal_check=check) is answer
    assert check.calls == 1


def test_perform_check_with_default_check() -> None:
    assert resolve_mode(PERFORM_CHECK, io.StringIO()) is False
    assert resolve_mode(PERFORM_CHECK, FakeTTY()) is True


def test_mode_accepts_string_value() -> None:
    assert resolve_mode("always", io.StringIO()) is True  # type: ignore[arg-type]


def test_force_color_overrides_check(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_mode(PERFORM_CHECK, io.StringIO(), terminal_check=_never_called) is True


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    check = CountingCheck(False)
    assert resolve_mode(PERFORM_CHECK, io.StringIO(), terminal_check=check) is False
    assert check.calls == 1


def test_no_color_overrides_check(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_mode(PERFORM_CHECK, FakeTTY(), terminal_check=_never_called) is False


def test_force_color_wins_over_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_mode(PERFORM_CHECK, io.StringIO(), terminal_check=_never_called) is True


def test_environment_does_not_affect_explicit_modes(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_mode(ENABLE_COLOR, io.StringIO()) is True
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_mode(DISABLE_COLOR, io.StringIO()) is False


def test_is_terminal() -> None:
    assert is_terminal(io.StringIO()) is False
    assert is_terminal(FakeTTY()) is True


def test_is_terminal_tolerates_odd_streams() -> None:
    closed = io.StringIO()
    closed.close()
    assert is_terminal(closed) is False
    assert is_terminal(BrokenTTY()) is False
    assert is_terminal(object()) is False  # type: ignore[arg-type]
