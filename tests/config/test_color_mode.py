# topmark:header:start
#
#   project      : EmphLog
#   file         : test_color_mode.py
#   file_relpath : tests/config/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color-mode resolution precedence."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from emphlog.config.color import (
    ColorMode,
    env_color_preference,
    resolve_color_mode,
    stream_is_terminal,
)

if TYPE_CHECKING:
    import pytest


def test_explicit_mode_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stdout_isatty=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(color_mode_override=ColorMode.NEVER, stdout_isatty=True)


def test_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.AUTO, stdout_isatty=False)


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not resolve_color_mode(color_mode_override=None, stdout_isatty=False)


def test_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(color_mode_override=None, stdout_isatty=True)


def test_tty_detection() -> None:
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=True)
    assert not resolve_color_mode(color_mode_override=ColorMode.AUTO, stdout_isatty=False)


def test_force_color_beats_no_color() -> None:
    assert env_color_preference({"FORCE_COLOR": "1", "NO_COLOR": "1"}) is True
    assert env_color_preference({"FORCE_COLOR": "0", "NO_COLOR": "1"}) is False
    assert env_color_preference({}) is None


def test_closed_stream_is_not_a_terminal() -> None:
    stream = io.StringIO()
    assert not stream_is_terminal(stream)
    stream.close()
    assert not stream_is_terminal(stream)
