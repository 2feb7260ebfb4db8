# topmark:header:start
#
#   project      : EmphLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the EmphLog test suite.

This file sets up global fixtures, customizes the diagnostics logging for test
runs and provides `RecordingSink`, an in-memory `emphlog.sink.Sink` that keeps
the last line written (like a host log captured by a test double).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from emphlog.config import logging
from emphlog.markup.ansi import RESET, fg
from emphlog.markup.colors import BaseColor, ColorSpec

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


class RecordingSink:
    """In-memory sink recording every line per channel.

    Args:
        debug_mode (bool): Value reported by `is_debug_mode_active`.
        info_enabled (bool): Value reported by `is_info_enabled`.
    """

    def __init__(self, *, debug_mode: bool = False, info_enabled: bool = True) -> None:
        self.debug_mode = debug_mode
        self.info_enabled = info_enabled
        self.lines: list[tuple[str, str]] = []

    @property
    def message(self) -> str | None:
        """Return the last line written on any channel, or None."""
        return self.lines[-1][1] if self.lines else None

    def channel(self, name: str) -> list[str]:
        """Return all lines written on channel ``name``."""
        return [line for chan, line in self.lines if chan == name]

    def write_debug(self, line: str) -> None:
        self.lines.append(("debug", line))

    def write_info(self, line: str) -> None:
        self.lines.append(("info", line))

    def write_warn(self, line: str) -> None:
        self.lines.append(("warn", line))

    def write_error(self, line: str) -> None:
        self.lines.append(("error", line))

    def is_debug_mode_active(self) -> bool:
        return self.debug_mode

    def is_info_enabled(self) -> bool:
        return self.info_enabled


def normal(base: BaseColor) -> str:
    """Return the escape selecting the normal variant of ``base``."""
    return fg(ColorSpec(base))


def bright(base: BaseColor) -> str:
    """Return the escape selecting the bright variant of ``base``."""
    return fg(ColorSpec(base, bright=True))


def colored_line(base: BaseColor, *parts: str) -> str:
    """Build an expected colored line: base color, then ``parts``, then a reset."""
    return normal(base) + "".join(parts) + RESET


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure developer shell settings never leak into test runs.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (
        "EMPHLOG_LOG_LEVEL",
        "EMPHLOG_PREFIX",
        "EMPHLOG_COLOR",
        "EMPHLOG_VERBOSE",
        "EMPHLOG_BATCH_MODE",
        "FORCE_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink (debug mode off)."""
    return RecordingSink()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure EmphLog diagnostics logging at TRACE level for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
