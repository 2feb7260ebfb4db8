# topmark:header:start
#
#   project      : EmphLog
#   file         : console.py
#   file_relpath : src/emphlog/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console output for the CLI.

`ClickConsole` separates program output from internal logging. `ConsoleSink`
adapts it to the `emphlog.sink.Sink` protocol so the ``log`` command can
drive an `emphlog.logger.AnsiLogger` straight onto the terminal.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, ANSI codes in the output are kept.
            Otherwise, Click strips them.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


class ConsoleSink:
    """`Sink` writing rendered lines to a `ClickConsole`.

    Info lines go to stdout, warnings and errors to stderr. Debug lines are
    only written in debug mode, which also disables color for the other levels.

    Args:
        console (ClickConsole): Target console.
        debug_mode (bool): Whether the sink behaves as a host in debug mode.
    """

    def __init__(self, console: ClickConsole, *, debug_mode: bool = False) -> None:
        self._console = console
        self._debug_mode = debug_mode

    def write_debug(self, line: str) -> None:
        if self._debug_mode:
            self._console.print(line)

    def write_info(self, line: str) -> None:
        self._console.print(line)

    def write_warn(self, line: str) -> None:
        self._console.warn(line)

    def write_error(self, line: str) -> None:
        self._console.error(line)

    def is_debug_mode_active(self) -> bool:
        return self._debug_mode

    def is_info_enabled(self) -> bool:
        return True
