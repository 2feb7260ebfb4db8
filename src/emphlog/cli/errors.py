# topmark:header:start
#
#   project      : EmphLog
#   file         : errors.py
#   file_relpath : src/emphlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the EmphLog CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. When a console is present in the Click context, errors are printed
through it; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from emphlog.cli.exit_codes import ExitCode


class EmphlogCliError(click.ClickException):
    """Base class for all EmphLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class EmphlogUsageError(EmphlogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class EmphlogCliConfigError(EmphlogCliError):
    """Error for configuration errors (invalid config file or environment value)."""

    exit_code = ExitCode.CONFIG_ERROR
