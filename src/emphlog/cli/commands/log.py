# topmark:header:start
#
#   project      : EmphLog
#   file         : log.py
#   file_relpath : src/emphlog/cli/commands/log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EmphLog `log` command.

Renders one message through an `emphlog.logger.AnsiLogger` onto the terminal.
Info and debug lines go to stdout, warnings and errors to stderr.

Examples:
    ```bash
    emphlog log --level warn "Image [[*]]%s[[*]] is outdated" app:latest
    emphlog log --category build --verbose-groups api "Not shown"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import click

from emphlog.cli.console import ConsoleSink
from emphlog.cli.errors import EmphlogUsageError
from emphlog.logger import AnsiLogger
from emphlog.verbosity import VerboseCategory

if TYPE_CHECKING:
    from emphlog.cli.console import ClickConsole
    from emphlog.config.model import LoggerConfig


class LogLevel(str, Enum):
    """Levels accepted by ``emphlog log --level``."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@click.command(
    name="log",
    help="Render MESSAGE (printf-style, substituted with ARGS) as a log line.",
)
@click.option(
    "--level",
    type=click.Choice([lvl.value for lvl in LogLevel]),
    default=None,
    help="Log level (default: info).",
)
@click.option(
    "--category",
    type=click.Choice([c.value for c in VerboseCategory]),
    default=None,
    help="Emit as a verbose message of this verbosity group.",
)
@click.option(
    "--verbose-groups",
    "verbose_groups",
    default=None,
    help="Enabled verbosity groups: 'all', 'true', 'false' or a comma-separated list.",
)
@click.option("--prefix", default=None, help="Line prefix (overrides the configured prefix).")
@click.option(
    "--debug-mode",
    is_flag=True,
    default=False,
    help="Behave like a host in debug mode: show debug lines, disable color.",
)
@click.argument("message")
@click.argument("args", nargs=-1)
@click.pass_context
def log_command(
    ctx: click.Context,
    *,
    level: str | None,
    category: str | None,
    verbose_groups: str | None,
    prefix: str | None,
    debug_mode: bool,
    message: str,
    args: tuple[str, ...],
) -> None:
    """Render one message.

    Args:
        ctx (click.Context): Click context carrying the shared state.
        level (str | None): Requested log level.
        category (str | None): Verbosity group; routes the message through ``verbose``.
        verbose_groups (str | None): Verbosity specification overriding the configuration.
        prefix (str | None): Line prefix overriding the configuration.
        debug_mode (bool): Simulate a host in debug mode.
        message (str): printf-style message with emphasis markup.
        args (tuple[str, ...]): Substitution arguments.

    Raises:
        EmphlogUsageError: If ``--category`` is combined with a level other than info.
    """
    if category is not None and level not in (None, LogLevel.INFO.value):
        raise EmphlogUsageError("'--category' messages are always logged at info level.")

    config: LoggerConfig = ctx.obj["config"]
    console: ClickConsole = ctx.obj["console"]

    logger = AnsiLogger(
        ConsoleSink(console, debug_mode=debug_mode),
        use_color=ctx.obj["use_color"],
        verbose=verbose_groups if verbose_groups is not None else config.verbose,
        batch_mode=True,
        prefix=prefix if prefix is not None else config.prefix,
        palette=config.palette,
    )

    if category is not None:
        logger.verbose(VerboseCategory(category), message, *args)
        return

    chosen = LogLevel(level or LogLevel.INFO.value)
    if chosen is LogLevel.DEBUG:
        logger.debug(message, *args)
    elif chosen is LogLevel.WARN:
        logger.warn(message, *args)
    elif chosen is LogLevel.ERROR:
        logger.error(message, *args)
    else:
        logger.info(message, *args)
