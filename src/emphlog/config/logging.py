# topmark:header:start
#
#   project      : EmphLog
#   file         : logging.py
#   file_relpath : src/emphlog/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics logging for EmphLog itself.

Records report which config file was found, why a verbosity group was
rejected, or which message could not be formatted. They live under the
``emphlog`` logger hierarchy and are unrelated to the lines an
`emphlog.logger.AnsiLogger` hands to its sink. A TRACE level below DEBUG is
registered for the chattiest records; ``-vvv`` on the command line or
``EMPHLOG_LOG_LEVEL=TRACE`` enables it.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "EMPHLOG_LOG_LEVEL"

PACKAGE_LOGGER_NAME: Final[str] = "emphlog"


class EmphlogLogger(logging.Logger):
    """`logging.Logger` with a `trace` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at `TRACE_LEVEL`."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(EmphlogLogger)

# Environment spellings accepted for EMPHLOG_LOG_LEVEL
LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

BRIEF_FORMAT: Final[str] = "emphlog [%(levelname)s] %(message)s"
DETAILED_FORMAT: Final[str] = "emphlog [%(levelname)s] %(name)s:%(lineno)d %(message)s"


class ChalkFormatter(logging.Formatter):
    """Color a whole diagnostics record by its level.

    Thresholds are checked from the most to the least severe; records below
    TRACE are dimmed.
    """

    STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.ERROR, chalk.red_bright),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in self.STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Read the diagnostics level from ``EMPHLOG_LOG_LEVEL``.

    Accepts a level name from `LEVEL_NAMES` (case-insensitive) or a number.
    Returns None when the variable is unset, empty or unrecognized.
    """
    env = os.environ if environ is None else environ
    raw = env.get(LOG_LEVEL_ENV, "").strip().upper()
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Send ``emphlog`` diagnostics at ``level`` and above to standard error.

    Without a level, ``EMPHLOG_LOG_LEVEL`` decides, and diagnostics stay
    silent below CRITICAL when that is unset too. Calling this again replaces
    the handler installed by the previous call. Records do not propagate, so
    the host's root logger configuration is left alone.
    """
    if level is None:
        env_level = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(BRIEF_FORMAT if level >= logging.INFO else DETAILED_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> EmphlogLogger:
    """Return the diagnostics logger for module ``name``."""
    return cast("EmphlogLogger", logging.getLogger(name))
