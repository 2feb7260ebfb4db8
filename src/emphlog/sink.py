# topmark:header:start
#
#   project      : EmphLog
#   file         : sink.py
#   file_relpath : src/emphlog/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Log sinks: the backend that receives fully rendered lines.

`emphlog.logger.AnsiLogger` never writes bytes itself; it hands each finished
line to an injected `Sink`. `LoggingSink` adapts a standard library
`logging.Logger` so EmphLog can feed whatever handlers the host configured.
"""

from __future__ import annotations

import logging
from typing import Protocol


class Sink(Protocol):
    """Minimal interface of a log backend."""

    def write_debug(self, line: str) -> None:
        """Emit a debug line."""
        ...

    def write_info(self, line: str) -> None:
        """Emit an info line."""
        ...

    def write_warn(self, line: str) -> None:
        """Emit a warning line."""
        ...

    def write_error(self, line: str) -> None:
        """Emit an error line."""
        ...

    def is_debug_mode_active(self) -> bool:
        """Return whether the backend renders in debug mode."""
        ...

    def is_info_enabled(self) -> bool:
        """Return whether info lines reach the output."""
        ...


class LoggingSink:
    """`Sink` backed by a standard library logger.

    Debug mode is considered active when the wrapped logger is enabled for
    DEBUG; in that case the facade stops emitting color codes.

    Args:
        logger (logging.Logger): The host logger receiving the lines.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def write_debug(self, line: str) -> None:
        self._logger.debug("%s", line)

    def write_info(self, line: str) -> None:
        self._logger.info("%s", line)

    def write_warn(self, line: str) -> None:
        self._logger.warning("%s", line)

    def write_error(self, line: str) -> None:
        self._logger.error("%s", line)

    def is_debug_mode_active(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    def is_info_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.INFO)
