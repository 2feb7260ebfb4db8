# topmark:header:start
#
#   project      : EmphLog
#   file         : logger.py
#   file_relpath : src/emphlog/logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI logger facade with emphasis markup and verbosity groups.

Each call is classified independently:

- ``debug``: printf-substituted and emitted verbatim; markup is left untouched.
- ``info`` / ``warn`` / ``error``: substituted, markup interpreted and rendered
  in the level's base color. Color is suppressed whenever the sink reports
  debug mode, since escape codes would corrupt its debug-formatted output.
- ``verbose``: like ``info``, but only for enabled verbosity groups.

None of these calls raise: a message that cannot be formatted is emitted
best-effort instead.

Example:
    ```python
    import logging

    from emphlog import AnsiLogger, LoggingSink, VerboseCategory

    log = AnsiLogger(LoggingSink(logging.getLogger("build")), use_color=True, verbose="build")
    log.info("Built image [[*]]%s[[*]]", "app:latest")
    log.verbose(VerboseCategory.BUILD, "Context: [[c]]%s[[c]]", "/src")
    ```
"""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, TextIO

from emphlog.config.logging import get_logger
from emphlog.config.model import resolve_use_color
from emphlog.constants import DEFAULT_LOG_PREFIX
from emphlog.markup.ansi import ERASE_LINE, RESET, cursor_down, cursor_up, fg
from emphlog.markup.colors import Palette
from emphlog.markup.parser import parse_markup
from emphlog.markup.renderer import render_line
from emphlog.verbosity import is_any_enabled, is_enabled, parse_verbosity

if TYPE_CHECKING:
    from emphlog.config.logging import EmphlogLogger
    from emphlog.config.model import LoggerConfig
    from emphlog.markup.colors import ColorSpec
    from emphlog.sink import Sink
    from emphlog.verbosity import VerboseCategory, VerbosityConfig

logger: EmphlogLogger = get_logger(__name__)

# Width of the longest progress status ("Downloading")
PROGRESS_STATUS_WIDTH = 11


def format_message(fmt: str, args: tuple[object, ...]) -> str:
    """Apply printf-style substitution, falling back to plain concatenation.

    Arguments beyond the placeholders are ignored. If the placeholders cannot
    be filled at all, the arguments are appended to ``fmt`` instead.

    Args:
        fmt (str): Format string with ``%s``/``%d`` style placeholders.
        args (tuple[object, ...]): Positional arguments; ``fmt`` is returned
            unchanged when empty.

    Returns:
        str: The substituted text.
    """
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError) as exc:
        error = exc
    # surplus arguments: keep the longest prefix that fills every placeholder
    for count in range(len(args) - 1, -1, -1):
        try:
            return fmt % args[:count]
        except (TypeError, ValueError):
            continue
    logger.debug("Cannot format %r with %d argument(s): %s", fmt, len(args), error)
    return " ".join([fmt, *(str(arg) for arg in args)])


class _ProgressState(threading.local):
    """Per-thread progress bookkeeping."""

    def __init__(self) -> None:
        self.lines: dict[str, int] = {}
        self.updates = 0


class AnsiLogger:
    """Logger facade rendering emphasis markup onto a `Sink`.

    Args:
        sink (Sink): Backend receiving the rendered lines.
        use_color (bool): Whether ANSI colors may be used at all.
        verbose (str | None): Verbosity specification (see `emphlog.verbosity`).
        batch_mode (bool): If True, progress output is suppressed.
        prefix (str): Prefix put in front of every line.
        palette (Palette | None): Level colors; defaults to `Palette()`.
        progress_stream (TextIO | None): Stream for progress output; defaults
            to ``sys.stdout`` at call time.
    """

    def __init__(
        self,
        sink: Sink,
        *,
        use_color: bool = True,
        verbose: str | None = None,
        batch_mode: bool = False,
        prefix: str = DEFAULT_LOG_PREFIX,
        palette: Palette | None = None,
        progress_stream: TextIO | None = None,
    ) -> None:
        self._sink = sink
        self._use_color = use_color
        self._batch_mode = batch_mode
        self._prefix = prefix
        self._palette = palette or Palette()
        self._progress_stream = progress_stream
        self._progress = _ProgressState()
        self._verbosity: VerbosityConfig = parse_verbosity(verbose, warn=sink.write_warn)

    @classmethod
    def from_config(
        cls,
        sink: Sink,
        config: LoggerConfig,
        *,
        stdout_isatty: bool | None = None,
        progress_stream: TextIO | None = None,
    ) -> AnsiLogger:
        """Build a logger from a frozen `LoggerConfig`."""
        return cls(
            sink,
            use_color=resolve_use_color(config, stdout_isatty=stdout_isatty),
            verbose=config.verbose,
            batch_mode=config.batch_mode,
            prefix=config.prefix,
            palette=config.palette,
            progress_stream=progress_stream,
        )

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def palette(self) -> Palette:
        return self._palette

    @property
    def verbosity(self) -> VerbosityConfig:
        return self._verbosity

    # --- Level calls ---

    def debug(self, fmt: str, *args: object) -> None:
        """Emit a debug line; markup is not interpreted."""
        self._sink.write_debug(self._prefix + format_message(fmt, args))

    def info(self, fmt: str, *args: object) -> None:
        """Emit an info line in the info color."""
        self._sink.write_info(self._colored(fmt, args, self._palette.info))

    def verbose(self, category: VerboseCategory | str, fmt: str, *args: object) -> None:
        """Emit an info line if ``category`` is an enabled verbosity group."""
        if is_enabled(self._verbosity, category):
            self.info(fmt, *args)

    def warn(self, fmt: str, *args: object) -> None:
        """Emit a warning line in the warning color."""
        self._sink.write_warn(self._colored(fmt, args, self._palette.warn))

    warning = warn

    def error(self, fmt: str, *args: object) -> None:
        """Emit an error line in the error color."""
        self._sink.write_error(self._colored(fmt, args, self._palette.error))

    def error_message(self, fmt: str, *args: object) -> str:
        """Return the line ``error`` would emit, without emitting it."""
        return self._colored(fmt, args, self._palette.error)

    def is_debug_enabled(self) -> bool:
        return self._sink.is_debug_mode_active()

    def is_verbose_enabled(self, category: VerboseCategory | str | None = None) -> bool:
        """Return whether ``category`` (or, if None, any group) is enabled."""
        if category is None:
            return is_any_enabled(self._verbosity)
        return is_enabled(self._verbosity, category)

    def color_active(self) -> bool:
        """Return whether the next non-debug line will carry color codes."""
        return self._use_color and not self._sink.is_debug_mode_active()

    def _colored(self, fmt: str, args: tuple[object, ...], base: ColorSpec) -> str:
        text = format_message(fmt, args)
        segments = parse_markup(text, emphasis=self._palette.emphasis)
        return render_line(segments, self._prefix, color_active=self.color_active(), base=base)

    # --- Progress ---

    def progress_start(self) -> None:
        """Start a new progress display for the current thread."""
        if self._progress_enabled():
            self._progress.lines = {}
            self._progress.updates = 0

    def progress_update(self, item_id: str, status: str, message: str | None = None) -> None:
        """Update the progress line of ``item_id``.

        Args:
            item_id (str): Identifier owning one progress line; ignored if empty.
            status (str): Short status word, e.g. ``"Downloading"``.
            message (str | None): Free-form progress text, e.g. a progress bar.
        """
        if not item_id or not self._progress_enabled():
            return
        if self.color_active():
            self._update_ansi_progress(item_id, status, message or "")
        else:
            self._update_plain_progress()
        self._stream().flush()

    def progress_finished(self) -> None:
        """Finish the progress display of the current thread."""
        if not self._progress_enabled():
            return
        self._progress.lines = {}
        out = self._stream()
        out.write(RESET)
        if not self.color_active():
            out.write("\n")
        out.flush()

    def _progress_enabled(self) -> bool:
        return not self._batch_mode and self._sink.is_info_enabled()

    def _stream(self) -> TextIO:
        return self._progress_stream or sys.stdout

    def _update_ansi_progress(self, item_id: str, status: str, message: str) -> None:
        lines = self._progress.lines
        out = self._stream()
        line = lines.get(item_id)
        diff = 0
        if line is None:
            lines[item_id] = len(lines)
        else:
            diff = len(lines) - line
        if diff > 0:
            out.write(cursor_up(diff) + ERASE_LINE)
        palette = self._palette
        out.write(
            f"{fg(palette.progress_id)}{item_id}{RESET}: "
            f"{fg(palette.progress_status)}{status.ljust(PROGRESS_STATUS_WIDTH)} "
            f"{fg(palette.progress_bar)}{message}\n"
        )
        if diff > 0:
            # back to the bottom line
            out.write(cursor_down(diff - 1))

    def _update_plain_progress(self) -> None:
        count = self._progress.updates
        self._progress.updates += 1
        out = self._stream()
        if count % 10 == 0:
            out.write("#")
        if count % 400 == 0:
            out.write("\n")
