# topmark:header:start
#
#   project      : EmphLog
#   file         : color.py
#   file_relpath : src/emphlog/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether rendered log lines may carry ANSI color codes.

`AnsiLogger` asks once, when it is built. Three sources are consulted, the
first one with an opinion wins:

1. the configured `ColorMode` (``color`` in ``emphlog.toml``, ``EMPHLOG_COLOR``,
   or ``--color``/``--no-color`` on the command line);
2. the ``FORCE_COLOR`` and ``NO_COLOR`` environment conventions;
3. whether standard output is a terminal.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import TextIO


class ColorMode(str, Enum):
    """Configured color intent for log lines."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def env_color_preference(environ: Mapping[str, str] | None = None) -> bool | None:
    """Return the color choice expressed by the environment, or None.

    ``FORCE_COLOR`` (any value except ``"0"``) turns color on and takes
    precedence over ``NO_COLOR``, which turns it off whenever it is set.
    """
    env = os.environ if environ is None else environ
    force = env.get("FORCE_COLOR")
    if force and force != "0":
        return True
    if "NO_COLOR" in env:
        return False
    return None


def stream_is_terminal(stream: TextIO | None = None) -> bool:
    """Return whether ``stream`` (default: standard output) is a terminal."""
    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, OSError, ValueError):
        # closed or replaced streams
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True if log lines should be colored.

    Args:
        color_mode_override: Configured mode; `None` and `ColorMode.AUTO` defer
            to the environment and then to terminal detection.
        stdout_isatty: Terminal detection result to use instead of probing
            standard output.

    Returns:
        Whether color codes may be emitted.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stdout_isatty=False)
        True
    """
    if color_mode_override is ColorMode.ALWAYS:
        return True
    if color_mode_override is ColorMode.NEVER:
        return False
    preference = env_color_preference()
    if preference is not None:
        return preference
    return stream_is_terminal() if stdout_isatty is None else stdout_isatty
