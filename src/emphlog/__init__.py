# topmark:header:start
#
#   project      : EmphLog
#   file         : __init__.py
#   file_relpath : src/emphlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EmphLog package.

EmphLog renders log messages carrying a small emphasis markup (``[[*]]bold[[*]]``,
``[[c]]cyan[[c]]``) as ANSI-colored lines, or strips the markup when color is
unavailable, and filters verbose messages by verbosity group.
"""

from __future__ import annotations

from emphlog.config.color import ColorMode
from emphlog.config.model import LoggerConfig, MutableLoggerConfig
from emphlog.errors import EmphlogConfigError, EmphlogError
from emphlog.logger import AnsiLogger
from emphlog.markup.colors import BaseColor, ColorSpec, Palette
from emphlog.markup.parser import Segment, parse_markup, strip_markup
from emphlog.markup.renderer import render_line
from emphlog.sink import LoggingSink, Sink
from emphlog.verbosity import VerboseCategory, VerbosityConfig, parse_verbosity

__all__ = [
    "AnsiLogger",
    "BaseColor",
    "ColorMode",
    "ColorSpec",
    "EmphlogConfigError",
    "EmphlogError",
    "LoggerConfig",
    "LoggingSink",
    "MutableLoggerConfig",
    "Palette",
    "Segment",
    "Sink",
    "VerboseCategory",
    "VerbosityConfig",
    "parse_markup",
    "parse_verbosity",
    "render_line",
    "strip_markup",
]
