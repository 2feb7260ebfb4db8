# topmark:header:start
#
#   project      : EmphLog
#   file         : keys.py
#   file_relpath : src/emphlog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration keys for TOML sources and environment variables."""

from __future__ import annotations

from typing import Final


class Toml:
    """Keys of the ``emphlog.toml`` / ``[tool.emphlog]`` table."""

    KEY_PREFIX: Final[str] = "prefix"
    KEY_COLOR: Final[str] = "color"
    KEY_VERBOSE: Final[str] = "verbose"
    KEY_BATCH_MODE: Final[str] = "batch_mode"

    SECTION_COLORS: Final[str] = "colors"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_PREFIX, KEY_COLOR, KEY_VERBOSE, KEY_BATCH_MODE, SECTION_COLORS}
    )


class Env:
    """Environment variables overriding file configuration."""

    PREFIX: Final[str] = "EMPHLOG_PREFIX"
    COLOR: Final[str] = "EMPHLOG_COLOR"
    VERBOSE: Final[str] = "EMPHLOG_VERBOSE"
    BATCH_MODE: Final[str] = "EMPHLOG_BATCH_MODE"
