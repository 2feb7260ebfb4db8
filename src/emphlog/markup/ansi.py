# topmark:header:start
#
#   project      : EmphLog
#   file         : ansi.py
#   file_relpath : src/emphlog/markup/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI escape sequences used by the line renderer and progress output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from emphlog.markup.colors import ColorSpec

CSI: Final[str] = "\x1b["
RESET: Final[str] = f"{CSI}0m"
ERASE_LINE: Final[str] = f"{CSI}2K"


def fg(color: ColorSpec) -> str:
    """Return the SGR sequence selecting ``color`` as foreground."""
    offset = 90 if color.bright else 30
    return f"{CSI}{offset + color.base.sgr_index}m"


def cursor_up(lines: int) -> str:
    """Move the cursor up by ``lines`` (empty for non-positive counts)."""
    return f"{CSI}{lines}A" if lines > 0 else ""


def cursor_down(lines: int) -> str:
    """Move the cursor down by ``lines`` (empty for non-positive counts)."""
    return f"{CSI}{lines}B" if lines > 0 else ""
