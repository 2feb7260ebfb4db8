# topmark:header:start
#
#   project      : EmphLog
#   file         : renderer.py
#   file_relpath : src/emphlog/markup/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render parsed segments as a single log line.

With color active the line starts in the level's base color, every colored
segment switches to its own color, plain text switches back to the base color
only when needed, and the line ends with a full reset. Without color only the
prefix and the visible text remain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from emphlog.markup.ansi import RESET, fg
from emphlog.markup.parser import merge_segments

if TYPE_CHECKING:
    from collections.abc import Iterable

    from emphlog.markup.colors import ColorSpec
    from emphlog.markup.parser import Segment


def render_line(
    segments: Iterable[Segment],
    prefix: str,
    *,
    color_active: bool,
    base: ColorSpec,
) -> str:
    """Render segments after ``prefix``.

    Args:
        segments (Iterable[Segment]): Parsed segments, in order.
        prefix (str): Line prefix, rendered in the base color.
        color_active (bool): Whether to emit ANSI escape sequences.
        base (ColorSpec): Base color of the line.

    Returns:
        str: The rendered line.
    """
    # Re-merge so that no escape sequence ever wraps an empty string.
    parts = merge_segments(segments)
    if not color_active:
        return prefix + "".join(segment.text for segment in parts)

    out: list[str] = [fg(base), prefix]
    current: ColorSpec = base
    for segment in parts:
        wanted = base if segment.color is None else segment.color
        if wanted != current:
            out.append(fg(wanted))
            current = wanted
        out.append(segment.text)
    out.append(RESET)
    return "".join(out)
