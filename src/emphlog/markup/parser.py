# topmark:header:start
#
#   project      : EmphLog
#   file         : parser.py
#   file_relpath : src/emphlog/markup/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emphasis markup parser.

Log messages may contain markers of the form ``[[x]]`` where ``x`` is a
single character from ``a-z``, ``A-Z``, ``*`` or ``/``. Markers toggle a
single color region:

- a marker while no region is open opens one in the marker's color;
- any marker while a region is open closes it, whatever its character.

So ``[[b]]Blue[[*]]`` works just like ``[[b]]Blue[[b]]``. Regions do not nest.
An unterminated region keeps its color up to the end of the message.

Example:
    ```python
    parse_markup("Yet another [[*]]Test[[*]] emphasis")
    # [Segment(None, "Yet another "),
    #  Segment(ColorSpec(BLUE, bright=True), "Test"),
    #  Segment(None, " emphasis")]
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from emphlog.markup.colors import DEFAULT_EMPHASIS, BaseColor, ColorSpec, color_for

if TYPE_CHECKING:
    from collections.abc import Iterable

MARKER_RE: Final[re.Pattern[str]] = re.compile(r"\[\[([a-zA-Z*/])\]\]")


@dataclass(frozen=True)
class Segment:
    """A run of text rendered under one color.

    Attributes:
        color (ColorSpec | None): Region color, or None for the line's base color.
        text (str): The visible text.
    """

    color: ColorSpec | None
    text: str


def parse_markup(text: str, *, emphasis: BaseColor = DEFAULT_EMPHASIS) -> list[Segment]:
    """Split ``text`` into merged color segments.

    Args:
        text (str): Message text, already printf-substituted.
        emphasis (BaseColor): Base color bound to the ``*`` marker.

    Returns:
        list[Segment]: Non-empty segments; adjacent segments never share a color.
    """
    segments: list[Segment] = []
    active = False
    color: ColorSpec | None = None
    pos = 0

    for match in MARKER_RE.finditer(text):
        buffer = text[pos : match.start()]
        pos = match.end()
        if active:
            segments.append(Segment(color, buffer))
            active = False
            color = None
        else:
            segments.append(Segment(None, buffer))
            active = True
            color = color_for(match.group(1), emphasis)

    segments.append(Segment(color, text[pos:]))
    return merge_segments(segments)


def merge_segments(segments: Iterable[Segment]) -> list[Segment]:
    """Drop empty segments and merge neighbours that share a color.

    Applying this to an already merged sequence returns an equal sequence.
    """
    merged: list[Segment] = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].color == segment.color:
            merged[-1] = Segment(segment.color, merged[-1].text + segment.text)
        else:
            merged.append(segment)
    return merged


def strip_markup(text: str) -> str:
    """Return ``text`` with all markers removed and the inner text kept."""
    return "".join(segment.text for segment in parse_markup(text))
