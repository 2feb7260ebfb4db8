# topmark:header:start
#
#   project      : EmphLog
#   file         : strategies_emphlog.py
#   file_relpath : tests/strategies_emphlog.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating messages with emphasis markup.

Messages are built from plain text chunks interleaved with markers, so that
empty regions, mismatched closers and unterminated regions all show up.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st

from emphlog.markup.colors import BaseColor, ColorSpec

MARKER_CHARS: str = string.ascii_letters + "*/"

# Plain text: printable, but without ESC so ANSI stripping stays unambiguous.
s_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Cc")),
    max_size=12,
)

s_marker: st.SearchStrategy[str] = st.sampled_from(MARKER_CHARS).map(lambda c: f"[[{c}]]")

s_message: st.SearchStrategy[str] = st.lists(
    st.one_of(s_text, s_marker, st.just("[["), st.just("]]")),
    max_size=16,
).map("".join)

s_color_spec: st.SearchStrategy[ColorSpec] = st.builds(
    ColorSpec,
    base=st.sampled_from(list(BaseColor)),
    bright=st.booleans(),
)
