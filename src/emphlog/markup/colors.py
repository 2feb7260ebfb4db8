# topmark:header:start
#
#   project      : EmphLog
#   file         : colors.py
#   file_relpath : src/emphlog/markup/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color identities and the marker letter table.

Key types:
    - `BaseColor`: the eight ANSI base colors, in SGR order.
    - `ColorSpec`: a base color plus a brightness flag (value type).
    - `Palette`: per-level base colors used by `emphlog.logger.AnsiLogger`.

The marker table maps a lower-case letter to a `BaseColor`; the letter's
case selects brightness (lower-case is bright). ``b`` is blue, so black uses
``k`` as in CMYK.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping


class BaseColor(str, Enum):
    """ANSI base colors; member order matches the SGR color index (30 + n)."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def sgr_index(self) -> int:
        """Return the SGR color index (0..7) of this color."""
        return list(BaseColor).index(self)


@dataclass(frozen=True)
class ColorSpec:
    """A base color together with its intensity.

    Attributes:
        base (BaseColor): The base color.
        bright (bool): Whether the bright variant is used.
    """

    base: BaseColor
    bright: bool = False

    @classmethod
    def from_name(cls, name: str) -> ColorSpec:
        """Parse a color name such as ``"cyan"`` or ``"bright_cyan"``.

        Args:
            name (str): Color name, case-insensitive, optionally prefixed with
                ``bright_`` (or ``bright-``).

        Returns:
            ColorSpec: The parsed color.

        Raises:
            ValueError: If the name does not denote a known base color.
        """
        key = name.strip().lower().replace("-", "_")
        bright = key.startswith("bright_")
        if bright:
            key = key[len("bright_") :]
        try:
            return cls(BaseColor(key), bright=bright)
        except ValueError:
            raise ValueError(f"Unknown color name: {name!r}") from None

    def __str__(self) -> str:
        return f"bright_{self.base.value}" if self.bright else self.base.value


EMPHASIS_MARKER: Final[str] = "*"
NO_COLOR_MARKER: Final[str] = "/"

DEFAULT_EMPHASIS: Final[BaseColor] = BaseColor.BLUE

COLOR_TABLE: Final[Mapping[str, BaseColor]] = {
    "k": BaseColor.BLACK,
    "r": BaseColor.RED,
    "g": BaseColor.GREEN,
    "y": BaseColor.YELLOW,
    "b": BaseColor.BLUE,
    "m": BaseColor.MAGENTA,
    "c": BaseColor.CYAN,
    "w": BaseColor.WHITE,
}


def emphasis_color(emphasis: BaseColor = DEFAULT_EMPHASIS) -> ColorSpec:
    """Return the color of the ``*`` marker (always bright)."""
    return ColorSpec(emphasis, bright=True)


def color_for(marker: str, emphasis: BaseColor = DEFAULT_EMPHASIS) -> ColorSpec | None:
    """Return the color a marker opens a region with.

    Args:
        marker (str): The single marker character.
        emphasis (BaseColor): Base color bound to the ``*`` marker.

    Returns:
        ColorSpec | None: The region color, or None for the colorless ``/`` marker.
            Letters missing from the table fall back to the emphasis color.
    """
    if marker == NO_COLOR_MARKER:
        return None
    if marker == EMPHASIS_MARKER:
        return emphasis_color(emphasis)
    base = COLOR_TABLE.get(marker.lower())
    if base is None:
        return emphasis_color(emphasis)
    return ColorSpec(base, bright=marker.islower())


@dataclass(frozen=True)
class Palette:
    """Base colors per log level and progress element.

    Attributes:
        info (ColorSpec): Base color of info and verbose lines.
        warn (ColorSpec): Base color of warning lines.
        error (ColorSpec): Base color of error lines.
        emphasis (BaseColor): Base color of the ``*`` marker.
        progress_id (ColorSpec): Color of the item id in progress lines.
        progress_status (ColorSpec): Color of the status word in progress lines.
        progress_bar (ColorSpec): Color of the progress message.
    """

    info: ColorSpec = ColorSpec(BaseColor.GREEN)
    warn: ColorSpec = ColorSpec(BaseColor.YELLOW)
    error: ColorSpec = ColorSpec(BaseColor.RED)
    emphasis: BaseColor = DEFAULT_EMPHASIS
    progress_id: ColorSpec = ColorSpec(BaseColor.YELLOW)
    progress_status: ColorSpec = ColorSpec(BaseColor.GREEN)
    progress_bar: ColorSpec = ColorSpec(BaseColor.CYAN)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> Palette:
        """Build a palette from field-name → color-name pairs.

        Unspecified fields keep their defaults. The ``emphasis`` entry names a
        base color only; a ``bright_`` prefix is accepted and ignored since
        emphasis is always bright.

        Raises:
            ValueError: On an unknown field or color name.
        """
        kwargs: dict[str, object] = {}
        for key, name in values.items():
            if key not in cls.__dataclass_fields__:
                raise ValueError(f"Unknown palette entry: {key!r}")
            spec = ColorSpec.from_name(name)
            kwargs[key] = spec.base if key == "emphasis" else spec
        return cls(**kwargs)  # type: ignore[arg-type]

    def to_mapping(self) -> dict[str, str]:
        """Return the palette as field-name → color-name pairs."""
        return {
            name: (getattr(self, name).value if name == "emphasis" else str(getattr(self, name)))
            for name in self.__dataclass_fields__
        }
