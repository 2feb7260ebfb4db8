# topmark:header:start
#
#   project      : EmphLog
#   file         : model.py
#   file_relpath : src/emphlog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logger configuration model.

The configuration follows an immutable/mutable split:

- `MutableLoggerConfig` is a builder: start from defaults, merge TOML tables
  and environment overrides, then `freeze()`.
- `LoggerConfig` is the frozen snapshot consumed by
  `emphlog.logger.AnsiLogger.from_config`. Use `thaw()` to edit a copy.

Layering (lowest to highest precedence): defaults, config file, environment,
explicit CLI/API arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from emphlog.config.color import ColorMode, resolve_color_mode
from emphlog.config.keys import Env, Toml
from emphlog.config.logging import get_logger
from emphlog.constants import DEFAULT_LOG_PREFIX
from emphlog.errors import EmphlogConfigError
from emphlog.markup.colors import Palette

if TYPE_CHECKING:
    from collections.abc import Mapping

    from emphlog.config.logging import EmphlogLogger

logger: EmphlogLogger = get_logger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(value: str, *, source: str) -> bool:
    """Parse a boolean flag from a string such as ``"yes"`` or ``"0"``.

    Raises:
        EmphlogConfigError: If the value is not a recognized boolean.
    """
    key = value.strip().lower()
    if key in _TRUE_VALUES:
        return True
    if key in _FALSE_VALUES:
        return False
    raise EmphlogConfigError(f"{source}: expected a boolean, got {value!r}")


def parse_color_mode(value: str, *, source: str) -> ColorMode:
    """Parse a `ColorMode` from its string value.

    Raises:
        EmphlogConfigError: If the value is not ``auto``, ``always`` or ``never``.
    """
    try:
        return ColorMode(value.strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in ColorMode)
        raise EmphlogConfigError(f"{source}: expected one of {choices}, got {value!r}") from None


def normalize_verbose(value: object, *, source: str) -> str | None:
    """Normalize a TOML ``verbose`` value into a verbosity specification string.

    Booleans map to ``"true"``/``"false"`` and lists of group names are joined
    with commas; an empty list selects no group (``"false"``). Strings pass
    through unchanged.

    Raises:
        EmphlogConfigError: For any other value type.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return ",".join(value) if value else "false"
    raise EmphlogConfigError(f"{source}: expected a string, boolean or list of strings")


@dataclass(frozen=True)
class LoggerConfig:
    """Immutable logger configuration.

    Attributes:
        prefix (str): Prefix put in front of every log line.
        color_mode (ColorMode): Color intent, resolved by `resolve_use_color`.
        verbose (str | None): Verbosity specification (see `emphlog.verbosity`).
        batch_mode (bool): Suppress interactive progress output.
        palette (Palette): Level and progress colors.
    """

    prefix: str = DEFAULT_LOG_PREFIX
    color_mode: ColorMode = ColorMode.AUTO
    verbose: str | None = None
    batch_mode: bool = False
    palette: Palette = field(default_factory=Palette)

    def thaw(self) -> MutableLoggerConfig:
        """Return a mutable copy of this configuration."""
        return MutableLoggerConfig(
            prefix=self.prefix,
            color_mode=self.color_mode,
            verbose=self.verbose,
            batch_mode=self.batch_mode,
            colors=self.palette.to_mapping(),
        )


@dataclass
class MutableLoggerConfig:
    """Mutable builder for `LoggerConfig`.

    Attributes:
        prefix (str): Prefix put in front of every log line.
        color_mode (ColorMode): Color intent.
        verbose (str | None): Verbosity specification.
        batch_mode (bool): Suppress interactive progress output.
        colors (dict[str, str]): Palette overrides, field name → color name.
    """

    prefix: str = DEFAULT_LOG_PREFIX
    color_mode: ColorMode = ColorMode.AUTO
    verbose: str | None = None
    batch_mode: bool = False
    colors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_defaults(cls) -> MutableLoggerConfig:
        return cls()

    def merge_toml_dict(
        self,
        data: Mapping[str, Any],
        *,
        source: str = "<toml>",
    ) -> MutableLoggerConfig:
        """Merge a parsed ``[tool.emphlog]`` / ``emphlog.toml`` table.

        Unknown keys are logged and ignored.

        Args:
            data (Mapping[str, Any]): The TOML table as plain Python values.
            source (str): Name of the source, used in error messages.

        Returns:
            MutableLoggerConfig: ``self``, for chaining.

        Raises:
            EmphlogConfigError: If a known key has a value of the wrong type.
        """
        for key in data:
            if key not in Toml.ALL_KEYS:
                logger.warning("%s: ignoring unknown key %r", source, key)

        if Toml.KEY_PREFIX in data:
            prefix = data[Toml.KEY_PREFIX]
            if not isinstance(prefix, str):
                raise EmphlogConfigError(f"{source}: '{Toml.KEY_PREFIX}' must be a string")
            self.prefix = prefix
        if Toml.KEY_COLOR in data:
            color = data[Toml.KEY_COLOR]
            if isinstance(color, bool):
                self.color_mode = ColorMode.ALWAYS if color else ColorMode.NEVER
            elif isinstance(color, str):
                self.color_mode = parse_color_mode(color, source=f"{source}: '{Toml.KEY_COLOR}'")
            else:
                raise EmphlogConfigError(
                    f"{source}: '{Toml.KEY_COLOR}' must be a string or boolean"
                )
        if Toml.KEY_VERBOSE in data:
            self.verbose = normalize_verbose(
                data[Toml.KEY_VERBOSE], source=f"{source}: '{Toml.KEY_VERBOSE}'"
            )
        if Toml.KEY_BATCH_MODE in data:
            batch_mode = data[Toml.KEY_BATCH_MODE]
            if not isinstance(batch_mode, bool):
                raise EmphlogConfigError(f"{source}: '{Toml.KEY_BATCH_MODE}' must be a boolean")
            self.batch_mode = batch_mode
        if Toml.SECTION_COLORS in data:
            colors = data[Toml.SECTION_COLORS]
            if not isinstance(colors, dict) or not all(isinstance(v, str) for v in colors.values()):
                raise EmphlogConfigError(
                    f"{source}: [{Toml.SECTION_COLORS}] must map names to color strings"
                )
            self.colors.update(colors)
        return self

    def apply_env(self, environ: Mapping[str, str] | None = None) -> MutableLoggerConfig:
        """Apply ``EMPHLOG_*`` environment overrides.

        Args:
            environ (Mapping[str, str] | None): Environment mapping; defaults to ``os.environ``.

        Returns:
            MutableLoggerConfig: ``self``, for chaining.

        Raises:
            EmphlogConfigError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        if Env.PREFIX in env:
            self.prefix = env[Env.PREFIX]
        if env.get(Env.COLOR):
            self.color_mode = parse_color_mode(env[Env.COLOR], source=Env.COLOR)
        if Env.VERBOSE in env:
            self.verbose = env[Env.VERBOSE]
        if env.get(Env.BATCH_MODE):
            self.batch_mode = parse_bool(env[Env.BATCH_MODE], source=Env.BATCH_MODE)
        return self

    def freeze(self) -> LoggerConfig:
        """Validate and return an immutable `LoggerConfig`.

        Raises:
            EmphlogConfigError: If a palette entry is invalid.
        """
        try:
            palette = Palette.from_mapping(self.colors)
        except ValueError as exc:
            raise EmphlogConfigError(f"[{Toml.SECTION_COLORS}]: {exc}") from exc
        return LoggerConfig(
            prefix=self.prefix,
            color_mode=self.color_mode,
            verbose=self.verbose,
            batch_mode=self.batch_mode,
            palette=palette,
        )


def resolve_use_color(config: LoggerConfig, *, stdout_isatty: bool | None = None) -> bool:
    """Return whether a logger built from ``config`` may use color."""
    return resolve_color_mode(color_mode_override=config.color_mode, stdout_isatty=stdout_isatty)
