# topmark:header:start
#
#   project      : EmphLog
#   file         : io.py
#   file_relpath : src/emphlog/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load logger configuration from TOML sources.

Two sources are recognized:

- ``emphlog.toml``: keys at the top level;
- ``pyproject.toml``: keys under ``[tool.emphlog]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from emphlog.config.logging import get_logger
from emphlog.config.model import MutableLoggerConfig
from emphlog.constants import EMPHLOG_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from emphlog.config.logging import EmphlogLogger
    from emphlog.config.model import LoggerConfig

TomlTable = dict[str, Any]

logger: EmphlogLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``emphlog.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_emphlog_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the EmphLog table of a parsed document, or None if it has none.

    ``pyproject.toml`` documents only count when they carry ``[tool.emphlog]``.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    table: Any = data
    for key in PYPROJECT_TOOL_SECTION:
        if not isinstance(table, dict) or key not in table:
            return None
        table = table[key]
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config(start_dir: Path) -> Path | None:
    """Find the nearest configuration file at or above ``start_dir``.

    In each directory ``emphlog.toml`` wins over ``pyproject.toml``; the latter
    is only accepted when it carries a ``[tool.emphlog]`` table.
    """
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / EMPHLOG_TOML_NAME
        if candidate.is_file():
            logger.debug("Found config %s", candidate)
            return candidate
        candidate = directory / PYPROJECT_TOML_NAME
        if candidate.is_file() and extract_emphlog_table(candidate, load_toml_dict(candidate)):
            logger.debug("Found config %s", candidate)
            return candidate
    return None


def load_config_file(
    path: Path,
    into: MutableLoggerConfig | None = None,
) -> MutableLoggerConfig:
    """Merge the configuration stored in ``path``.

    Args:
        path: An ``emphlog.toml`` or ``pyproject.toml`` file.
        into: Builder to merge into; a fresh default builder when None.

    Returns:
        The builder with the file's settings merged.

    Raises:
        EmphlogConfigError: If the file holds invalid values.
    """
    builder = into or MutableLoggerConfig.from_defaults()
    table = extract_emphlog_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No EmphLog settings in %s", path)
        return builder
    return builder.merge_toml_dict(table, source=str(path))


def resolve_config(
    *,
    config_path: Path | None = None,
    start_dir: Path | None = None,
    use_env: bool = True,
) -> LoggerConfig:
    """Build a frozen configuration from defaults, a file and the environment.

    Args:
        config_path: Explicit configuration file; discovery is skipped when given.
        start_dir: Directory to start discovery from (defaults to the CWD).
        use_env: Whether to apply ``EMPHLOG_*`` environment overrides.

    Returns:
        The resolved `LoggerConfig`.

    Raises:
        EmphlogConfigError: If any source holds invalid values.
    """
    builder = MutableLoggerConfig.from_defaults()
    path = config_path or discover_config(start_dir or Path.cwd())
    if path is not None:
        load_config_file(path, builder)
    if use_env:
        builder.apply_env()
    return builder.freeze()
