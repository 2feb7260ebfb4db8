# topmark:header:start
#
#   project      : EmphLog
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML configuration loading and discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from emphlog.config.color import ColorMode
from emphlog.config.io import discover_config, load_config_file, load_toml_dict, resolve_config
from emphlog.errors import EmphlogConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_reports_errors_as_empty(tmp_path: Path) -> None:
    bad = tmp_path / "emphlog.toml"
    bad.write_text("prefix = [unclosed\n", encoding="utf-8")
    assert load_toml_dict(bad) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_emphlog_toml_top_level(tmp_path: Path) -> None:
    path = tmp_path / "emphlog.toml"
    path.write_text('prefix = "B> "\nverbose = "build"\n', encoding="utf-8")
    builder = load_config_file(path)
    assert builder.prefix == "B> "
    assert builder.verbose == "build"


def test_pyproject_tool_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.emphlog]\ncolor = "never"\n\n'
        '[tool.emphlog.colors]\nwarn = "magenta"\n',
        encoding="utf-8",
    )
    config = load_config_file(path).freeze()
    assert config.color_mode is ColorMode.NEVER
    assert str(config.palette.warn) == "magenta"


def test_pyproject_without_table_is_skipped_by_discovery(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    emph = tmp_path / "a" / "emphlog.toml"
    emph.write_text('prefix = "A"\n', encoding="utf-8")
    assert discover_config(nested) == emph


def test_emphlog_toml_wins_in_same_directory(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.emphlog]\nprefix = "P"\n', encoding="utf-8")
    (tmp_path / "emphlog.toml").write_text('prefix = "E"\n', encoding="utf-8")
    assert discover_config(tmp_path) == tmp_path / "emphlog.toml"


def test_resolve_config_layers_env_over_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "emphlog.toml"
    path.write_text('prefix = "F> "\nverbose = "api"\n', encoding="utf-8")
    monkeypatch.setenv("EMPHLOG_VERBOSE", "build")
    config = resolve_config(config_path=path)
    assert config.prefix == "F> "
    assert config.verbose == "build"
    assert resolve_config(config_path=path, use_env=False).verbose == "api"


def test_resolve_config_invalid_value(tmp_path: Path) -> None:
    path = tmp_path / "emphlog.toml"
    path.write_text("batch_mode = 3\n", encoding="utf-8")
    with pytest.raises(EmphlogConfigError):
        resolve_config(config_path=path)
