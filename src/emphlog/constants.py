# topmark:header:start
#
#   project      : EmphLog
#   file         : constants.py
#   file_relpath : src/emphlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EmphLog Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    EMPHLOG_VERSION: str = get_version("emphlog")
except PackageNotFoundError:  # running from a source checkout
    EMPHLOG_VERSION = "0.0.0"

DEFAULT_LOG_PREFIX: str = "EMPH> "

# Configuration files, in discovery order
EMPHLOG_TOML_NAME: str = "emphlog.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: tuple[str, str] = ("tool", "emphlog")
