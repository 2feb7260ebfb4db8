# topmark:header:start
#
#   project      : EmphLog
#   file         : __main__.py
#   file_relpath : src/emphlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running EmphLog via ``python -m emphlog``."""

from __future__ import annotations

from emphlog.cli.main import cli

if __name__ == "__main__":
    cli()
