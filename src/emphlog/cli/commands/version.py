# topmark:header:start
#
#   project      : EmphLog
#   file         : version.py
#   file_relpath : src/emphlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EmphLog `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emphlog.constants import EMPHLOG_VERSION

if TYPE_CHECKING:
    from emphlog.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of EmphLog.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the EmphLog version as installed in the current Python environment."""
    console: ClickConsole = ctx.obj["console"]
    console.print(console.styled(EMPHLOG_VERSION, bold=True))
