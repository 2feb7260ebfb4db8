# topmark:header:start
#
#   project      : EmphLog
#   file         : strip.py
#   file_relpath : src/emphlog/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EmphLog `strip` command.

Prints text with all emphasis markers removed, keeping the inner text. Reads
STDIN when no TEXT argument is given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from emphlog.markup.parser import strip_markup

if TYPE_CHECKING:
    from emphlog.cli.console import ClickConsole


@click.command(
    name="strip",
    help="Remove emphasis markup from TEXT (or STDIN).",
)
@click.argument("texts", nargs=-1)
@click.pass_context
def strip_command(ctx: click.Context, texts: tuple[str, ...]) -> None:
    """Strip markup from the given texts, one output line per text."""
    console: ClickConsole = ctx.obj["console"]
    if texts:
        for text in texts:
            console.print(strip_markup(text))
        return
    content = click.get_text_stream("stdin").read()
    console.print(strip_markup(content), nl=False)
