# topmark:header:start
#
#   project      : EmphLog
#   file         : main.py
#   file_relpath : src/emphlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EmphLog CLI entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``config``: the frozen `emphlog.config.model.LoggerConfig` (file + environment
  + ``--color``/``--no-color``);
- ``use_color``: the resolved color decision;
- ``console``: the `emphlog.cli.console.ClickConsole` for program output.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from emphlog.cli.commands.log import log_command
from emphlog.cli.commands.strip import strip_command
from emphlog.cli.commands.version import version_command
from emphlog.cli.console import ClickConsole
from emphlog.cli.errors import EmphlogCliConfigError
from emphlog.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_cli_color_mode,
    resolve_verbosity,
)
from emphlog.config.io import resolve_config
from emphlog.config.logging import get_logger, resolve_env_log_level, setup_logging
from emphlog.config.model import resolve_use_color
from emphlog.errors import EmphlogConfigError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (diagnostics, configuration, color) on the Click context.

    Raises:
        EmphlogCliConfigError: If the configuration is invalid.
    """
    ctx.obj = ctx.obj or {}

    level_env = resolve_env_log_level()
    setup_logging(level=level_env if level_env is not None else resolve_verbosity(verbose, quiet))

    try:
        config = resolve_config(config_path=config_path)
    except EmphlogConfigError as exc:
        raise EmphlogCliConfigError(str(exc)) from exc

    override = resolve_cli_color_mode(color_mode, no_color)
    if override is not None:
        config = dataclasses.replace(config, color_mode=override)
    logger.debug("Resolved configuration: %s", config)

    use_color = resolve_use_color(config)
    ctx.obj["config"] = config
    ctx.obj["use_color"] = use_color
    ctx.color = use_color
    ctx.obj["console"] = ClickConsole(enable_color=use_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="EmphLog CLI: render emphasis markup as colored log lines.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this emphlog.toml or pyproject.toml instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the EmphLog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'emphlog log MESSAGE' to render a message.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(log_command)

cli.add_command(strip_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
