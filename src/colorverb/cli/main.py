# topmark:header:start
#
#   project      : Colorverb
#   file         : main.py
#   file_relpath : src/colorverb/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Colorverb CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the console and the color decision from there.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from colorverb.cli.commands.attributes import attributes_command
from colorverb.cli.commands.check import check_command
from colorverb.cli.commands.render import render_command
from colorverb.cli.commands.version import version_command
from colorverb.cli.console import ClickConsole
from colorverb.cli.options import (
    common_color_options,
    common_verbose_options,
    effective_mode,
    resolve_verbosity,
)
from colorverb.config.logging import get_logger, resolve_env_log_level, setup_logging
from colorverb.terminal.mode import Mode, resolve_mode

if TYPE_CHECKING:
    from colorverb.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: Mode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (Mode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal diagnostics are configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    mode: Mode = effective_mode(color_mode, no_color)
    enable_color: bool = resolve_mode(mode, sys.stdout)
    logger.debug("CLI color mode %s resolved to %s", mode.value, enable_color)
    ctx.obj["color_mode"] = mode
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Colorverb CLI: render and check printf-style formats with highlight verbs.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: Mode | None,
    no_color: bool,
) -> None:
    """Entry point for the Colorverb CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'colorverb render FORMAT [ARGS]...' to render a format.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(check_command)

cli.add_command(attributes_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
