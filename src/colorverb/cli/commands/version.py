# topmark:header:start
#
#   project      : Colorverb
#   file         : version.py
#   file_relpath : src/colorverb/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb `version` command.

Prints the current Colorverb version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from colorverb.cli.cli_types import EnumChoiceParam, OutputFormat
from colorverb.constants import COLORVERB_VERSION

if TYPE_CHECKING:
    from colorverb.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Colorverb.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Colorverb.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": COLORVERB_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("Colorverb version:", bold=True, underline=True))
        console.print(f"    {console.styled(COLORVERB_VERSION, bold=True)}")
    else:
        console.print(console.styled(COLORVERB_VERSION, bold=True))
