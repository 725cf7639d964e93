# topmark:header:start
#
#   project      : Colorverb
#   file         : attributes.py
#   file_relpath : src/colorverb/cli/commands/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb `attributes` command.

Lists the named attribute tokens with their SGR codes, each sample rendered
through the highlight engine itself, and optionally the 256-color palette.
"""

from __future__ import annotations

import sys

import click

from colorverb.core.attributes import ATTRIBUTE_TABLE, MAX_COLOR_INDEX
from colorverb.core.prepared import prepare
from colorverb.output.printer import Printer
from colorverb.terminal.mode import Mode

PALETTE_ROW: int = 16


@click.command(
    name="attributes",
    help="List the attribute tokens accepted inside %h[...].",
)
@click.option(
    "--palette",
    is_flag=True,
    default=False,
    help="Also show the 256-color palette selected with fg<N>/bg<N>.",
)
def attributes_command(*, palette: bool) -> None:
    """List attribute tokens and their SGR codes.

    Args:
        palette (bool): Also print the indexed palette.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    color_enabled: bool = ctx.obj["color_enabled"]
    printer = Printer(sys.stdout, Mode.ENABLE_COLOR if color_enabled else Mode.DISABLE_COLOR)

    width: int = max(len(name) for name in ATTRIBUTE_TABLE)
    row = prepare("%%-%ds  %%-8s %%s\n" % width)
    for name, token in ATTRIBUTE_TABLE.items():
        codes: str = ";".join(str(c) for c in token.codes)
        sample: str = printer.sprintf(f"%h[{name}]sample%r")
        printer.printf(row, name, codes, sample)

    if not palette:
        return

    printer.println()
    cells = [prepare(f"%h[bg{index}] %3d %r") for index in range(MAX_COLOR_INDEX + 1)]
    for start in range(0, len(cells), PALETTE_ROW):
        for index in range(start, start + PALETTE_ROW):
            printer.printf(cells[index], index)
        printer.println()
