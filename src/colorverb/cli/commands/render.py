# topmark:header:start
#
#   project      : Colorverb
#   file         : render.py
#   file_relpath : src/colorverb/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb `render` command.

Renders a highlight format with the given arguments to standard output, colored
or plain according to the group-level color options.
"""

from __future__ import annotations

import re
import sys

import click

from colorverb.cli.errors import ColorverbFormatError
from colorverb.config.logging import get_logger
from colorverb.core.errors import HighlightError
from colorverb.core.prepared import PreparedFormat, prepare
from colorverb.output.printer import Printer
from colorverb.terminal.mode import Mode

logger = get_logger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")


def coerce_arg(value: str) -> int | float | str:
    """Return ``value`` as an int or float when it spells one, else unchanged.

    Args:
        value (str): A command-line argument.

    Returns:
        int | float | str: The coerced value.
    """
    if _INT_RE.fullmatch(value):
        return int(value)
    if _FLOAT_RE.fullmatch(value):
        return float(value)
    return value


@click.command(
    name="render",
    help="Render FORMAT with ARGS. Numeric ARGS are passed as numbers unless --strings is given.",
)
@click.argument("format_string", metavar="FORMAT")
@click.argument("args", nargs=-1)
@click.option(
    "--strings",
    is_flag=True,
    default=False,
    help="Pass every ARG as a string.",
)
@click.option(
    "-n",
    "--no-newline",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not append a newline.",
)
def render_command(
    *,
    format_string: str,
    args: tuple[str, ...],
    strings: bool,
    no_newline: bool,
) -> None:
    """Render a highlight format to stdout.

    Args:
        format_string (str): The highlight format.
        args (tuple[str, ...]): Substitution arguments.
        strings (bool): Disable numeric coercion of ``args``.
        no_newline (bool): Do not append a newline after the output.

    Raises:
        ColorverbFormatError: If the format cannot be prepared or substituted.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    color_enabled: bool = ctx.obj["color_enabled"]

    try:
        prepared: PreparedFormat = prepare(format_string)
    except HighlightError as exc:
        raise ColorverbFormatError(f"invalid format {format_string!r}: {exc}") from exc

    values: tuple[object, ...] = args if strings else tuple(coerce_arg(a) for a in args)
    logger.debug("rendering %r with %d argument(s)", format_string, len(values))

    printer = Printer(sys.stdout, Mode.ENABLE_COLOR if color_enabled else Mode.DISABLE_COLOR)
    try:
        printer.printf(prepared, *values)
    except (TypeError, ValueError, KeyError) as exc:
        raise ColorverbFormatError(f"cannot substitute arguments: {exc}") from exc
    if not no_newline:
        printer.println()
