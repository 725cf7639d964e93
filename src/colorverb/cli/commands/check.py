# topmark:header:start
#
#   project      : Colorverb
#   file         : check.py
#   file_relpath : src/colorverb/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb `check` command.

Prepares each FORMAT and reports either the ordinary conversions it carries or
the reason it was rejected. Conversions the ``%`` operator will refuse, such as
a trailing ``%``, are flagged with a warning. Exits with ``FORMAT_ERROR`` if any format fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colorverb.cli.exit_codes import ExitCode
from colorverb.config.logging import get_logger
from colorverb.core.errors import HighlightError
from colorverb.core.prepared import prepare
from colorverb.core.scanner import ORDINARY_VERBS, ordinary_verbs

if TYPE_CHECKING:
    from colorverb.cli.console_api import ConsoleLike
    from colorverb.core.prepared import PreparedFormat

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Validate highlight formats without rendering them.",
)
@click.argument("formats", metavar="FORMAT...", nargs=-1, required=True)
def check_command(*, formats: tuple[str, ...]) -> None:
    """Validate one or more highlight formats.

    Args:
        formats (tuple[str, ...]): Format strings to prepare.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    failures: int = 0
    for raw in formats:
        try:
            prepared: PreparedFormat = prepare(raw)
        except HighlightError as exc:
            failures += 1
            logger.info("format %r rejected: %s", raw, exc)
            console.error(f"error {raw!r}: {exc}")
            continue

        if verbosity < 0:
            continue
        verbs: list[str] = ordinary_verbs(raw)
        summary: str = f"{len(verbs)} conversion(s)"
        if verbs:
            summary += f": {' '.join(verbs)}"
        console.print(f"{console.styled('ok', fg='green', bold=True)} {raw!r} ({summary})")
        for verb in verbs:
            if len(verb) < 2 or verb[-1] not in ORDINARY_VERBS:
                console.warn(f"    warning: {verb!r} is not a complete conversion")
        if verbosity > 0:
            console.print(f"    colored: {prepared.colored!r}")
            console.print(f"    plain:   {prepared.plain!r}")

    if failures:
        ctx.exit(ExitCode.FORMAT_ERROR)
