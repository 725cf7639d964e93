# topmark:header:start
#
#   project      : Colorverb
#   file         : prepared.py
#   file_relpath : src/colorverb/core/prepared.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prepared formats: parse a highlight format once, select a variant per write.

`prepare` runs the scanner and resolver once and returns an immutable
`PreparedFormat` holding both variants. `select` is a plain attribute lookup,
so a prepared format can be shared between threads and reused indefinitely.
`run` composes the two for one-off use and pays the parse on every call.

Attributes left open by a format are never reset automatically: the escape
codes configure the terminal, so they stay in effect for whatever is written
next, until some later output emits ``%r``.

Example:
    ```python
    from colorverb.core.prepared import prepare, substitute

    fmt = prepare("%h[fgRed+bold]panic:%r %s\\n")
    substitute(fmt.get(False), ("rip",))   # 'panic: rip\\n'
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from colorverb.config.logging import get_logger
from colorverb.core.scanner import scan

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PreparedFormat:
    """The two rendered variants of a highlight format string.

    Attributes:
        raw (str): The format string as written by the caller.
        colored (str): ``raw`` with every highlight directive replaced by its
            escape sequence.
        plain (str): ``raw`` with every highlight directive removed.
    """

    raw: str
    colored: str
    plain: str

    def get(self, color_enabled: bool) -> str:
        """Return the colored or the plain variant.

        Args:
            color_enabled (bool): Whether escape sequences are wanted.

        Returns:
            str: ``colored`` if ``color_enabled`` else ``plain``.
        """
        return self.colored if color_enabled else self.plain


FormatLike = Union[str, PreparedFormat]


def prepare(raw: FormatLike) -> PreparedFormat:
    """Parse ``raw`` once into a `PreparedFormat`.

    Args:
        raw (FormatLike): A format string, or an already prepared format which is
            returned unchanged.

    Returns:
        PreparedFormat: The prepared format.

    Raises:
        MalformedDirectiveError: On a malformed ``%h`` directive.
        UnknownAttributeError: On an unknown attribute token.
    """
    if isinstance(raw, PreparedFormat):
        return raw
    colored, plain = scan(raw)
    logger.trace("prepared format %r", raw)
    return PreparedFormat(raw=raw, colored=colored, plain=plain)


def select(fmt: PreparedFormat, color_enabled: bool) -> str:
    """Return the variant of ``fmt`` matching ``color_enabled``."""
    return fmt.get(color_enabled)


def run(raw: FormatLike, color_enabled: bool) -> str:
    """Prepare ``raw`` and select a variant in one call.

    Equivalent to ``select(prepare(raw), color_enabled)``. Prefer `prepare` for
    formats used more than once.
    """
    return select(prepare(raw), color_enabled)


def substitute(text: str, args: tuple[object, ...]) -> str:
    """Apply the ``%`` operator to a selected variant.

    A single `Mapping` argument is used as the mapping for ``%(name)s``
    conversions, the way `logging` treats record arguments.

    Args:
        text (str): A variant returned by `select`.
        args (tuple[object, ...]): Substitution arguments.

    Returns:
        str: The formatted text.

    Raises:
        TypeError: Raised by the ``%`` operator on an argument count or type mismatch.
        ValueError: Raised by the ``%`` operator on an unsupported conversion.
        KeyError: Raised by the ``%`` operator on a missing mapping key.
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        return text % args[0]
    return text % args


def sprintf(fmt: FormatLike, *args: object, color_enabled: bool = True) -> str:
    """Prepare, select and substitute ``fmt`` with ``args``."""
    return substitute(run(fmt, color_enabled), args)
