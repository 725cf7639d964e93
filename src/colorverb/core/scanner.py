# topmark:header:start
#
#   project      : Colorverb
#   file         : scanner.py
#   file_relpath : src/colorverb/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verb scanner for highlight format strings.

The scanner walks a printf-style format string once, left to right, and splits
it into three kinds of segments:

- literal text;
- ordinary ``%`` conversions (``%s``, ``%-10.2f``, ``%(name)d``, ``%%``, ...),
  which are recognized only so they are never mistaken for highlight verbs and
  are otherwise copied verbatim;
- highlight directives: ``%h[...]`` (open) and ``%r`` (reset).

`scan` turns those segments into the colored and plain variants in lockstep,
so both always carry the same ordinary conversions in the same order.

Notes:
    ``%h`` and ``%r`` are reserved. Write ``%%h`` / ``%%r`` for the literal text.
    Python's bare ``%r`` repr conversion is therefore unavailable; ``%a`` or
    ``%1r`` still reach the ``%`` operator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from colorverb.config.logging import get_logger
from colorverb.core.errors import HighlightError, MalformedDirectiveError
from colorverb.core.resolver import RESET, HighlightDirective, resolve_attributes

if TYPE_CHECKING:
    from collections.abc import Iterator

    from colorverb.config.logging import ColorverbLogger

logger: ColorverbLogger = get_logger(__name__)

VERB_MARKER: Final[str] = "%"
HIGHLIGHT_VERB: Final[str] = "h"
RESET_VERB: Final[str] = "r"

# Conversion characters understood by the ``%`` operator.
ORDINARY_VERBS: Final[frozenset[str]] = frozenset("diouxXeEfFgGcrsa%")
_FLAGS: Final[frozenset[str]] = frozenset("#0- +")
_LENGTH_MODIFIERS: Final[frozenset[str]] = frozenset("hlL")
_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


class SegmentKind(Enum):
    """Classification of a scanned run of the format string."""

    LITERAL = "literal"
    VERB = "verb"
    DIRECTIVE = "directive"


@dataclass(frozen=True, slots=True)
class Segment:
    """A run of the raw format string.

    Attributes:
        kind (SegmentKind): What the run is.
        text (str): The raw text of the run.
        start (int): Offset of the run in the raw string.
        directive (HighlightDirective | None): Resolved directive for
            ``SegmentKind.DIRECTIVE`` runs.
    """

    kind: SegmentKind
    text: str
    start: int
    directive: HighlightDirective | None = None


def _skip_digits(raw: str, pos: int) -> int:
    while pos < len(raw) and raw[pos] in _DIGITS:
        pos += 1
    return pos


def _end_of_conversion(raw: str, start: int) -> int:
    """Return the offset just past the ordinary conversion at ``raw[start]``.

    Follows the grammar of the ``%`` operator: optional ``(key)``, flags, width,
    precision, length modifier and the conversion character. Malformed tails are
    cut short and left to the ``%`` operator to report.
    """
    pos: int = start + 1
    end: int = len(raw)

    if pos < end and raw[pos] == "(":
        depth = 1
        pos += 1
        while pos < end and depth:
            if raw[pos] == "(":
                depth += 1
            elif raw[pos] == ")":
                depth -= 1
            pos += 1
        if depth:
            return end

    while pos < end and raw[pos] in _FLAGS:
        pos += 1

    if pos < end and raw[pos] == "*":
        pos += 1
    else:
        pos = _skip_digits(raw, pos)

    if pos < end and raw[pos] == ".":
        pos += 1
        if pos < end and raw[pos] == "*":
            pos += 1
        else:
            pos = _skip_digits(raw, pos)

    if pos < end and raw[pos] in _LENGTH_MODIFIERS:
        pos += 1

    if pos < end and raw[pos] in ORDINARY_VERBS:
        pos += 1
    return pos


def _highlight_directive(raw: str, start: int) -> tuple[HighlightDirective, int]:
    """Parse the ``%h[...]`` directive at ``raw[start]``; return it and its end."""
    open_pos: int = start + 2
    if open_pos >= len(raw) or raw[open_pos] != "[":
        raise MalformedDirectiveError(
            "expected '[' after %h",
            format=raw,
            position=start,
        )
    close_pos: int = raw.find("]", open_pos + 1)
    if close_pos < 0:
        raise MalformedDirectiveError(
            "unterminated highlight attributes, missing ']'",
            format=raw,
            position=start,
        )
    try:
        directive: HighlightDirective = resolve_attributes(raw[open_pos + 1 : close_pos])
    except HighlightError as exc:
        exc.format = raw
        exc.position = start
        raise
    return directive, close_pos + 1


def iter_segments(raw: str) -> Iterator[Segment]:
    """Yield the segments of ``raw`` from left to right.

    Args:
        raw (str): The format string.

    Yields:
        Segment: Literal runs, ordinary conversions and highlight directives.

    Raises:
        MalformedDirectiveError: On a malformed ``%h`` directive.
        UnknownAttributeError: On an unknown attribute token.
    """
    literal_start: int = 0
    pos: int = raw.find(VERB_MARKER)
    while pos >= 0:
        if pos > literal_start:
            yield Segment(SegmentKind.LITERAL, raw[literal_start:pos], literal_start)

        verb: str = raw[pos + 1 : pos + 2]
        if verb == HIGHLIGHT_VERB:
            directive, end = _highlight_directive(raw, pos)
            yield Segment(SegmentKind.DIRECTIVE, raw[pos:end], pos, directive)
        elif verb == RESET_VERB:
            end = pos + 2
            yield Segment(SegmentKind.DIRECTIVE, raw[pos:end], pos, RESET)
        else:
            end = _end_of_conversion(raw, pos)
            yield Segment(SegmentKind.VERB, raw[pos:end], pos)

        literal_start = end
        pos = raw.find(VERB_MARKER, end)

    if literal_start < len(raw):
        yield Segment(SegmentKind.LITERAL, raw[literal_start:], literal_start)


def scan(raw: str) -> tuple[str, str]:
    """Build the colored and plain variants of ``raw`` in a single pass.

    Args:
        raw (str): The format string.

    Returns:
        tuple[str, str]: ``(colored, plain)``. Highlight directives become escape
        sequences in ``colored`` and vanish from ``plain``; everything else is
        copied to both unchanged.
    """
    colored: list[str] = []
    plain: list[str] = []
    directives: int = 0
    for segment in iter_segments(raw):
        if segment.directive is not None:
            colored.append(segment.directive.sequence)
            directives += 1
            continue
        colored.append(segment.text)
        plain.append(segment.text)
    logger.trace("scanned %d highlight directive(s) in %r", directives, raw)
    return "".join(colored), "".join(plain)


def ordinary_verbs(raw: str) -> list[str]:
    """Return the ordinary ``%`` conversions of ``raw`` in order.

    Highlight directives are skipped. This is the sequence both variants of a
    prepared format share.

    Args:
        raw (str): The format string.

    Returns:
        list[str]: Conversions as written, e.g. ``["%s", "%-5d", "%%"]``.
    """
    return [s.text for s in iter_segments(raw) if s.kind is SegmentKind.VERB]
