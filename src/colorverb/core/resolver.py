# topmark:header:start
#
#   project      : Colorverb
#   file         : resolver.py
#   file_relpath : src/colorverb/core/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolution of ``%h[...]`` bracket expressions into SGR escape sequences.

An expression such as ``"fgGreen+bold"`` is split on ``+``; each token is
looked up in the attribute table and all codes are combined into a single
``ESC [ p1 ; p2 ; ... m`` sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from colorverb.core.attributes import AttributeToken, lookup_attribute
from colorverb.core.errors import MalformedDirectiveError

if TYPE_CHECKING:
    from collections.abc import Iterable

CSI: Final[str] = "\x1b["
SGR_TERMINATOR: Final[str] = "m"
ATTRIBUTE_SEPARATOR: Final[str] = "+"


def render_sgr(codes: Iterable[int]) -> str:
    """Render SGR parameters as one escape sequence.

    Args:
        codes (Iterable[int]): SGR parameters in emission order.

    Returns:
        str: The escape sequence, e.g. ``"\\x1b[32;1m"``.
    """
    return CSI + ";".join(str(code) for code in codes) + SGR_TERMINATOR


RESET_SEQUENCE: Final[str] = render_sgr((0,))


@dataclass(frozen=True, slots=True)
class HighlightDirective:
    """One ``%h[...]`` (open) or ``%r`` (reset) occurrence.

    Attributes:
        tokens (tuple[AttributeToken, ...]): Resolved tokens in source order; empty
            for the reset directive.
    """

    tokens: tuple[AttributeToken, ...] = ()

    @property
    def is_reset(self) -> bool:
        """Return True for the reset directive."""
        return not self.tokens

    @property
    def codes(self) -> tuple[int, ...]:
        """Return the flattened SGR parameters of this directive."""
        if self.is_reset:
            return (0,)
        return tuple(code for token in self.tokens for code in token.codes)

    @property
    def sequence(self) -> str:
        """Return the escape sequence emitted in colored output."""
        if self.is_reset:
            return RESET_SEQUENCE
        return render_sgr(self.codes)


RESET: Final[HighlightDirective] = HighlightDirective()


def resolve_attributes(expression: str) -> HighlightDirective:
    """Resolve the contents of a ``%h[...]`` bracket.

    Args:
        expression (str): Text between ``[`` and ``]``, e.g. ``"fgRed+bold"``.

    Returns:
        HighlightDirective: An open directive with at least one token.

    Raises:
        MalformedDirectiveError: If the expression or one of its tokens is empty.
    """
    if not expression:
        raise MalformedDirectiveError("empty highlight attributes")

    tokens: list[AttributeToken] = []
    for spelling in expression.split(ATTRIBUTE_SEPARATOR):
        if not spelling:
            raise MalformedDirectiveError(f"empty attribute in {expression!r}")
        # UnknownAttributeError propagates from the lookup.
        tokens.append(lookup_attribute(spelling))
    return HighlightDirective(tokens=tuple(tokens))
