# topmark:header:start
#
#   project      : Colorverb
#   file         : strategies_colorverb.py
#   file_relpath : tests/strategies_colorverb.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating highlight format strings.

Formats are generated as lists of `Piece` values so tests can derive the
expected plain variant and conversion sequence without re-implementing the
scanner.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from hypothesis import strategies as st

from colorverb.core.attributes import ATTRIBUTE_TABLE, MAX_COLOR_INDEX

PieceKind = Literal["literal", "verb", "directive"]

# Matches every escape sequence the engine can emit.
SGR_RE: re.Pattern[str] = re.compile(r"\x1b\[[0-9;]*m")

BLACKLIST_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)

ORDINARY_VERBS: tuple[str, ...] = (
    "%s",
    "%d",
    "%-5d",
    "%.2f",
    "%(key)s",
    "%%",
    "%x",
    "%5.1e",
    "%a",
    "%1r",
)

# Verbs that consume exactly one integer argument (or none for ``%%``).
NUMERIC_VERBS: tuple[str, ...] = ("%s", "%d", "%-5d", "%.2f", "%x", "%%")


@dataclass(frozen=True)
class Piece:
    """One generated run of a format string."""

    kind: PieceKind
    text: str


def join(pieces: list[Piece]) -> str:
    """Return the raw format string made of ``pieces``."""
    return "".join(p.text for p in pieces)


def s_literal() -> st.SearchStrategy[str]:
    """Literal text without ``%`` or escape characters."""
    return st.text(
        alphabet=st.characters(
            blacklist_characters="%\x1b",
            blacklist_categories=BLACKLIST_CATEGORIES,
        ),
        max_size=12,
    )


def s_attribute() -> st.SearchStrategy[str]:
    """A single valid attribute spelling, named or indexed."""
    return st.one_of(
        st.sampled_from(sorted(ATTRIBUTE_TABLE)),
        st.builds(
            lambda layer, index: f"{layer}{index}",
            st.sampled_from(["fg", "bg"]),
            st.integers(min_value=0, max_value=MAX_COLOR_INDEX),
        ),
    )


def s_directive() -> st.SearchStrategy[str]:
    """An open directive with one to three tokens, or the reset verb."""
    return st.one_of(
        st.just("%r"),
        st.lists(s_attribute(), min_size=1, max_size=3).map(lambda ts: "%h[" + "+".join(ts) + "]"),
    )


def s_pieces(verbs: tuple[str, ...] = ORDINARY_VERBS) -> st.SearchStrategy[list[Piece]]:
    """A format string as a list of literal, verb and directive pieces."""
    piece = st.one_of(
        s_literal().map(lambda text: Piece("literal", text)),
        st.sampled_from(verbs).map(lambda text: Piece("verb", text)),
        s_directive().map(lambda text: Piece("directive", text)),
    )
    return st.lists(piece, max_size=12)
