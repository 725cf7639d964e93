# topmark:header:start
#
#   project      : Colorverb
#   file         : test_prepared_property.py
#   file_relpath : tests/core/test_prepared_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for the two variants of a prepared format."""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from colorverb.core.prepared import prepare, substitute
from colorverb.core.scanner import ordinary_verbs
from tests.strategies_colorverb import (
    NUMERIC_VERBS,
    SGR_RE,
    Piece,
    join,
    s_literal,
    s_pieces,
)

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(deadline=None, max_examples=200)
@given(text=s_literal())
def test_literal_text_is_identity(text: str) -> None:
    """Text without ``%`` comes out unchanged in both variants."""
    fmt = prepare(text)
    assert fmt.colored == fmt.plain == text


@settings(deadline=None, max_examples=200)
@given(pieces=s_pieces())
def test_plain_variant_drops_only_directives(pieces: list[Piece]) -> None:
    fmt = prepare(join(pieces))
    assert fmt.plain == "".join(p.text for p in pieces if p.kind != "directive")


@settings(deadline=None, max_examples=200)
@given(pieces=s_pieces())
def test_colored_variant_strips_to_plain(pieces: list[Piece]) -> None:
    """Each directive becomes exactly one escape sequence and nothing else changes."""
    fmt = prepare(join(pieces))
    assert SGR_RE.sub("", fmt.colored) == fmt.plain
    directives = sum(1 for p in pieces if p.kind == "directive")
    assert fmt.colored.count("\x1b") == directives


@settings(deadline=None, max_examples=200)
@given(pieces=s_pieces())
def test_variants_share_conversions(pieces: list[Piece]) -> None:
    fmt = prepare(join(pieces))
    expected = [p.text for p in pieces if p.kind == "verb"]
    assert ordinary_verbs(fmt.colored) == expected
    assert ordinary_verbs(fmt.plain) == expected


@settings(deadline=None, max_examples=200)
@given(pieces=s_pieces())
def test_prepare_is_deterministic(pieces: list[Piece]) -> None:
    raw = join(pieces)
    assert prepare(raw) == prepare(raw)


@settings(deadline=None, max_examples=200)
@given(pieces=s_pieces(NUMERIC_VERBS))
def test_substitution_agrees_across_variants(pieces: list[Piece]) -> None:
    """Substituting either variant yields the same text once escapes are removed."""
    fmt = prepare(join(pieces))
    args = tuple(range(sum(1 for p in pieces if p.kind == "verb" and p.text != "%%")))
    assert SGR_RE.sub("", substitute(fmt.colored, args)) == substitute(fmt.plain, args)
