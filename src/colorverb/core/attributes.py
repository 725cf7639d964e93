# topmark:header:start
#
#   project      : Colorverb
#   file         : attributes.py
#   file_relpath : src/colorverb/core/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute table mapping highlight tokens to SGR codes.

Tokens are the ``+``-separated words inside a ``%h[...]`` directive:

- ``fgRed``, ``fgBrightRed``, ... select one of the 16 standard foreground colors
  (SGR 30-37 and 90-97);
- ``bgRed``, ``bgBrightRed``, ... do the same for the background (SGR 40-47 and
  100-107);
- ``fg<N>`` / ``bg<N>`` with ``N`` in 0..255 select a 256-color index using the
  extended sequences ``38;5;N`` / ``48;5;N``;
- ``bold`` and ``underline`` are styles (SGR 1 and 4).

Example:
    ```python
    from colorverb.core.attributes import lookup_attribute

    lookup_attribute("fgGreen").codes   # (32,)
    lookup_attribute("bg158").codes     # (48, 5, 158)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, cast

from colorverb.core.errors import UnknownAttributeError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Color(IntEnum):
    """The eight standard terminal colors, valued by their SGR offset."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class Style(IntEnum):
    """Text styles, valued by their SGR code."""

    BOLD = 1
    UNDERLINE = 4


class AttributeKind(str, Enum):
    """What an attribute token acts on."""

    FOREGROUND = "fg"
    BACKGROUND = "bg"
    STYLE = "style"


# SGR bases: standard and bright ranges per layer, and the 256-color selector.
_NORMAL_BASE: Final[dict[AttributeKind, int]] = {
    AttributeKind.FOREGROUND: 30,
    AttributeKind.BACKGROUND: 40,
}
_BRIGHT_BASE: Final[dict[AttributeKind, int]] = {
    AttributeKind.FOREGROUND: 90,
    AttributeKind.BACKGROUND: 100,
}
_EXTENDED_SELECTOR: Final[dict[AttributeKind, int]] = {
    AttributeKind.FOREGROUND: 38,
    AttributeKind.BACKGROUND: 48,
}

MAX_COLOR_INDEX: Final[int] = 255


@dataclass(frozen=True, slots=True)
class AttributeToken:
    """A single resolved attribute.

    Exactly one of ``color``, ``index`` or ``style`` is set, matching ``kind``;
    construction fails with `ValueError` otherwise.

    Attributes:
        kind (AttributeKind): Foreground, background or style.
        color (Color | None): Named color for the 16-color forms.
        bright (bool): Whether ``color`` refers to the bright variant.
        index (int | None): 256-color palette index for the numeric forms.
        style (Style | None): Style for ``AttributeKind.STYLE`` tokens.
    """

    kind: AttributeKind
    color: Color | None = None
    bright: bool = False
    index: int | None = None
    style: Style | None = None

    def __post_init__(self) -> None:
        if self.kind is AttributeKind.STYLE:
            valid = self.style is not None and self.color is None and self.index is None
        else:
            valid = self.style is None and (self.color is None) != (self.index is None)
        if self.bright and self.color is None:
            valid = False
        if self.index is not None and not 0 <= self.index <= MAX_COLOR_INDEX:
            valid = False
        if not valid:
            raise ValueError(f"inconsistent attribute token: {self!r}")

    @property
    def codes(self) -> tuple[int, ...]:
        """Return the SGR parameters for this token, in emission order."""
        if self.style is not None:
            return (int(self.style),)
        if self.index is not None:
            return (_EXTENDED_SELECTOR[self.kind], 5, self.index)
        base: int = _BRIGHT_BASE[self.kind] if self.bright else _NORMAL_BASE[self.kind]
        return (base + int(cast("Color", self.color)),)


def _build_table() -> dict[str, AttributeToken]:
    table: dict[str, AttributeToken] = {}
    for kind in (AttributeKind.FOREGROUND, AttributeKind.BACKGROUND):
        for color in Color:
            name: str = color.name.capitalize()
            table[f"{kind.value}{name}"] = AttributeToken(kind=kind, color=color)
            table[f"{kind.value}Bright{name}"] = AttributeToken(kind=kind, color=color, bright=True)
    for style in Style:
        table[style.name.lower()] = AttributeToken(kind=AttributeKind.STYLE, style=style)
    return table


ATTRIBUTE_TABLE: Final[Mapping[str, AttributeToken]] = MappingProxyType(_build_table())


def _lookup_indexed(spelling: str) -> AttributeToken | None:
    for kind in (AttributeKind.FOREGROUND, AttributeKind.BACKGROUND):
        digits: str = spelling.removeprefix(kind.value)
        if digits == spelling:
            continue
        # str.isdigit() accepts non-ASCII digits; the palette index is ASCII only.
        if not digits or not (digits.isascii() and digits.isdigit()):
            return None
        index = int(digits)
        if index > MAX_COLOR_INDEX:
            return None
        return AttributeToken(kind=kind, index=index)
    return None


def lookup_attribute(spelling: str) -> AttributeToken:
    """Return the attribute token for ``spelling``.

    Named spellings are looked up in `ATTRIBUTE_TABLE` first; ``fg<N>`` and
    ``bg<N>`` are then tried as 256-color indexes.

    Args:
        spelling (str): A single token, e.g. ``"fgRed"``, ``"bg158"`` or ``"bold"``.

    Returns:
        AttributeToken: The resolved token.

    Raises:
        UnknownAttributeError: If ``spelling`` is not a known attribute.
    """
    token: AttributeToken | None = ATTRIBUTE_TABLE.get(spelling)
    if token is None:
        token = _lookup_indexed(spelling)
    if token is None:
        raise UnknownAttributeError(spelling)
    return token
