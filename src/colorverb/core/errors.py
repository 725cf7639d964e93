# topmark:header:start
#
#   project      : Colorverb
#   file         : errors.py
#   file_relpath : src/colorverb/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while preparing highlight format strings.

All of them derive from `HighlightError` (itself a `ValueError`) and are raised
by [`colorverb.core.prepared.prepare`][] before any output is produced. Errors
raised by the `%` operator during substitution are not wrapped.
"""

from __future__ import annotations


class HighlightError(ValueError):
    """Base class for highlight-verb parse and resolution errors.

    Attributes:
        format (str | None): The raw format string being prepared, when known.
        position (int | None): Offset of the offending directive in ``format``.
    """

    def __init__(
        self,
        message: str,
        *,
        format: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.format = format
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at offset {self.position})"


class MalformedDirectiveError(HighlightError):
    """A ``%h`` directive is unterminated, lacks ``[`` or has an empty body."""


class UnknownAttributeError(HighlightError):
    """A bracket token is not a known attribute spelling.

    Attributes:
        token (str): The offending token as written.
    """

    def __init__(
        self,
        token: str,
        *,
        format: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(f"unknown attribute {token!r}", format=format, position=position)
        self.token = token
