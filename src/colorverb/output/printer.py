# topmark:header:start
#
#   project      : Colorverb
#   file         : printer.py
#   file_relpath : src/colorverb/output/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Synchronized printer that renders highlight formats to a stream.

A `Printer` owns an output stream, the color decision resolved once at
construction, and a lock. Each write selects the prepared variant, substitutes
the arguments and writes the result while holding the lock, so concurrent
callers never interleave within a message.

Example:
    ```python
    import sys

    from colorverb import Mode, Printer, prepare

    p = Printer(sys.stderr, Mode.PERFORM_CHECK)
    fmt = prepare("%h[fgRed]%s%r\\n")
    p.printf(fmt, "hi")
    ```
"""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING, TextIO

from colorverb.config.logging import get_logger
from colorverb.core.prepared import prepare, substitute
from colorverb.terminal.mode import Mode, is_terminal, resolve_mode

if TYPE_CHECKING:
    from colorverb.core.prepared import FormatLike
    from colorverb.terminal.mode import TerminalCheck

logger = get_logger(__name__)


class Printer:
    """Writes highlight-formatted text to a stream.

    Args:
        out (TextIO | None): Destination stream. Defaults to ``sys.stdout``.
        mode (Mode): Color mode, resolved once here.
        terminal_check (TerminalCheck): Terminal-capability check used for
            ``Mode.PERFORM_CHECK``.

    Attributes:
        out (TextIO): The destination stream.
        color_enabled (bool): Whether the colored variant is written.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        mode: Mode = Mode.PERFORM_CHECK,
        *,
        terminal_check: TerminalCheck = is_terminal,
    ) -> None:
        self._lock = threading.Lock()
        self._out: TextIO = out if out is not None else sys.stdout
        self._color: bool = resolve_mode(mode, self._out, terminal_check=terminal_check)
        logger.debug("%s created with mode=%s, color=%s", type(self).__name__, mode, self._color)

    @property
    def out(self) -> TextIO:
        """Return the destination stream."""
        return self._out

    @property
    def color_enabled(self) -> bool:
        """Return whether the colored variant is written."""
        return self._color

    def set_output(self, out: TextIO) -> None:
        """Replace the destination stream (the color decision is kept)."""
        with self._lock:
            self._out = out

    def set_color(self, enabled: bool) -> None:
        """Force color on or off."""
        with self._lock:
            self._color = enabled

    def sprintf(self, fmt: FormatLike, *args: object) -> str:
        """Return ``fmt`` rendered for this printer, without writing it.

        Args:
            fmt (FormatLike): A format string (parsed on every call) or a
                prepared format.
            *args (object): Substitution arguments.

        Returns:
            str: The rendered text.
        """
        prepared = prepare(fmt)
        with self._lock:
            return substitute(prepared.get(self._color), args)

    def printf(self, fmt: FormatLike, *args: object) -> None:
        """Render ``fmt`` with ``args`` and write it.

        Args:
            fmt (FormatLike): A format string (parsed on every call) or a
                prepared format.
            *args (object): Substitution arguments.

        Raises:
            HighlightError: If ``fmt`` is a string with an invalid highlight verb.
        """
        prepared = prepare(fmt)
        with self._lock:
            self._out.write(substitute(prepared.get(self._color), args))

    def print(self, *args: object, sep: str = " ") -> None:
        """Write ``args`` like `print` without a newline; no highlight processing."""
        with self._lock:
            self._out.write(sep.join(str(a) for a in args))

    def println(self, *args: object, sep: str = " ") -> None:
        """Write ``args`` like `print`, followed by a newline."""
        with self._lock:
            self._out.write(sep.join(str(a) for a in args) + "\n")


_std_lock = threading.Lock()
_std_printer: Printer | None = None


def get_std_printer() -> Printer:
    """Return the process-wide printer bound to ``sys.stdout``.

    It is created on first use with ``Mode.PERFORM_CHECK``, against whatever
    ``sys.stdout`` is at that moment.
    """
    global _std_printer
    with _std_lock:
        if _std_printer is None:
            _std_printer = Printer(sys.stdout, Mode.PERFORM_CHECK)
        return _std_printer


def set_std_printer(printer: Printer | None) -> None:
    """Replace the process-wide printer; ``None`` recreates it on next use."""
    global _std_printer
    with _std_lock:
        _std_printer = printer


def hprintf(fmt: FormatLike, *args: object) -> None:
    """Render ``fmt`` with ``args`` to standard output via the std printer."""
    get_std_printer().printf(fmt, *args)


def fprintf(
    stream: TextIO,
    fmt: FormatLike,
    *args: object,
    mode: Mode = Mode.PERFORM_CHECK,
) -> None:
    """Render ``fmt`` with ``args`` to ``stream`` using a one-off printer.

    The mode is resolved on every call and the message goes out in a single
    ``write()``. The one-off printer's lock is not shared, so callers that need
    writes to one stream serialized should share a `Printer` instead.
    """
    Printer(stream, mode).printf(fmt, *args)
