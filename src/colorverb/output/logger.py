# topmark:header:start
#
#   project      : Colorverb
#   file         : logger.py
#   file_relpath : src/colorverb/output/logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented logger with highlight-verb support.

`Logger` is a small, synchronized line logger in the spirit of classic
printf-style loggers: every entry is an optional prefix, an optional timestamp
and the message, terminated by a newline. The prefix is itself a highlight
format, so ``"%h[bold]app:%r "`` renders in bold when color is enabled.

Besides the plain ``printf``/``print``/``println`` family it offers:

- ``fatal*``: write the entry, then call the exit function with status 1;
- ``panic*``: write the entry, then raise `LoggerPanic`.

The exit function is a constructor argument so tests can record the call
instead of ending the process.

A process-wide logger writing to ``sys.stderr`` backs the module-level helpers
(`printf`, `fatalf`, ...). It is created lazily; use `set_std_logger` to
install another one.
"""

from __future__ import annotations

import sys
import threading
from datetime import datetime, timezone
from enum import IntFlag
from typing import TYPE_CHECKING, Final, TextIO

from colorverb.config.logging import get_logger
from colorverb.core.prepared import PreparedFormat, prepare, substitute
from colorverb.terminal.mode import Mode, is_terminal, resolve_mode

if TYPE_CHECKING:
    from collections.abc import Callable

    from colorverb.core.prepared import FormatLike
    from colorverb.terminal.mode import TerminalCheck

logger = get_logger(__name__)

FATAL_EXIT_STATUS: Final[int] = 1

# Errors a fatal call reports in place of its entry. HighlightError is a
# ValueError, so preparation failures are covered too.
_FORMAT_ERRORS: Final[tuple[type[Exception], ...]] = (TypeError, ValueError, KeyError)


class LogFlag(IntFlag):
    """Header fields written before each entry.

    Attributes:
        DATE: Local date, ``2009/01/23``.
        TIME: Local time, ``01:23:23``.
        MICROSECONDS: Time with microseconds, ``01:23:23.123123``; implies TIME.
        UTC: Use UTC instead of the local time zone.
        MSGPREFIX: Put the prefix right before the message instead of at the
            start of the line.
    """

    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    UTC = 8
    MSGPREFIX = 16


NO_FLAGS: Final[LogFlag] = LogFlag(0)
STD_FLAGS: Final[LogFlag] = LogFlag.DATE | LogFlag.TIME


class LoggerPanic(RuntimeError):
    """Raised by the ``panic*`` methods after the entry has been written.

    Attributes:
        message (str): The plain (escape-free) message that was logged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _render_prefix(prefix: FormatLike) -> tuple[PreparedFormat, str, str]:
    prepared: PreparedFormat = prepare(prefix)
    # The prefix takes no arguments; this only collapses ``%%``.
    return prepared, substitute(prepared.colored, ()), substitute(prepared.plain, ())


class Logger:
    """Synchronized logger supporting highlight verbs.

    Args:
        out (TextIO | None): Destination stream. Defaults to ``sys.stderr``.
        prefix (FormatLike): Highlight format written on every entry; it must not
            contain argument-consuming conversions.
        flags (LogFlag): Header fields, see `LogFlag`.
        mode (Mode): Color mode, resolved once here.
        terminal_check (TerminalCheck): Terminal-capability check used for
            ``Mode.PERFORM_CHECK``.
        exit_func (Callable[[int], object]): Called with status 1 by the
            ``fatal*`` methods. Defaults to `sys.exit`.
        clock (Callable[[], datetime] | None): Source of timestamps. Defaults to
            the current local time.

    Raises:
        HighlightError: If ``prefix`` has an invalid highlight verb.
        TypeError: If ``prefix`` consumes arguments.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        prefix: FormatLike = "",
        flags: LogFlag = NO_FLAGS,
        mode: Mode = Mode.PERFORM_CHECK,
        *,
        terminal_check: TerminalCheck = is_terminal,
        exit_func: Callable[[int], object] = sys.exit,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._out: TextIO = out if out is not None else sys.stderr
        self._color: bool = resolve_mode(mode, self._out, terminal_check=terminal_check)
        self._prefix, self._prefix_colored, self._prefix_plain = _render_prefix(prefix)
        self._flags: LogFlag = LogFlag(flags)
        self._exit = exit_func
        self._clock: Callable[[], datetime] = clock or _local_now

    # --- Accessors ------------------------------------------------------------

    @property
    def out(self) -> TextIO:
        """Return the destination stream."""
        return self._out

    @property
    def color_enabled(self) -> bool:
        """Return whether escape sequences are written."""
        return self._color

    @property
    def prefix(self) -> str:
        """Return the raw prefix format."""
        return self._prefix.raw

    @property
    def flags(self) -> LogFlag:
        """Return the header flags."""
        return self._flags

    def set_output(self, out: TextIO) -> None:
        """Replace the destination stream."""
        with self._lock:
            self._out = out

    def set_color(self, enabled: bool) -> None:
        """Force color on or off."""
        with self._lock:
            self._color = enabled

    def set_prefix(self, prefix: FormatLike) -> None:
        """Replace the prefix; it is prepared before the lock is taken."""
        rendered = _render_prefix(prefix)
        with self._lock:
            self._prefix, self._prefix_colored, self._prefix_plain = rendered

    def set_flags(self, flags: LogFlag) -> None:
        """Replace the header flags."""
        with self._lock:
            self._flags = LogFlag(flags)

    # --- Internals (call with the lock held) ----------------------------------

    def _timestamp(self) -> str:
        flags: LogFlag = self._flags
        if not flags & (LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS):
            return ""
        now: datetime = self._clock()
        if flags & LogFlag.UTC:
            now = now.astimezone(timezone.utc)
        parts: list[str] = []
        if flags & LogFlag.DATE:
            parts.append(now.strftime("%Y/%m/%d "))
        if flags & (LogFlag.TIME | LogFlag.MICROSECONDS):
            parts.append(now.strftime("%H:%M:%S"))
            if flags & LogFlag.MICROSECONDS:
                parts.append(f".{now.microsecond:06d}")
            parts.append(" ")
        return "".join(parts)

    def _output(self, message: str) -> None:
        prefix: str = self._prefix_colored if self._color else self._prefix_plain
        if self._flags & LogFlag.MSGPREFIX:
            header = self._timestamp() + prefix
        else:
            header = prefix + self._timestamp()
        if not message.endswith("\n"):
            message += "\n"
        self._out.write(header + message)

    def _terminate(self) -> None:
        logger.debug("fatal entry written, exiting with status %d", FATAL_EXIT_STATUS)
        self._exit(FATAL_EXIT_STATUS)

    # --- Printing -------------------------------------------------------------

    def printf(self, fmt: FormatLike, *args: object) -> None:
        """Write an entry rendered from ``fmt`` and ``args``.

        Raises:
            HighlightError: If ``fmt`` is a string with an invalid highlight verb.
        """
        prepared = prepare(fmt)
        with self._lock:
            self._output(substitute(prepared.get(self._color), args))

    def print(self, *args: object) -> None:
        """Write an entry made of ``args`` joined like `print`."""
        with self._lock:
            self._output(" ".join(str(a) for a in args))

    def println(self, *args: object) -> None:
        """Write an entry made of ``args`` joined like `print`, newline-terminated."""
        with self._lock:
            self._output(" ".join(str(a) for a in args) + "\n")

    # --- Fatal ----------------------------------------------------------------

    def _fatal_entry(self, fmt: FormatLike, args: tuple[object, ...]) -> None:
        try:
            prepared = prepare(fmt)
            with self._lock:
                self._output(substitute(prepared.get(self._color), args))
        except _FORMAT_ERRORS as exc:
            raw: str = fmt.raw if isinstance(fmt, PreparedFormat) else fmt
            logger.error("fatal entry could not be formatted: %s", exc)
            with self._lock:
                self._output(f"bad format {raw!r}: {exc}")

    def fatalf(self, fmt: FormatLike, *args: object) -> None:
        """Like `printf`, then exit with status 1.

        A format that fails to prepare or substitute is reported as the entry
        instead. The exit function is called even if writing the entry raises.
        """
        try:
            self._fatal_entry(fmt, args)
        finally:
            self._terminate()

    def fatal(self, *args: object) -> None:
        """Like `print`, then exit with status 1."""
        try:
            self.print(*args)
        finally:
            self._terminate()

    def fatalln(self, *args: object) -> None:
        """Like `println`, then exit with status 1."""
        try:
            self.println(*args)
        finally:
            self._terminate()

    # --- Panic ----------------------------------------------------------------

    def panicf(self, fmt: FormatLike, *args: object) -> None:
        """Like `printf`, then raise `LoggerPanic` with the plain message.

        Raises:
            LoggerPanic: Always, once the entry has been written.
        """
        prepared = prepare(fmt)
        with self._lock:
            self._output(substitute(prepared.get(self._color), args))
        raise LoggerPanic(substitute(prepared.plain, args))

    def panic(self, *args: object) -> None:
        """Like `print`, then raise `LoggerPanic`.

        Raises:
            LoggerPanic: Always, once the entry has been written.
        """
        message: str = " ".join(str(a) for a in args)
        with self._lock:
            self._output(message)
        raise LoggerPanic(message)

    def panicln(self, *args: object) -> None:
        """Like `println`, then raise `LoggerPanic`.

        Raises:
            LoggerPanic: Always, once the entry has been written.
        """
        message: str = " ".join(str(a) for a in args) + "\n"
        with self._lock:
            self._output(message)
        raise LoggerPanic(message)


# --- Process-wide logger ------------------------------------------------------

_std_lock = threading.Lock()
_std_logger: Logger | None = None


def get_std_logger() -> Logger:
    """Return the process-wide logger bound to ``sys.stderr``.

    It is created on first use with ``Mode.PERFORM_CHECK``, no prefix and no
    header flags.
    """
    global _std_logger
    with _std_lock:
        if _std_logger is None:
            _std_logger = Logger(sys.stderr, mode=Mode.PERFORM_CHECK)
        return _std_logger


def set_std_logger(new_logger: Logger | None) -> None:
    """Replace the process-wide logger; ``None`` recreates it on next use."""
    global _std_logger
    with _std_lock:
        _std_logger = new_logger


def printf(fmt: FormatLike, *args: object) -> None:
    """Call `Logger.printf` on the std logger."""
    get_std_logger().printf(fmt, *args)


def print_(*args: object) -> None:
    """Call `Logger.print` on the std logger."""
    get_std_logger().print(*args)


def println(*args: object) -> None:
    """Call `Logger.println` on the std logger."""
    get_std_logger().println(*args)


def fatalf(fmt: FormatLike, *args: object) -> None:
    """Call `Logger.fatalf` on the std logger."""
    get_std_logger().fatalf(fmt, *args)


def fatal(*args: object) -> None:
    """Call `Logger.fatal` on the std logger."""
    get_std_logger().fatal(*args)


def fatalln(*args: object) -> None:
    """Call `Logger.fatalln` on the std logger."""
    get_std_logger().fatalln(*args)


def panicf(fmt: FormatLike, *args: object) -> None:
    """Call `Logger.panicf` on the std logger."""
    get_std_logger().panicf(fmt, *args)


def panic(*args: object) -> None:
    """Call `Logger.panic` on the std logger."""
    get_std_logger().panic(*args)


def panicln(*args: object) -> None:
    """Call `Logger.panicln` on the std logger."""
    get_std_logger().panicln(*args)


def set_output(out: TextIO) -> None:
    """Set the destination of the std logger."""
    get_std_logger().set_output(out)


def set_color(enabled: bool) -> None:
    """Force color on or off for the std logger."""
    get_std_logger().set_color(enabled)
