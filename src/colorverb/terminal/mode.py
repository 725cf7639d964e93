# topmark:header:start
#
#   project      : Colorverb
#   file         : mode.py
#   file_relpath : src/colorverb/terminal/mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution for printers and loggers.

A `Mode` expresses the caller's intent; `resolve_mode` turns it into the
concrete boolean a printer or logger keeps for its whole lifetime. Resolution
happens once, at construction, so the terminal check never runs on the write
path.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import Enum
from typing import Final, TextIO

from colorverb.config.logging import get_logger

logger = get_logger(__name__)

FORCE_COLOR_ENV: Final[str] = "FORCE_COLOR"
NO_COLOR_ENV: Final[str] = "NO_COLOR"

TerminalCheck = Callable[[TextIO], bool]


class Mode(str, Enum):
    """User intent for colorized output.

    Attributes:
        ENABLE_COLOR: Always emit escape sequences.
        DISABLE_COLOR: Never emit escape sequences; highlight verbs are stripped.
        PERFORM_CHECK: Emit escape sequences only when the destination is a terminal
            (after honoring ``FORCE_COLOR`` and ``NO_COLOR``).

    The values match the ``--color`` CLI choices.
    """

    ENABLE_COLOR = "always"
    DISABLE_COLOR = "never"
    PERFORM_CHECK = "auto"


ENABLE_COLOR: Final[Mode] = Mode.ENABLE_COLOR
DISABLE_COLOR: Final[Mode] = Mode.DISABLE_COLOR
PERFORM_CHECK: Final[Mode] = Mode.PERFORM_CHECK


def is_terminal(stream: TextIO) -> bool:
    """Return True if ``stream`` is attached to an interactive terminal.

    Streams without ``isatty()``, closed streams and streams whose check fails
    count as non-terminals.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _env_override() -> bool | None:
    force_color: str | None = os.getenv(FORCE_COLOR_ENV)
    if force_color and force_color != "0":
        return True
    if os.getenv(NO_COLOR_ENV) is not None:
        return False
    return None


def resolve_mode(
    mode: Mode,
    stream: TextIO,
    *,
    terminal_check: TerminalCheck = is_terminal,
) -> bool:
    """Decide whether output to ``stream`` should be colored.

    Decision precedence for ``PERFORM_CHECK``:
        1. ``FORCE_COLOR`` (set and not ``"0"``) → True
        2. ``NO_COLOR`` (set to any value) → False
        3. ``terminal_check(stream)``, called once.

    Args:
        mode (Mode): Requested mode.
        stream (TextIO): Destination the output will be written to.
        terminal_check (TerminalCheck): Terminal-capability check; replaceable in tests.

    Returns:
        bool: True if escape sequences should be emitted.
    """
    mode = Mode(mode)
    if mode is Mode.ENABLE_COLOR:
        return True
    if mode is Mode.DISABLE_COLOR:
        return False

    override: bool | None = _env_override()
    if override is not None:
        logger.debug("color mode decided by environment: %s", override)
        return override

    enabled: bool = terminal_check(stream)
    logger.debug("color mode decided by terminal check: %s", enabled)
    return enabled
