# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : src/colorverb/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb: printf-style formatting with highlight verbs.

Colorverb extends ``%`` formatting with two verbs interpreted before the ``%``
operator runs:

- ``%h[fgRed+bold]`` emits the ANSI escape sequence for the listed attributes;
- ``%r`` resets all attributes.

With color disabled the highlight verbs are removed and the rest of the format
is left untouched, so the same format string serves terminals and plain files.

```python
from colorverb import Mode, Printer, prepare

fmt = prepare("%h[fgRed]panic:%r %s\\n")   # parse once
Printer(mode=Mode.PERFORM_CHECK).printf(fmt, "rip")
```

This module re-exports the stable surface; submodules are internal.
"""

from __future__ import annotations

from colorverb.core.attributes import ATTRIBUTE_TABLE, AttributeToken, lookup_attribute
from colorverb.core.errors import HighlightError, MalformedDirectiveError, UnknownAttributeError
from colorverb.core.prepared import (
    FormatLike,
    PreparedFormat,
    prepare,
    run,
    select,
    sprintf,
    substitute,
)
from colorverb.core.resolver import RESET_SEQUENCE, resolve_attributes
from colorverb.output.logger import LogFlag, Logger, LoggerPanic, get_std_logger, set_std_logger
from colorverb.output.printer import Printer, fprintf, get_std_printer, hprintf, set_std_printer
from colorverb.terminal.mode import (
    DISABLE_COLOR,
    ENABLE_COLOR,
    PERFORM_CHECK,
    Mode,
    is_terminal,
    resolve_mode,
)

__all__ = [
    "ATTRIBUTE_TABLE",
    "DISABLE_COLOR",
    "ENABLE_COLOR",
    "PERFORM_CHECK",
    "RESET_SEQUENCE",
    "AttributeToken",
    "FormatLike",
    "HighlightError",
    "LogFlag",
    "Logger",
    "LoggerPanic",
    "MalformedDirectiveError",
    "Mode",
    "PreparedFormat",
    "Printer",
    "UnknownAttributeError",
    "fprintf",
    "get_std_logger",
    "get_std_printer",
    "hprintf",
    "is_terminal",
    "lookup_attribute",
    "prepare",
    "resolve_attributes",
    "resolve_mode",
    "run",
    "select",
    "set_std_logger",
    "set_std_printer",
    "sprintf",
    "substitute",
]
