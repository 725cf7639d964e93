# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : src/colorverb/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Highlight-verb engine.

The ``colorverb.core`` package holds the parsing and resolution logic and has no
I/O of its own:

- ``attributes``
  Read-only table of attribute tokens (colors, 256-color indexes, styles) and
  their SGR codes.

- ``resolver``
  Resolution of a ``%h[...]`` bracket expression into one escape sequence.

- ``scanner``
  Single-pass scanner splitting a format string into literal text, ordinary
  ``%`` conversions and highlight directives.

- ``prepared``
  The immutable two-variant `PreparedFormat` and the ``prepare``/``select``/``run``
  entry points.

- ``errors``
  Exceptions raised at preparation time.
"""

from __future__ import annotations
