# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : src/colorverb/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Synchronized writers built on the highlight engine.

Public modules:
    - colorverb.output.printer
    - colorverb.output.logger
"""

from __future__ import annotations
