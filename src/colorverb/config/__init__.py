# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : src/colorverb/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration helpers (diagnostics logging)."""

from __future__ import annotations
