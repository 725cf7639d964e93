# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : src/colorverb/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for Colorverb."""

from __future__ import annotations
