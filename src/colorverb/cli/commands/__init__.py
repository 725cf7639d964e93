# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : src/colorverb/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb CLI subcommands."""

from __future__ import annotations
