# topmark:header:start
#
#   project      : Colorverb
#   file         : constants.py
#   file_relpath : src/colorverb/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorverb Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

COLORVERB_VERSION: str = get_version("colorverb")
