# topmark:header:start
#
#   project      : Colorverb
#   file         : __main__.py
#   file_relpath : src/colorverb/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Colorverb via ``python -m colorverb``.

Delegates to :func:`colorverb.cli.main.cli`, the same entry point as the
``colorverb`` console script.

Examples:
    Render a format string::

        python -m colorverb render "%h[fgRed]panic:%r %s" rip
"""

from __future__ import annotations

from colorverb.cli.main import cli

if __name__ == "__main__":
    cli()
