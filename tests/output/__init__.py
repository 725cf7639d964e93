# topmark:header:start
#
#   project      : Colorverb
#   file         : __init__.py
#   file_relpath : tests/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

