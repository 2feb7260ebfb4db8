# topmark:header:start
#
#   project      : EmphLog
#   file         : __init__.py
#   file_relpath : src/emphlog/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emphasis markup: color table, parser and line renderer."""
