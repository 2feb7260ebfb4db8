# topmark:header:start
#
#   project      : EmphLog
#   file         : __init__.py
#   file_relpath : src/emphlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: logger settings, color mode, TOML sources and diagnostics logging."""
