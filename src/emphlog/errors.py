# topmark:header:start
#
#   project      : EmphLog
#   file         : errors.py
#   file_relpath : src/emphlog/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the EmphLog configuration layer.

Logging calls themselves never raise; only building a configuration can fail.
"""

from __future__ import annotations


class EmphlogError(Exception):
    """Base class for all EmphLog errors."""


class EmphlogConfigError(EmphlogError):
    """Invalid configuration value or source."""
