# topmark:header:start
#
#   project      : EmphLog
#   file         : exit_codes.py
#   file_relpath : src/emphlog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the EmphLog CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the EmphLog CLI.

    EmphLog follows the BSD `sysexits` convention where practical so other
    tooling can interpret failures consistently.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (invalid config file or environment
            value). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
