# topmark:header:start
#
#   project      : EmphLog
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for EmphLog's own diagnostics logging."""

from __future__ import annotations

import logging

import click

from emphlog.config.logging import (
    LOG_LEVEL_ENV,
    TRACE_LEVEL,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("15", 15),
        ("0", 0),
        ("", None),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(value: str, expected: int | None) -> None:
    assert resolve_env_log_level({LOG_LEVEL_ENV: value}) == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level({}) is None


def test_trace_records_carry_the_trace_level_name() -> None:
    formatter = ChalkFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("emphlog.x", TRACE_LEVEL, __file__, 1, "found %s", ("it",), None)
    assert click.unstyle(formatter.format(record)) == "TRACE found it"


def test_setup_logging_replaces_its_handler() -> None:
    try:
        setup_logging(logging.INFO)
        setup_logging(logging.DEBUG)
        package_logger = logging.getLogger("emphlog")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
        assert get_logger("emphlog.test").isEnabledFor(logging.DEBUG)
        assert not get_logger("emphlog.test").isEnabledFor(TRACE_LEVEL)
    finally:
        setup_logging(TRACE_LEVEL)
