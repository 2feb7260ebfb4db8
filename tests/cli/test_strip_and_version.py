# topmark:header:start
#
#   project      : EmphLog
#   file         : test_strip_and_version.py
#   file_relpath : tests/cli/test_strip_and_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for ``emphlog strip``, ``emphlog version`` and the group options."""

from __future__ import annotations

from emphlog.cli.exit_codes import ExitCode
from emphlog.constants import EMPHLOG_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_strip_arguments() -> None:
    result = run_cli(["strip", "a [[*]]b[[*]]", "[[c]]c"])
    assert_SUCCESS(result)
    assert result.output == "a b\nc\n"


@mark_cli
def test_strip_stdin() -> None:
    result = run_cli(["strip"], input_text="line [[r]]one[[r]]\nline two\n")
    assert_SUCCESS(result)
    assert result.output == "line one\nline two\n"


@mark_cli
def test_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == EMPHLOG_VERSION


@mark_cli
def test_verbose_and_quiet_flags_parse() -> None:
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"]):
        assert_SUCCESS(run_cli(args))


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_group_without_command_shows_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'emphlog log MESSAGE'" in result.output
