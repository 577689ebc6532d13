"""Tests for the CLI layer (cli/boundary.py, cli/console.py).

Coverage:
* terminate() prints the report and exits with GENERAL_ERROR.
* giving_up() converts exceptions into the same report/exit path.
* Styling is applied only when stderr is a terminal.
* A debug record is logged before exiting.
"""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from giveup.cli import exit_codes
from giveup.cli.boundary import giving_up, terminate
from giveup.cli.console import get_console, print_report, render_report
from giveup.core.models import FailureReport
from giveup.exceptions import InvalidAnnotationError


def _report(**overrides: object) -> FailureReport:
    defaults: dict[str, object] = {
        "headline": "Missing configuration file",
        "description": "file not found",
        "hint": "Create a configuration file",
        "example": "touch config-filename",
    }
    defaults.update(overrides)
    return FailureReport(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# terminate
# ---------------------------------------------------------------------------

class TestTerminate:
    def test_exits_with_general_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            terminate(_report())
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == (
            "Missing configuration file: file not found\n"
            "Hint: Create a configuration file\n"
            "Example: touch config-filename\n"
        )

    def test_logs_debug_record(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="giveup")
        with pytest.raises(SystemExit):
            terminate(_report())
        records = [r for r in caplog.records if r.name == "giveup.cli.boundary"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "Missing configuration file" in records[0].getMessage()

    def test_finally_blocks_still_run(self) -> None:
        ran: list[bool] = []
        with pytest.raises(SystemExit):
            try:
                terminate(_report())
            finally:
                ran.append(True)
        assert ran == [True]


# ---------------------------------------------------------------------------
# giving_up
# ---------------------------------------------------------------------------

class TestGivingUp:
    def test_no_exception_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        with giving_up("Should not show", hint="h"):
            value = 1 + 1
        assert value == 2
        assert capsys.readouterr().err == ""

    def test_exception_is_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            with giving_up(
                "Missing configuration file",
                hint="Create a configuration file",
                example="touch config-filename",
            ):
                raise FileNotFoundError("file not found")
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == (
            "Missing configuration file: file not found\n"
            "Hint: Create a configuration file\n"
            "Example: touch config-filename\n"
        )

    def test_without_guidance(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            with giving_up("Parse failed"):
                int("abc")
        assert capsys.readouterr().err == (
            "Parse failed: invalid literal for int() with base 10: 'abc'\n"
        )

    def test_uncaught_type_propagates(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(KeyError):
            with giving_up("Lookup failed", catch=ValueError):
                raise KeyError("missing")
        assert capsys.readouterr().err == ""

    def test_keyboard_interrupt_propagates(self) -> None:
        with pytest.raises(KeyboardInterrupt):
            with giving_up("Interrupted"):
                raise KeyboardInterrupt

    def test_bad_arguments_fail_before_block(self) -> None:
        entered: list[bool] = []
        with pytest.raises(InvalidAnnotationError):
            with giving_up("Headline", hint=""):
                entered.append(True)
        assert entered == []

    def test_empty_headline_still_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            with giving_up("", example=""):
                raise ValueError("bad value")
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "bad value\nExample: \n"

    def test_non_str_headline_rejected(self) -> None:
        entered: list[bool] = []
        with pytest.raises(InvalidAnnotationError, match="headline"):
            with giving_up(None):  # type: ignore[arg-type]
                entered.append(True)
        assert entered == []


# ---------------------------------------------------------------------------
# Console rendering
# ---------------------------------------------------------------------------

class TestConsole:
    def test_console_targets_stderr(self) -> None:
        console = get_console()
        assert console.stderr is True

    def test_plain_text_matches_report_lines(self) -> None:
        report = _report(causes=("disk error",))
        lines = [text.plain for text in render_report(report)]
        assert lines == report.lines()

    def test_terminal_output_is_styled(self) -> None:
        buffer = io.StringIO()
        console = Console(
            file=buffer, force_terminal=True, color_system="standard", soft_wrap=True
        )
        print_report(_report(), console)
        output = buffer.getvalue()
        assert "\x1b[" in output
        assert "Missing configuration file" in output

    def test_non_terminal_output_keeps_tabs(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, soft_wrap=True)
        print_report(_report(description="a\tb\x0cc", hint=None, example=None), console)
        assert buffer.getvalue() == "Missing configuration file: a\tb\x0cc\n"

    def test_non_terminal_output_is_plain(self) -> None:
        buffer = io.StringIO()
        console = Console(file=buffer, soft_wrap=True)
        print_report(_report(hint=None, example=None), console)
        assert buffer.getvalue() == "Missing configuration file: file not found\n"
