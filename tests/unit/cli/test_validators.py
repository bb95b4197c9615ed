"""Unit tests for CLI parameter validators."""

from __future__ import annotations

from datetime import datetime

import pytest
from click.exceptions import Exit

from calendar_navigator._literal_types import CalendarType
from calendar_navigator.cli.utils import ExitCode
from calendar_navigator.cli.validators import (
    STEP_ACTIONS,
    parse_instant,
    parse_step,
    validate_calendar_type,
    validate_literal,
    validate_output_format,
)


class TestValidateLiteral:
    """Tests for the generic Literal validator."""

    def test_valid_value_returned(self) -> None:
        """Test that a valid value is returned unchanged."""
        assert validate_literal("US", CalendarType, "--calendar-type") == "US"

    def test_invalid_value_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an invalid value exits with INVALID_ARGS."""
        with pytest.raises(Exit) as exc_info:
            validate_literal("Julian", CalendarType, "--calendar-type")

        assert exc_info.value.exit_code == ExitCode.INVALID_ARGS
        err = capsys.readouterr().err
        assert "--calendar-type" in err
        assert "Julian" in err


class TestValidateOutputFormat:
    """Tests for --format validation."""

    @pytest.mark.parametrize("fmt", ["json", "jsonl", "table", "plain"])
    def test_valid_formats(self, fmt: str) -> None:
        """Test that every supported format is accepted."""
        assert validate_output_format(fmt) == fmt

    def test_invalid_format_exits(self) -> None:
        """Test that csv is rejected."""
        with pytest.raises(Exit) as exc_info:
            validate_output_format("csv")

        assert exc_info.value.exit_code == ExitCode.INVALID_ARGS


class TestValidateCalendarType:
    """Tests for --calendar-type validation."""

    @pytest.mark.parametrize("value", ["ISO 8601", "US", "Arabic", "Hebrew"])
    def test_valid_types(self, value: str) -> None:
        """Test that every week-start convention is accepted."""
        assert validate_calendar_type(value) == value

    def test_case_sensitive(self) -> None:
        """Test that lowercase names are rejected."""
        with pytest.raises(Exit):
            validate_calendar_type("us")


class TestParseInstant:
    """Tests for ISO 8601 date parsing."""

    def test_plain_date_is_midnight(self) -> None:
        """Test that a date parses to midnight."""
        assert parse_instant("2023-06-15") == datetime(2023, 6, 15)

    def test_datetime_keeps_time(self) -> None:
        """Test that a datetime keeps its time of day."""
        assert parse_instant("2023-06-15T10:30") == datetime(2023, 6, 15, 10, 30)

    def test_invalid_date_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a non-ISO date exits with INVALID_ARGS."""
        with pytest.raises(Exit) as exc_info:
            parse_instant("15/06/2023", "goto")

        assert exc_info.value.exit_code == ExitCode.INVALID_ARGS
        err = capsys.readouterr().err
        assert "Invalid date for goto" in err


class TestParseStep:
    """Tests for `calnav run` step parsing."""

    @pytest.mark.parametrize("step", ["up", "prev", "next", "prev2", "next2"])
    def test_bare_steps(self, step: str) -> None:
        """Test that argument-less steps parse to (action, None)."""
        assert parse_step(step) == (step, None)

    def test_step_with_date(self) -> None:
        """Test that the argument is split off at the first colon."""
        assert parse_step("down:2023-07-01") == ("down", "2023-07-01")

    def test_argument_may_contain_colons(self) -> None:
        """Test that datetimes with times survive splitting."""
        assert parse_step("goto:2023-07-01T10:30") == ("goto", "2023-07-01T10:30")

    def test_view_step(self) -> None:
        """Test that view steps carry the view name."""
        assert parse_step("view:decade") == ("view", "decade")

    def test_unknown_step_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that unknown actions exit with INVALID_ARGS."""
        with pytest.raises(Exit) as exc_info:
            parse_step("sideways")

        assert exc_info.value.exit_code == ExitCode.INVALID_ARGS
        assert "Unknown step" in capsys.readouterr().err

    @pytest.mark.parametrize("step", ["down", "click:", "goto"])
    def test_missing_argument_exits(
        self, step: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that steps needing an argument reject a bare action."""
        with pytest.raises(Exit) as exc_info:
            parse_step(step)

        assert exc_info.value.exit_code == ExitCode.INVALID_ARGS
        assert "needs an argument" in capsys.readouterr().err

    def test_unexpected_argument_exits(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that bare actions reject an argument."""
        with pytest.raises(Exit):
            parse_step("up:2023-01-01")

        assert "takes no argument" in capsys.readouterr().err

    def test_every_action_is_known(self) -> None:
        """Test the set of supported actions."""
        assert set(STEP_ACTIONS) == {
            "up",
            "down",
            "view",
            "goto",
            "click",
            "prev",
            "next",
            "prev2",
            "next2",
        }
