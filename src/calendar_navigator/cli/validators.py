"""CLI parameter validators.

Validates string inputs from Typer before they reach the Calendar,
providing early error feedback with the INVALID_ARGS exit code.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, cast, get_args

import typer

from calendar_navigator._internal.values import as_datetime
from calendar_navigator._literal_types import CalendarType
from calendar_navigator.cli.options import OutputFormat
from calendar_navigator.cli.utils import ExitCode, err_console

# Steps understood by `calnav run`; the bool marks steps taking a date or view
STEP_ACTIONS: dict[str, bool] = {
    "up": False,
    "down": True,
    "view": True,
    "goto": True,
    "click": True,
    "prev": False,
    "next": False,
    "prev2": False,
    "next2": False,
}


def validate_literal(value: str, literal_type: Any, param_name: str) -> Any:
    """Validate a CLI string against a Literal type.

    Args:
        value: String value from CLI.
        literal_type: The Literal type to validate against.
        param_name: Parameter name for error message.

    Returns:
        The validated value, cast to the Literal type.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if invalid.
    """
    valid_values = get_args(literal_type)
    if value not in valid_values:
        err_console.print(
            f"[red]Error:[/red] Invalid value for {param_name}: '{value}'"
        )
        err_console.print(f"Valid options: {', '.join(valid_values)}")
        raise typer.Exit(ExitCode.INVALID_ARGS)
    return value


def validate_output_format(value: str, param_name: str = "--format") -> OutputFormat:
    """Validate output format.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is invalid.
    """
    validate_literal(value, OutputFormat, param_name)
    return cast(OutputFormat, value)


def validate_calendar_type(
    value: str, param_name: str = "--calendar-type"
) -> CalendarType:
    """Validate calendar type (ISO 8601, US, Arabic or Hebrew).

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is invalid.
    """
    validate_literal(value, CalendarType, param_name)
    return cast(CalendarType, value)


def parse_instant(value: str, param_name: str = "DATE") -> datetime:
    """Parse an ISO 8601 date or datetime string.

    Args:
        value: String value from CLI, e.g. "2023-06-15" or "2023-06-15T10:30".
        param_name: Parameter name for error message.

    Returns:
        Parsed datetime (midnight for plain dates).

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is not ISO 8601.
    """
    try:
        return as_datetime(value)
    except ValueError:
        err_console.print(
            f"[red]Error:[/red] Invalid date for {param_name}: '{value}'"
        )
        err_console.print("Use ISO 8601, e.g. 2023-06-15 or 2023-06-15T10:30")
        raise typer.Exit(ExitCode.INVALID_ARGS) from None


def parse_step(step: str) -> tuple[str, str | None]:
    """Split a `calnav run` step into its action and argument.

    Steps are either a bare action ("up", "prev") or "action:argument"
    ("down:2023-07-01", "view:decade").

    Returns:
        Tuple of (action, argument or None).

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if the step is malformed.
    """
    action, sep, argument = step.partition(":")
    takes_argument = STEP_ACTIONS.get(action)
    if takes_argument is None:
        err_console.print(f"[red]Error:[/red] Unknown step: '{step}'")
        err_console.print(f"Valid steps: {', '.join(STEP_ACTIONS)}")
        raise typer.Exit(ExitCode.INVALID_ARGS)
    if takes_argument and not (sep and argument):
        err_console.print(
            f"[red]Error:[/red] Step '{action}' needs an argument, "
            f"e.g. {action}:2023-06-15"
        )
        raise typer.Exit(ExitCode.INVALID_ARGS)
    if not takes_argument and sep:
        err_console.print(f"[red]Error:[/red] Step '{action}' takes no argument")
        raise typer.Exit(ExitCode.INVALID_ARGS)
    return action, (argument if takes_argument else None)
