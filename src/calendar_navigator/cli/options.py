"""Shared CLI option definitions.

Provides reusable Annotated type aliases for common CLI options
to avoid duplication across commands.
"""

from __future__ import annotations

from typing import Annotated, Literal

import typer

# Output format type for formatting command output
OutputFormat = Literal["json", "jsonl", "table", "plain"]

# Reusable Annotated type for --format option
FormatOption = Annotated[
    str,
    typer.Option(
        "--format",
        "-f",
        help="Output format: json, jsonl, table, plain.",
    ),
]

# Calendar settings. None means "use the stored config value"; the
# --week-numbers flag can only switch week numbers on.
MinDetailOption = Annotated[
    str | None,
    typer.Option("--min-detail", help="Coarsest view: century, decade, year, month."),
]
MaxDetailOption = Annotated[
    str | None,
    typer.Option("--max-detail", help="Finest view: century, decade, year, month."),
]
ViewOption = Annotated[
    str | None,
    typer.Option(
        "--view", help="Requested view; clamped to the finest allowed view."
    ),
]
ValueOption = Annotated[
    list[str] | None,
    typer.Option(
        "--value",
        help="Selected date (ISO 8601). Pass twice for a from/to range.",
    ),
]
ReturnValueOption = Annotated[
    str | None,
    typer.Option("--return-value", help="Selection shape: start, end, range."),
]
LocaleOption = Annotated[
    str | None,
    typer.Option("--locale", help="Locale tag, e.g. en-US or de-DE."),
]
CalendarTypeOption = Annotated[
    str | None,
    typer.Option(
        "--calendar-type", help="Week start convention: ISO 8601, US, Arabic, Hebrew."
    ),
]
WeekNumbersOption = Annotated[
    bool,
    typer.Option("--week-numbers", help="Show week numbers in month view."),
]
