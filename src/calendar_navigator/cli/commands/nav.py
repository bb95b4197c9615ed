"""Calendar navigation commands.

This module provides commands for driving a calendar:
- show: Show the initial navigation state for a configuration
- run: Apply a sequence of navigation steps and report each state
- period: Show the boundaries of the period containing a date
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

import typer

from calendar_navigator._internal.date_utils import period_range
from calendar_navigator.calendar import Calendar
from calendar_navigator.cli.options import (
    CalendarTypeOption,
    FormatOption,
    LocaleOption,
    MaxDetailOption,
    MinDetailOption,
    ReturnValueOption,
    ValueOption,
    ViewOption,
    WeekNumbersOption,
)
from calendar_navigator.cli.utils import build_config, handle_errors, output_result
from calendar_navigator.cli.validators import (
    parse_instant,
    parse_step,
    validate_calendar_type,
    validate_output_format,
)
from calendar_navigator.types import CalendarCallbacks, PeriodInfo, serialize_value


def _make_calendar(
    ctx: typer.Context,
    min_detail: str | None,
    max_detail: str | None,
    view: str | None,
    value: list[str] | None,
    return_value: str | None,
    locale: str | None,
    calendar_type: str | None,
    show_week_numbers: bool,
    callbacks: CalendarCallbacks | None = None,
) -> Calendar:
    """Build a Calendar from stored defaults and command-line options."""
    if calendar_type is not None:
        validate_calendar_type(calendar_type)
    config = build_config(
        ctx,
        min_detail=min_detail,
        max_detail=max_detail,
        view=view,
        value=value,
        return_value=return_value,
        locale=locale,
        calendar_type=calendar_type,
        show_week_numbers=show_week_numbers or None,
    )
    return Calendar(config, callbacks)


@handle_errors
def show(
    ctx: typer.Context,
    min_detail: MinDetailOption = None,
    max_detail: MaxDetailOption = None,
    view: ViewOption = None,
    value: ValueOption = None,
    return_value: ReturnValueOption = None,
    locale: LocaleOption = None,
    calendar_type: CalendarTypeOption = None,
    show_week_numbers: WeekNumbersOption = False,
    format: FormatOption = "json",
) -> None:
    """Show the initial navigation state.

    Reports the view the calendar opens in, the visible period and its
    label, the permitted views, and the normalized selection.

    Examples:

        calnav show
        calnav show --value 2023-06-15 --min-detail year
        calnav show --value 2023-01-10 --value 2023-02-20 --format table
    """
    validate_output_format(format)
    calendar = _make_calendar(
        ctx,
        min_detail,
        max_detail,
        view,
        value,
        return_value,
        locale,
        calendar_type,
        show_week_numbers,
    )
    data = calendar.snapshot().to_dict()
    data["locale"] = calendar.locale_context.locale
    data["calendar_type"] = calendar.locale_context.calendar_type
    data["week_start"] = calendar.locale_context.week_start
    output_result(ctx, data, format=format)


def _apply_step(calendar: Calendar, action: str, argument: str | None) -> bool:
    """Apply one parsed step; returns True if navigation state changed."""
    before = calendar.state
    if action == "up":
        calendar.drill_up()
    elif action == "down":
        calendar.drill_down(parse_instant(argument or "", "down"))
    elif action == "view":
        calendar.jump_to_view(argument)  # type: ignore[arg-type]
    elif action == "goto":
        calendar.set_active_start_date(parse_instant(argument or "", "goto"))
    elif action == "click":
        calendar.dispatch_cell_click(parse_instant(argument or "", "click"))
    else:
        calendar.navigate(action)  # type: ignore[arg-type]
    return calendar.state != before


@handle_errors
def run(
    ctx: typer.Context,
    steps: Annotated[
        list[str],
        typer.Argument(
            help=(
                "Steps to apply in order: up, down:DATE, view:VIEW, goto:DATE, "
                "click:DATE, prev, next, prev2, next2."
            ),
        ),
    ],
    min_detail: MinDetailOption = None,
    max_detail: MaxDetailOption = None,
    view: ViewOption = None,
    value: ValueOption = None,
    return_value: ReturnValueOption = None,
    locale: LocaleOption = None,
    calendar_type: CalendarTypeOption = None,
    show_week_numbers: WeekNumbersOption = False,
    format: FormatOption = "json",
) -> None:
    """Apply navigation steps and report the state after each.

    A click drills down while a finer view is permitted and otherwise
    commits a selection; committed selections are listed under "emitted",
    shaped by --return-value.

    Examples:

        calnav run up up --value 2023-06-15
        calnav run up down:2023-07-01 click:2023-07-04 --min-detail year
        calnav run next prev2 --format table
    """
    validate_output_format(format)
    parsed = [parse_step(step) for step in steps]

    emitted: list[Any] = []
    calendar = _make_calendar(
        ctx,
        min_detail,
        max_detail,
        view,
        value,
        return_value,
        locale,
        calendar_type,
        show_week_numbers,
        CalendarCallbacks(on_change=emitted.append),
    )

    rows: list[dict[str, Any]] = [_row("initial", calendar, changed=False, emitted=[])]
    for step, (action, argument) in zip(steps, parsed):
        emitted.clear()
        changed = _apply_step(calendar, action, argument)
        rows.append(
            _row(
                step,
                calendar,
                changed=changed,
                emitted=[serialize_value(v) for v in emitted],
            )
        )
    output_result(ctx, rows, format=format)


def _row(
    step: str, calendar: Calendar, *, changed: bool, emitted: list[Any]
) -> dict[str, Any]:
    return {
        "step": step,
        "view": calendar.view,
        "active_start_date": calendar.active_start_date.isoformat(),
        "label": calendar.locale_context.format_label(
            calendar.view, calendar.active_start_date
        ),
        "changed": changed,
        "emitted": emitted,
    }


@handle_errors
def period(
    ctx: typer.Context,
    granularity: Annotated[
        str,
        typer.Argument(help="Granularity: century, decade, year, month, day."),
    ],
    instant: Annotated[
        str,
        typer.Argument(metavar="DATE", help="ISO 8601 date or datetime."),
    ],
    format: FormatOption = "json",
) -> None:
    """Show the first and last instant of the period containing DATE.

    Centuries start in years ending in 01 and decades in years ending
    in 1, so 2025-03-01 lies in the decade 2021-2030.

    Examples:

        calnav period decade 2025-03-01
        calnav period month 2024-02-10 --format plain
    """
    validate_output_format(format)
    moment: datetime = parse_instant(instant)
    start, end = period_range(granularity, moment)  # type: ignore[arg-type]
    output_result(
        ctx,
        PeriodInfo(granularity, start, end).to_dict(),  # type: ignore[arg-type]
        format=format,
    )
