"""Stored default settings commands.

This module provides commands for the config file:
- show: Show the stored settings and where they live
- set: Update stored settings
- reset: Restore default settings
"""

from __future__ import annotations

from typing import Annotated

import typer

from calendar_navigator._internal.config import CalendarConfig
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
from calendar_navigator.cli.utils import (
    build_config,
    err_console,
    get_config_manager,
    handle_errors,
    output_result,
)
from calendar_navigator.cli.validators import (
    validate_calendar_type,
    validate_output_format,
)

config_app = typer.Typer(
    name="config",
    help="Manage stored default settings.",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@config_app.command("show")
@handle_errors
def config_show(ctx: typer.Context, format: FormatOption = "json") -> None:
    """Show stored settings.

    Settings not present in the file are reported with their defaults.

    Examples:

        calnav config show
        calnav config show --format table
    """
    validate_output_format(format)
    manager = get_config_manager(ctx)
    data = manager.load().to_dict()
    data["path"] = str(manager.config_path)
    output_result(ctx, data, format=format)


@config_app.command("set")
@handle_errors
def config_set(
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
    """Update stored settings.

    Only the options given are changed; the rest keep their stored values.
    The combined settings are validated before anything is written.

    Examples:

        calnav config set --min-detail decade --max-detail year
        calnav config set --locale de-DE --return-value range
    """
    validate_output_format(format)
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
    manager = get_config_manager(ctx)
    manager.save(config)
    err_console.print(f"[green]Saved settings to {manager.config_path}[/green]")
    output_result(ctx, config.to_dict(), format=format)


@config_app.command("reset")
@handle_errors
def config_reset(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Restore the default settings.

    Other tables in the config file are left untouched.

    Examples:

        calnav config reset --force
    """
    if not force:
        confirm = typer.confirm("Restore default calendar settings?")
        if not confirm:
            err_console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)
    manager = get_config_manager(ctx)
    manager.save(CalendarConfig())
    err_console.print("[green]Restored default settings.[/green]")
