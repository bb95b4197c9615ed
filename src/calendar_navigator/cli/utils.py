"""CLI utility functions and error handling.

This module provides shared utilities for the CLI:
- ExitCode enum for standardized exit codes
- handle_errors decorator for exception-to-exit-code mapping
- Console instances for stdout/stderr separation
- Lazy config manager initialization helper
- output_result for routing data to the selected formatter
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console

from calendar_navigator.exceptions import (
    CalendarNavigatorError,
    ConfigError,
    InvalidDetailBounds,
    InvalidGranularity,
    InvalidReturnMode,
    InvalidView,
)

if TYPE_CHECKING:
    from calendar_navigator._internal.config import CalendarConfig, ConfigManager

# Console instances for stdout/stderr separation
# Data output goes to stdout; errors go to stderr
console = Console()
err_console = Console(stderr=True, no_color=bool(os.environ.get("NO_COLOR")))


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands.

    Exit codes follow Unix conventions:
    - 0: Success
    - 1-3: Application-specific errors
    - 130: Interrupted by SIGINT (Ctrl+C)
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
    INVALID_ARGS = 3
    INTERRUPTED = 130


F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Decorator to convert library exceptions to CLI exit codes.

    Maps CalendarNavigatorError subclasses to appropriate exit codes and
    displays formatted error messages to stderr.

    Usage:
        @handle_errors
        def my_command(ctx: typer.Context):
            calendar = Calendar(build_config(ctx))
            output_result(ctx, calendar.snapshot().to_dict())
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except InvalidGranularity as e:
            err_console.print(f"[red]Invalid granularity:[/red] {e.granularity!r}")
            err_console.print(f"Valid options: {', '.join(e.valid_values)}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except InvalidReturnMode as e:
            err_console.print(f"[red]Invalid return value:[/red] {e.return_mode!r}")
            err_console.print("Valid options: start, end, range")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except InvalidView as e:
            err_console.print(f"[red]Invalid view:[/red] {e.view!r}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except InvalidDetailBounds as e:
            err_console.print(f"[red]Invalid detail bounds:[/red] {e.message}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except ConfigError as e:
            err_console.print(f"[red]Configuration error:[/red] {e.message}")
            if "path" in e.details:
                err_console.print(f"[dim]File: {e.details['path']}[/dim]")
            raise typer.Exit(ExitCode.CONFIG_ERROR) from None
        except CalendarNavigatorError as e:
            err_console.print(f"[red]Error:[/red] {e.message}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        except ValidationError as e:
            for error in e.errors():
                field = ".".join(str(part) for part in error["loc"]) or "value"
                err_console.print(f"[red]Invalid {field}:[/red] {error['msg']}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except ValueError as e:
            # Malformed dates and too many --value options
            err_console.print(f"[red]Invalid argument:[/red] {e}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None

    return wrapper  # type: ignore[return-value]


def get_config_manager(ctx: typer.Context) -> ConfigManager:
    """Get or create ConfigManager from context.

    Lazily initializes a ConfigManager instance, respecting the --config
    global option. The instance is cached in the context for reuse.

    Args:
        ctx: Typer context with global options in obj dict.

    Returns:
        ConfigManager instance.
    """
    from calendar_navigator._internal.config import ConfigManager

    if "config" not in ctx.obj or ctx.obj["config"] is None:
        ctx.obj["config"] = ConfigManager(config_path=ctx.obj.get("config_path"))
    config: ConfigManager = ctx.obj["config"]
    return config


def output_result(
    ctx: typer.Context,
    data: dict[str, Any] | list[Any],
    columns: list[str] | None = None,
    *,
    format: str | None = None,
) -> None:
    """Output data in the requested format.

    Tables are rendered by Rich; every other format is printed verbatim
    so that JSON output stays parseable.

    Args:
        ctx: Typer context with global options in obj dict.
        data: Data to output (dict or list).
        columns: Column names for table format (auto-detected if None).
        format: json, jsonl, table or plain. Defaults to json.
    """
    from calendar_navigator.cli.formatters import (
        format_json,
        format_jsonl,
        format_plain,
        format_table,
    )

    fmt = format or "json"
    if fmt == "jsonl":
        output = format_jsonl(data)
    elif fmt == "table":
        console.print(format_table(data, columns))
        return
    elif fmt == "plain":
        output = format_plain(data)
    else:
        output = format_json(data)
    console.print(output, highlight=False, markup=False, soft_wrap=True)


def build_config(
    ctx: typer.Context,
    *,
    min_detail: str | None = None,
    max_detail: str | None = None,
    view: str | None = None,
    value: list[str] | None = None,
    return_value: str | None = None,
    locale: str | None = None,
    calendar_type: str | None = None,
    show_week_numbers: bool | None = None,
) -> CalendarConfig:
    """Merge command-line options over the stored defaults.

    Options left as None keep the stored setting. A single --value selects
    one date; two form a (from, to) range.

    Raises:
        ValueError: If --value is given more than twice.
        ConfigError: If the config file cannot be read.
    """
    from calendar_navigator._internal.config import CalendarConfig

    changes: dict[str, Any] = {
        "min_detail": min_detail,
        "max_detail": max_detail,
        "view": view,
        "return_value": return_value,
        "locale": locale,
        "calendar_type": calendar_type,
        "show_week_numbers": show_week_numbers,
    }
    if value:
        if len(value) > 2:
            raise ValueError(f"--value accepts at most 2 dates, got {len(value)}")
        changes["value"] = value[0] if len(value) == 1 else list(value)

    base = get_config_manager(ctx).load()
    overrides = {k: v for k, v in changes.items() if v is not None}
    return CalendarConfig.model_validate({**base.model_dump(), **overrides})
