"""CLI entry point for calendar_navigator.

This module provides the `calnav` command-line interface. It defines
global options and registers commands.

Usage:
    calnav [OPTIONS] COMMAND [ARGS]...

Examples:
    calnav --help
    calnav show --value 2023-06-15
    calnav run up down:2023-07-01 click:2023-07-04 --min-detail year
    calnav period decade 2025-03-01
    calnav config set --max-detail year
"""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path
from typing import Annotated

import typer

import calendar_navigator
from calendar_navigator.cli.utils import ExitCode, err_console

# Create main application
app = typer.Typer(
    name="calnav",
    help="Calendar navigator CLI - drill through calendar views.",
    epilog="""[dim]Workflow:[/dim] calnav show → calnav run up down:<date>

[dim]Defaults:[/dim] calnav config set stores options in ~/.calnav/config.toml""",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        print(f"calnav version {calendar_navigator.__version__}")
        raise typer.Exit()


def _handle_interrupt(_signum: int, _frame: object) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    err_console.print("\n[yellow]Interrupted[/yellow]")
    sys.exit(ExitCode.INTERRUPTED)


# Set up signal handler for Ctrl+C
signal.signal(signal.SIGINT, _handle_interrupt)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to read defaults from.",
            envvar="CALNAV_CONFIG_PATH",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug output.",
        ),
    ] = False,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Calendar navigator CLI - drill through calendar views.

    Builds a calendar from stored defaults plus command-line options and
    reports its navigation state as JSON, tables or plain text.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = None
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register commands
# These imports are done here to avoid circular imports
def _register_commands() -> None:
    """Register all commands with the main app."""
    from calendar_navigator.cli.commands.config import config_app
    from calendar_navigator.cli.commands.nav import period, run, show

    app.command("show")(show)
    app.command("run")(run)
    app.command("period")(period)
    app.add_typer(config_app, name="config", help="Manage stored default settings.")


# Register commands when module is imported
_register_commands()


if __name__ == "__main__":
    app()
