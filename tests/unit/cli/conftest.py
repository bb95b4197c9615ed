"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, config_path: Path) -> Path:
    """Point CALNAV_CONFIG_PATH at a temporary file for every CLI test."""
    monkeypatch.setenv("CALNAV_CONFIG_PATH", str(config_path))
    return config_path


@pytest.fixture
def cli_context(config_path: Path) -> typer.Context:
    """Create a Typer context with the obj dict the main callback builds."""
    import click

    ctx = typer.Context(click.Command("test"))
    ctx.obj = {"config_path": config_path, "verbose": False, "config": None}
    return ctx
