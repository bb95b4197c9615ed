"""Shared fixtures for CLI integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
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
