"""Shared fixtures for calendar_navigator tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# Register Hypothesis profiles for different environments
settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)

settings.register_profile(
    "ci",
    max_examples=200,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
    derandomize=True,  # Reproducible in CI
)

settings.register_profile(
    "dev",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
    report_multiple_bugs=False,
)

# Load profile from HYPOTHESIS_PROFILE env var, default to "default"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))

if TYPE_CHECKING:
    from calendar_navigator._internal.config import ConfigManager

# Fixed "now" so calendars without a value are deterministic
FIXED_NOW = datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir: Path) -> Path:
    """Return path for a temporary config file."""
    return temp_dir / "config.toml"


@pytest.fixture
def config_manager(config_path: Path) -> ConfigManager:
    """Create a ConfigManager with a temporary config file."""
    from calendar_navigator._internal.config import ConfigManager

    return ConfigManager(config_path=config_path)


@pytest.fixture
def fixed_now() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def recorder() -> Callable[..., Any]:
    """Factory for callables that record every argument they receive.

    Usage:
        def test_something(recorder):
            seen = recorder()
            seen(1)
            assert seen.calls == [1]
    """

    class Recorder:
        def __init__(self, result: Any = None) -> None:
            self.calls: list[Any] = []
            self._result = result

        def __call__(self, value: Any) -> Any:
            self.calls.append(value)
            return self._result

    return Recorder
