"""Integration tests for stored settings driving a Calendar."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from calendar_navigator import Calendar, CalendarCallbacks, CalendarConfig
from calendar_navigator._internal.config import ConfigManager
from calendar_navigator.exceptions import ConfigError, InvalidDetailBounds


class TestConfigFileIO:
    """Tests for config file reading and writing."""

    def test_creates_config_directory(self, temp_dir: Path) -> None:
        """Config directory should be created if it doesn't exist."""
        config_path = temp_dir / "deep" / "nested" / "config.toml"
        manager = ConfigManager(config_path=config_path)

        manager.save(CalendarConfig(max_detail="year"))

        assert config_path.exists()
        assert config_path.parent.is_dir()

    def test_env_var_selects_file(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """CALNAV_CONFIG_PATH should be honoured when no path is given."""
        config_path = temp_dir / "env.toml"
        monkeypatch.setenv("CALNAV_CONFIG_PATH", str(config_path))

        ConfigManager().save(CalendarConfig(locale="de-DE"))

        assert ConfigManager(config_path=config_path).load().locale == "de-DE"

    def test_hand_edited_file(self, config_path: Path) -> None:
        """Native TOML dates and strings should both be accepted."""
        config_path.write_text(
            "[calendar]\n"
            'min_detail = "decade"\n'
            "value = [2023-01-10, \"2023-02-20T12:00\"]\n"
        )

        config = ConfigManager(config_path=config_path).load()

        assert config.min_detail == "decade"
        assert config.value == (datetime(2023, 1, 10), datetime(2023, 2, 20, 12))

    def test_inverted_bounds_in_file(self, config_path: Path) -> None:
        """Stored bounds are validated on load."""
        config_path.write_text(
            '[calendar]\nmin_detail = "month"\nmax_detail = "year"\n'
        )

        with pytest.raises(InvalidDetailBounds):
            ConfigManager(config_path=config_path).load()

    def test_invalid_detail_bounds_is_config_error(self, config_path: Path) -> None:
        """InvalidDetailBounds is catchable as a ConfigError."""
        config_path.write_text(
            '[calendar]\nmin_detail = "month"\nmax_detail = "decade"\n'
        )

        with pytest.raises(ConfigError):
            ConfigManager(config_path=config_path).load()


class TestStoredSettingsDriveCalendar:
    """Tests for the load -> Calendar -> update flow."""

    def test_calendar_from_stored_settings(
        self,
        config_manager: ConfigManager,
        fixed_now: Callable[[], datetime],
    ) -> None:
        """A calendar built from saved settings opens where they say."""
        config_manager.save(
            CalendarConfig(
                min_detail="decade",
                max_detail="year",
                value=datetime(2023, 6, 15),
                locale="en-US",
            )
        )

        calendar = Calendar(config_manager.load(), now=fixed_now)

        assert calendar.view == "year"
        assert calendar.views == ("decade", "year")
        assert calendar.active_start_date == datetime(2023, 1, 1)
        assert calendar.normalized_value.value_from == datetime(2023, 6, 1)

    def test_no_stored_value_uses_clock(
        self,
        config_manager: ConfigManager,
        fixed_now: Callable[[], datetime],
    ) -> None:
        """Without a value the window opens on the current period."""
        calendar = Calendar(config_manager.load(), now=fixed_now)

        assert calendar.view == "month"
        assert calendar.active_start_date == datetime(2024, 3, 1)

    def test_updated_settings_reconcile(
        self,
        config_manager: ConfigManager,
        fixed_now: Callable[[], datetime],
    ) -> None:
        """Re-saved settings applied through update() move the calendar."""
        config_manager.save(CalendarConfig(value=datetime(2023, 6, 15)))
        calendar = Calendar(config_manager.load(), now=fixed_now)
        calendar.navigate("next")

        config_manager.save(CalendarConfig(max_detail="decade"))
        calendar.update(**config_manager.load().model_dump())

        assert calendar.view == "decade"
        assert calendar.active_start_date == datetime(2021, 1, 1)
        assert calendar.value is None

    def test_committed_selection_saved_back(
        self,
        config_manager: ConfigManager,
        fixed_now: Callable[[], datetime],
    ) -> None:
        """A committed selection can be stored as the next default value."""
        picked: list[object] = []
        calendar = Calendar(
            config_manager.load(),
            CalendarCallbacks(on_change=picked.append),
            now=fixed_now,
        )

        calendar.dispatch_cell_click(datetime(2024, 3, 20))
        config_manager.save(
            calendar.config.model_copy(update={"value": picked[-1]})
        )

        assert config_manager.load().value == datetime(2024, 3, 20)
