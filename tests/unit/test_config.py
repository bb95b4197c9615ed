"""Unit tests for CalendarConfig and ConfigManager."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from calendar_navigator._internal.config import CalendarConfig, ConfigManager
from calendar_navigator.exceptions import (
    ConfigError,
    InvalidDetailBounds,
    InvalidGranularity,
    InvalidReturnMode,
)
from calendar_navigator.types import DetailBounds


class TestCalendarConfig:
    """Tests for CalendarConfig model."""

    def test_defaults(self) -> None:
        """Defaults permit every view and report the period start."""
        config = CalendarConfig()

        assert config.min_detail == "century"
        assert config.max_detail == "month"
        assert config.view == "month"
        assert config.value is None
        assert config.return_value == "start"
        assert config.calendar_type is None
        assert config.show_week_numbers is False
        assert config.locale is None

    def test_is_frozen(self) -> None:
        """Configs cannot be mutated."""
        config = CalendarConfig()

        with pytest.raises(ValidationError):
            config.view = "year"  # type: ignore[misc]

    def test_bounds_and_value_type(self) -> None:
        """bounds and value_type derive from the detail settings."""
        config = CalendarConfig(min_detail="decade", max_detail="year")

        assert config.bounds == DetailBounds("decade", "year")
        assert config.value_type == "month"

    def test_unknown_detail_raises_library_error(self) -> None:
        """Bad detail tokens raise InvalidGranularity, not ValidationError."""
        with pytest.raises(InvalidGranularity) as exc_info:
            CalendarConfig(max_detail="day")  # type: ignore[arg-type]

        assert exc_info.value.granularity == "day"

    def test_unknown_return_mode_raises_library_error(self) -> None:
        """Bad return modes raise InvalidReturnMode."""
        with pytest.raises(InvalidReturnMode):
            CalendarConfig(return_value="both")  # type: ignore[arg-type]

    def test_inverted_bounds_raise(self) -> None:
        """min_detail finer than max_detail leaves no permitted view."""
        with pytest.raises(InvalidDetailBounds) as exc_info:
            CalendarConfig(min_detail="month", max_detail="year")

        assert exc_info.value.min_detail == "month"
        assert exc_info.value.max_detail == "year"

    def test_requested_view_is_not_validated(self) -> None:
        """Out-of-range views are accepted and clamped later."""
        assert CalendarConfig(view="fortnight").view == "fortnight"

    def test_value_coercion(self) -> None:
        """Dates and ISO strings are promoted to datetimes."""
        assert CalendarConfig(value=date(2023, 6, 15)).value == datetime(2023, 6, 15)
        assert CalendarConfig(value=["2023-01-10", "2023-02-20"]).value == (
            datetime(2023, 1, 10),
            datetime(2023, 2, 20),
        )

    def test_reversed_pair_is_rejected(self) -> None:
        """A pair whose start is after its end fails validation."""
        with pytest.raises(ValidationError, match="must not be after"):
            CalendarConfig(value=(datetime(2023, 3, 1), datetime(2023, 2, 1)))

    def test_mixed_offset_pair_is_rejected(self) -> None:
        """A pair mixing naive and offset-aware ends fails validation."""
        with pytest.raises(ValidationError, match="UTC offset"):
            CalendarConfig(value=["2023-06-01", "2023-06-02T00:00+00:00"])

    def test_aware_pair_is_accepted(self) -> None:
        """Two offset-aware ends compare normally."""
        config = CalendarConfig(
            value=["2023-06-01T00:00+00:00", "2023-06-02T00:00+02:00"]
        )

        assert config.value is not None
        assert config.value[0].tzinfo is not None  # type: ignore[index]

    def test_navigation_labels_default_to_none(self) -> None:
        """Arrow captions are unset unless given."""
        config = CalendarConfig(prev_label="<")

        assert config.prev_label == "<"
        assert config.next_label is None
        assert config.prev2_label is None
        assert config.next2_label is None

    def test_bad_calendar_type_is_rejected(self) -> None:
        """calendar_type is a closed set."""
        with pytest.raises(ValidationError):
            CalendarConfig(calendar_type="Julian")  # type: ignore[arg-type]

    def test_to_dict_uses_iso_strings(self) -> None:
        """to_dict is JSON-friendly."""
        config = CalendarConfig(value=(datetime(2023, 1, 10), None))

        data = config.to_dict()

        assert data["value"] == ["2023-01-10T00:00:00", None]
        assert data["min_detail"] == "century"


class TestConfigManagerPath:
    """Tests for config file location."""

    def test_explicit_path(self, config_path: Path) -> None:
        """An explicit path wins."""
        assert ConfigManager(config_path=config_path).config_path == config_path

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
        """CALNAV_CONFIG_PATH is used when no path is given."""
        env_path = temp_dir / "env.toml"
        monkeypatch.setenv("CALNAV_CONFIG_PATH", str(env_path))

        assert ConfigManager().config_path == env_path

    def test_default_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without overrides the file lives under ~/.calnav."""
        monkeypatch.delenv("CALNAV_CONFIG_PATH", raising=False)

        assert ConfigManager().config_path == ConfigManager.DEFAULT_CONFIG_PATH


class TestConfigManagerLoad:
    """Tests for ConfigManager.load."""

    def test_missing_file_gives_defaults(self, config_manager: ConfigManager) -> None:
        """No file means default settings."""
        assert config_manager.load() == CalendarConfig()

    def test_reads_calendar_table(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """Settings come from the [calendar] table."""
        config_path.write_text(
            '[calendar]\nmin_detail = "decade"\nmax_detail = "year"\n'
            'value = 2023-06-15T00:00:00\nlocale = "de-DE"\n'
        )

        config = config_manager.load()

        assert config.min_detail == "decade"
        assert config.max_detail == "year"
        assert config.value == datetime(2023, 6, 15)
        assert config.locale == "de-DE"

    def test_reads_date_and_pair(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """TOML dates and arrays become datetimes and pairs."""
        config_path.write_text("[calendar]\nvalue = [2023-01-10, 2023-02-20]\n")

        assert config_manager.load().value == (
            datetime(2023, 1, 10),
            datetime(2023, 2, 20),
        )

    def test_invalid_toml_raises_config_error(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """Malformed files raise ConfigError naming the path."""
        config_path.write_text("[calendar\nmin_detail = ")

        with pytest.raises(ConfigError, match="Invalid TOML") as exc_info:
            config_manager.load()

        assert exc_info.value.details["path"] == str(config_path)

    def test_calendar_must_be_table(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """A scalar 'calendar' key is rejected."""
        config_path.write_text('calendar = "month"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            config_manager.load()

    def test_bad_stored_token_raises(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """Stored tokens are validated like constructor arguments."""
        config_path.write_text('[calendar]\nreturn_value = "both"\n')

        with pytest.raises(InvalidReturnMode):
            config_manager.load()


class TestConfigManagerSave:
    """Tests for ConfigManager.save."""

    def test_round_trip(self, config_manager: ConfigManager) -> None:
        """Saved settings load back equal."""
        config = CalendarConfig(
            min_detail="year",
            value=(datetime(2023, 1, 10), datetime(2023, 2, 20)),
            return_value="range",
            calendar_type="Hebrew",
            show_week_numbers=True,
            locale="he-IL",
        )

        config_manager.save(config)

        assert config_manager.load() == config

    def test_creates_parent_directory(self, temp_dir: Path) -> None:
        """Missing parent directories are created."""
        path = temp_dir / "nested" / "dir" / "config.toml"

        ConfigManager(config_path=path).save(CalendarConfig(view="year"))

        assert path.exists()

    def test_omits_none_settings(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """TOML has no null, so None settings are left out."""
        config_manager.save(CalendarConfig())

        keys = [line.split(" = ")[0] for line in config_path.read_text().splitlines()]
        assert "locale" not in keys
        assert "value" not in keys
        assert "next2_label" not in keys
        assert "return_value" in keys

    def test_drops_half_open_pair(self, config_manager: ConfigManager) -> None:
        """A pair with a missing end cannot be written and is dropped."""
        config_manager.save(CalendarConfig(value=(datetime(2023, 1, 10), None)))

        assert config_manager.load().value is None

    def test_preserves_other_tables(
        self, config_manager: ConfigManager, config_path: Path
    ) -> None:
        """Unrelated tables survive a save."""
        config_path.write_text('[other]\nkey = "kept"\n')

        config_manager.save(CalendarConfig(max_detail="year"))

        text = config_path.read_text()
        assert 'key = "kept"' in text
        assert config_manager.load().max_detail == "year"
