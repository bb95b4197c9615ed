"""Configuration management for calendar_navigator.

Defines the immutable CalendarConfig model that a host passes to a Calendar,
and a ConfigManager that stores default settings in TOML format at
~/.calnav/config.toml.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import tomli_w
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from calendar_navigator._internal.values import coerce_value
from calendar_navigator._internal.views import value_type_for
from calendar_navigator._literal_types import (
    ALL_RETURN_MODES,
    ALL_VIEWS,
    CalendarType,
    Granularity,
    ReturnMode,
    View,
)
from calendar_navigator.exceptions import (
    ConfigError,
    InvalidDetailBounds,
    InvalidGranularity,
    InvalidReturnMode,
)
from calendar_navigator.types import DetailBounds, ExternalValue

# Name of the TOML table holding calendar settings
CONFIG_TABLE = "calendar"


class CalendarConfig(BaseModel):
    """Immutable construction options for a Calendar.

    This is a frozen Pydantic model that ensures:
    - Detail bounds and return mode are validated on construction
    - Dates and ISO strings in `value` are promoted to datetimes
    - The object cannot be modified after creation; Calendar.update()
      derives a re-validated copy and reconciles against it

    Unknown detail or return-mode tokens raise the library's own
    InvalidGranularity / InvalidReturnMode rather than a ValidationError.
    The requested `view` is deliberately not validated: a view outside the
    detail bounds is clamped by the calendar.
    """

    model_config = ConfigDict(frozen=True)

    min_detail: View = "century"
    """Coarsest selectable view."""

    max_detail: View = "month"
    """Finest selectable view."""

    view: str = "month"
    """Initially requested view."""

    value: ExternalValue = None
    """Selected value: a single instant, a (from, to) pair, or None."""

    return_value: ReturnMode = "start"
    """How committed selections are reported: start, end or range."""

    calendar_type: CalendarType | None = None
    """Week-start convention; derived from the locale when None."""

    show_week_numbers: bool = False
    """Passed through to the month collaborator."""

    locale: str | None = None
    """Locale tag; the platform locale when None."""

    prev_label: str | None = None
    """Navigation arrow captions, passed through to the navigation bar."""

    next_label: str | None = None
    prev2_label: str | None = None
    next2_label: str | None = None

    @field_validator("min_detail", "max_detail", mode="before")
    @classmethod
    def validate_detail(cls, v: Any) -> Any:
        """Reject detail bounds that are not view tokens."""
        if v not in ALL_VIEWS:
            raise InvalidGranularity(v, ALL_VIEWS)
        return v

    @field_validator("return_value", mode="before")
    @classmethod
    def validate_return_value(cls, v: Any) -> Any:
        """Reject unknown return modes."""
        if v not in ALL_RETURN_MODES:
            raise InvalidReturnMode(v)
        return v

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> ExternalValue:
        """Promote dates/strings and check pair ordering."""
        value = coerce_value(v)
        if isinstance(value, tuple):
            start, end = value
            if start is not None and end is not None:
                if (start.tzinfo is None) != (end.tzinfo is None):
                    raise ValueError(
                        "Value start and end must both have a UTC offset "
                        "or both have none"
                    )
                if start > end:
                    raise ValueError(
                        f"Value start ({start.isoformat()}) must not be after "
                        f"value end ({end.isoformat()})"
                    )
        return value

    @model_validator(mode="after")
    def validate_bounds(self) -> CalendarConfig:
        """Reject min_detail finer than max_detail."""
        if ALL_VIEWS.index(self.min_detail) > ALL_VIEWS.index(self.max_detail):
            raise InvalidDetailBounds(self.min_detail, self.max_detail)
        return self

    @property
    def bounds(self) -> DetailBounds:
        """Permitted view window."""
        return DetailBounds(self.min_detail, self.max_detail)

    @property
    def value_type(self) -> Granularity:
        """Granularity one level finer than max_detail."""
        return value_type_for(self.max_detail)

    def to_dict(self) -> dict[str, Any]:
        """Serialize config for JSON output."""
        data = self.model_dump()
        value = data["value"]
        if isinstance(value, tuple):
            data["value"] = [v.isoformat() if v else None for v in value]
        elif isinstance(value, datetime):
            data["value"] = value.isoformat()
        return data


class ConfigManager:
    """Manages stored default settings for the calnav CLI.

    Handles:
    - Loading a CalendarConfig from the [calendar] table
    - Saving a CalendarConfig back to the file

    Config file location (in priority order):
    1. Explicit config_path parameter
    2. CALNAV_CONFIG_PATH environment variable
    3. Default: ~/.calnav/config.toml
    """

    DEFAULT_CONFIG_PATH = Path.home() / ".calnav" / "config.toml"

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize ConfigManager.

        Args:
            config_path: Override config file location.
                         Default: ~/.calnav/config.toml
        """
        if config_path is not None:
            self._config_path = config_path
        elif "CALNAV_CONFIG_PATH" in os.environ:
            self._config_path = Path(os.environ["CALNAV_CONFIG_PATH"])
        else:
            self._config_path = self.DEFAULT_CONFIG_PATH

    @property
    def config_path(self) -> Path:
        """Return the config file path."""
        return self._config_path

    def _read_config(self) -> dict[str, Any]:
        """Read and parse the config file.

        Returns:
            Parsed config dictionary, or empty dict if file doesn't exist.
        """
        if not self._config_path.exists():
            return {}

        try:
            with self._config_path.open("rb") as f:
                return dict(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"Invalid TOML in config file: {e}",
                details={"path": str(self._config_path)},
            ) from e

    def _write_config(self, config: dict[str, Any]) -> None:
        """Write config to file, creating directory if needed.

        Args:
            config: Configuration dictionary to write.
        """
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with self._config_path.open("wb") as f:
            tomli_w.dump(config, f)

    def load(self) -> CalendarConfig:
        """Load stored settings.

        Returns:
            CalendarConfig built from the [calendar] table, or the defaults
            when the file or table is missing.

        Raises:
            ConfigError: If the file is not valid TOML or the table is not
                a table.
            InvalidGranularity: If a stored detail bound is unknown.
            InvalidReturnMode: If the stored return mode is unknown.
        """
        table = self._read_config().get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(
                f"'{CONFIG_TABLE}' in config file must be a table",
                details={"path": str(self._config_path)},
            )
        return CalendarConfig(**table)

    def save(self, config: CalendarConfig) -> None:
        """Store settings, replacing the [calendar] table.

        Other tables in the file are preserved. None-valued settings are
        omitted since TOML has no null.
        """
        data = self._read_config()
        table = config.model_dump(exclude_none=True, exclude={"value"})
        value = config.value
        if isinstance(value, tuple):
            # half-open pairs cannot be written to TOML
            if None not in value:
                table["value"] = list(value)
        elif value is not None:
            table["value"] = value
        data[CONFIG_TABLE] = table
        self._write_config(data)
