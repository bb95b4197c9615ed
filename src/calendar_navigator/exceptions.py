"""Exception hierarchy for calendar_navigator.

All library exceptions inherit from CalendarNavigatorError, enabling callers
to catch all library errors with a single except clause while still allowing
fine-grained exception handling when needed.

Every error here is a programmer or configuration error. They are raised at
the point of misuse rather than coerced, because a silently coerced view or
return mode would corrupt the value-selection contract. Requested views that
fall outside the configured detail bounds are NOT errors; they are clamped by
the view resolver.
"""

from __future__ import annotations

from typing import Any

from calendar_navigator._literal_types import (
    ALL_GRANULARITIES,
    ALL_RETURN_MODES,
    ALL_VIEWS,
)


class CalendarNavigatorError(Exception):
    """Base exception for all calendar_navigator errors.

    All library exceptions inherit from this class, allowing callers to:
    - Catch all library errors: except CalendarNavigatorError
    - Handle specific errors: except InvalidReturnMode
    - Serialize errors: error.to_dict()
    """

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code for programmatic handling.
            details: Additional structured data about the error.
        """
        super().__init__(message)
        self._message = message
        self._code = code
        self._details = details or {}

    @property
    def code(self) -> str:
        """Machine-readable error code."""
        return self._code

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """Additional structured error data."""
        return self._details

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/JSON output.

        Returns:
            Dictionary with keys: code, message, details.
            All values are JSON-serializable.
        """
        return {
            "code": self._code,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self._message

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return (
            f"{self.__class__.__name__}(message={self._message!r}, code={self._code!r})"
        )


def _token_details(value: object, valid: tuple[str, ...]) -> dict[str, Any]:
    return {"value": repr(value), "valid_values": list(valid)}


class InvalidGranularity(CalendarNavigatorError):
    """A granularity token is not one of century, decade, year, month, day.

    Raised by the date-range utilities and by configuration validation.

    Example:
        ```python
        try:
            period_start("week", datetime(2024, 1, 3))
        except InvalidGranularity as e:
            print(e.granularity)      # 'week'
            print(e.valid_values)     # ['century', 'decade', ...]
        ```
    """

    def __init__(self, granularity: object, valid: tuple[str, ...] = ()) -> None:
        """Initialize InvalidGranularity.

        Args:
            granularity: The rejected token.
            valid: Tokens that would have been accepted.
        """
        if not valid:
            valid = ALL_GRANULARITIES
        message = (
            f"Invalid granularity: {granularity!r}. "
            f"Valid values: {', '.join(valid)}"
        )
        super().__init__(
            message,
            code="INVALID_GRANULARITY",
            details=_token_details(granularity, valid),
        )
        self._granularity = granularity

    @property
    def granularity(self) -> object:
        """The rejected token."""
        return self._granularity

    @property
    def valid_values(self) -> list[str]:
        """Tokens that would have been accepted."""
        values = self._details.get("valid_values")
        return values if isinstance(values, list) else []


class InvalidReturnMode(CalendarNavigatorError):
    """The configured return mode is not one of start, end, range."""

    def __init__(self, return_mode: object) -> None:
        """Initialize InvalidReturnMode.

        Args:
            return_mode: The rejected return mode.
        """
        message = (
            f"Invalid returnValue: {return_mode!r}. "
            f"Valid values: {', '.join(ALL_RETURN_MODES)}"
        )
        super().__init__(
            message,
            code="INVALID_RETURN_MODE",
            details=_token_details(return_mode, ALL_RETURN_MODES),
        )
        self._return_mode = return_mode

    @property
    def return_mode(self) -> object:
        """The rejected return mode."""
        return self._return_mode


class InvalidView(CalendarNavigatorError):
    """A displayed-view switch landed on a value that cannot be shown."""

    def __init__(self, view: object, valid: tuple[str, ...] = ()) -> None:
        """Initialize InvalidView.

        Args:
            view: The rejected view.
            valid: Views that would have been accepted.
        """
        if not valid:
            valid = ALL_VIEWS
        super().__init__(
            f"Invalid view: {view!r}.",
            code="INVALID_VIEW",
            details=_token_details(view, valid),
        )
        self._view = view

    @property
    def view(self) -> object:
        """The rejected view."""
        return self._view


# Configuration Exceptions


class ConfigError(CalendarNavigatorError):
    """Base for configuration-related errors.

    Raised when there's a problem with the configuration file or with a
    combination of settings that no view can satisfy.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ConfigError.

        Args:
            message: Human-readable error message.
            details: Additional structured data.
        """
        super().__init__(message, code="CONFIG_ERROR", details=details)


class InvalidDetailBounds(ConfigError):
    """min_detail is finer than max_detail, leaving no permitted view."""

    def __init__(self, min_detail: str, max_detail: str) -> None:
        """Initialize InvalidDetailBounds.

        Args:
            min_detail: The configured coarsest view.
            max_detail: The configured finest view.
        """
        message = (
            f"min_detail '{min_detail}' must not be finer than "
            f"max_detail '{max_detail}'."
        )
        super().__init__(
            message, details={"min_detail": min_detail, "max_detail": max_detail}
        )
        self._code = "INVALID_DETAIL_BOUNDS"

    @property
    def min_detail(self) -> str:
        """The configured coarsest view."""
        return str(self._details.get("min_detail", ""))

    @property
    def max_detail(self) -> str:
        """The configured finest view."""
        return str(self._details.get("max_detail", ""))
