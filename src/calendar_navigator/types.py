"""Value and prop types for calendar_navigator.

All types are immutable frozen dataclasses with:
- JSON serialization via the `to_dict()` method (all values JSON-serializable)
- Full type hints for IDE/mypy support

Immutability: these dataclasses are frozen, meaning their attributes cannot be
modified after construction. The navigator replaces its NavigationState on
every transition instead of mutating it, so a state handed to a rendering
collaborator never changes underneath it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Union

from calendar_navigator._literal_types import (
    ALL_VIEWS,
    CalendarType,
    Granularity,
    ReturnMode,
    View,
)
from calendar_navigator.exceptions import InvalidDetailBounds, InvalidGranularity

if TYPE_CHECKING:
    from calendar_navigator._internal.listeners import Listeners

ExternalValue = Union[datetime, tuple[datetime | None, datetime | None], None]
"""A value as supplied by or returned to the caller.

Either absent (None), a single instant, or a (from, to) pair.
"""


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def serialize_value(value: ExternalValue) -> Any:
    """Convert an external value to JSON-friendly ISO strings."""
    if isinstance(value, tuple):
        return [_iso(v) for v in value]
    return _iso(value)


# =============================================================================
# Core State Types
# =============================================================================


@dataclass(frozen=True)
class DetailBounds:
    """Coarsest and finest view the user may navigate to.

    The permitted view window is [min_detail, max_detail] in nesting order
    (century is coarsest).

    Raises:
        InvalidGranularity: If either bound is not a view token.
        InvalidDetailBounds: If min_detail is finer than max_detail.

    Example:
        ```python
        bounds = DetailBounds(min_detail="decade", max_detail="year")
        allowed_views(bounds)  # ('decade', 'year')
        ```
    """

    min_detail: View = "century"
    """Coarsest selectable view."""

    max_detail: View = "month"
    """Finest selectable view."""

    def __post_init__(self) -> None:
        """Validate both bounds and their ordering."""
        for bound in (self.min_detail, self.max_detail):
            if bound not in ALL_VIEWS:
                raise InvalidGranularity(bound, ALL_VIEWS)
        if ALL_VIEWS.index(self.min_detail) > ALL_VIEWS.index(self.max_detail):
            raise InvalidDetailBounds(self.min_detail, self.max_detail)

    def to_dict(self) -> dict[str, Any]:
        """Serialize bounds for JSON output."""
        return {"min_detail": self.min_detail, "max_detail": self.max_detail}


@dataclass(frozen=True)
class NavigationState:
    """The displayed view and the anchor of the visible period.

    active_start_date is always the canonical period start of `view`.
    """

    view: View
    """Currently displayed granularity."""

    active_start_date: datetime
    """First instant of the visible period."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize state for JSON output."""
        return {
            "view": self.view,
            "active_start_date": self.active_start_date.isoformat(),
        }


@dataclass(frozen=True)
class NormalizedValue:
    """An external value collapsed to a canonical (from, to) pair.

    Both fields are None when no value is set.
    """

    value_from: datetime | None = None
    """Start of the first selected period."""

    value_to: datetime | None = None
    """End of the last selected period."""

    @property
    def is_empty(self) -> bool:
        """True when no value is set."""
        return self.value_from is None and self.value_to is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize value for JSON output."""
        return {
            "value_from": _iso(self.value_from),
            "value_to": _iso(self.value_to),
        }


# =============================================================================
# Collaborator Props
# =============================================================================


@dataclass(frozen=True)
class ViewProps:
    """Props handed to the rendering collaborator of the current view.

    Attributes:
        view: Granularity of the grid to render.
        active_start_date: First instant of the visible period.
        value: The selected value, as last supplied or committed.
        normalized: The selected value as a canonical (from, to) pair.
        value_type: Granularity of the value each tile represents.
        on_change: Listeners to invoke, in order, when a tile is clicked.
        calendar_type: Week-start convention (month view only).
        week_start: First weekday, 0 = Monday (month view only).
        show_week_numbers: Whether to render week numbers (month view only).
    """

    view: View
    active_start_date: datetime
    value: ExternalValue
    normalized: NormalizedValue
    value_type: Granularity
    on_change: Listeners
    calendar_type: CalendarType | None = None
    week_start: int | None = None
    show_week_numbers: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize props for JSON output (listeners are omitted)."""
        result: dict[str, Any] = {
            "view": self.view,
            "active_start_date": self.active_start_date.isoformat(),
            "value": serialize_value(self.value),
            "value_type": self.value_type,
            **self.normalized.to_dict(),
        }
        if self.view == "month":
            result["calendar_type"] = self.calendar_type
            result["week_start"] = self.week_start
            result["show_week_numbers"] = self.show_week_numbers
        return result


@dataclass(frozen=True)
class NavigationBarProps:
    """Props handed to the navigation-bar collaborator.

    Arrow targets are None when the button has nothing to navigate to
    (the century view has no double arrows, and the representable years
    end at 1 and 9999).
    """

    active_start_date: datetime
    """First instant of the visible period."""

    view: View
    """Currently displayed granularity."""

    views: tuple[View, ...]
    """Permitted views, coarsest first."""

    label: str
    """Locale-formatted title of the visible period."""

    drill_up_enabled: bool
    """Whether the title button can zoom out."""

    prev_start: datetime | None
    next_start: datetime | None
    prev2_start: datetime | None
    next2_start: datetime | None

    drill_up: Callable[[], bool] = field(repr=False, compare=False)
    """Zooms out one level."""

    set_active_start_date: Callable[[datetime], None] = field(
        repr=False, compare=False
    )
    """Moves the visible window without changing the view."""

    prev_label: str | None = None
    """Caller-supplied arrow captions; None keeps the collaborator's own."""
    next_label: str | None = None
    prev2_label: str | None = None
    next2_label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize props for JSON output (callbacks are omitted)."""
        return {
            "active_start_date": self.active_start_date.isoformat(),
            "view": self.view,
            "views": list(self.views),
            "label": self.label,
            "drill_up_enabled": self.drill_up_enabled,
            "prev_start": _iso(self.prev_start),
            "next_start": _iso(self.next_start),
            "prev2_start": _iso(self.prev2_start),
            "next2_start": _iso(self.next2_start),
            "prev_label": self.prev_label,
            "next_label": self.next_label,
            "prev2_label": self.prev2_label,
            "next2_label": self.next2_label,
        }


# =============================================================================
# Snapshot Types
# =============================================================================


@dataclass(frozen=True)
class CalendarSnapshot:
    """Point-in-time summary of a Calendar, used for CLI output.

    Example:
        ```python
        cal = Calendar(CalendarConfig(value=datetime(2023, 6, 15)))
        cal.snapshot().to_dict()
        # {'view': 'month', 'active_start_date': '2023-06-01T00:00:00', ...}
        ```
    """

    view: View
    active_start_date: datetime
    label: str
    views: tuple[View, ...]
    value_type: Granularity
    return_value: ReturnMode
    can_drill_up: bool
    can_drill_down: bool
    normalized: NormalizedValue

    def to_dict(self) -> dict[str, Any]:
        """Serialize snapshot for JSON output."""
        return {
            "view": self.view,
            "active_start_date": self.active_start_date.isoformat(),
            "label": self.label,
            "views": list(self.views),
            "value_type": self.value_type,
            "return_value": self.return_value,
            "can_drill_up": self.can_drill_up,
            "can_drill_down": self.can_drill_down,
            **self.normalized.to_dict(),
        }


@dataclass(frozen=True)
class PeriodInfo:
    """Boundaries of one period, as reported by `calnav period`."""

    granularity: Granularity
    start: datetime
    end: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize period for JSON output."""
        return {
            "granularity": self.granularity,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


# =============================================================================
# Host Callbacks
# =============================================================================


@dataclass(frozen=True)
class CalendarCallbacks:
    """Optional caller-supplied event handlers.

    The click handlers fire whenever a tile of the matching kind is clicked,
    after the calendar's own drill or commit action: on_click_decade from the
    century view, on_click_year from the decade view, on_click_month from the
    year view and on_click_day from the month view.
    """

    on_change: Callable[[ExternalValue], object] | None = None
    """Receives each committed selection, shaped by the return mode."""

    on_click_decade: Callable[[datetime], object] | None = None
    on_click_year: Callable[[datetime], object] | None = None
    on_click_month: Callable[[datetime], object] | None = None
    on_click_day: Callable[[datetime], object] | None = None
