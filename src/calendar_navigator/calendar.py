"""Calendar: the reconciliation controller and public facade.

A Calendar owns one Navigator and one LocaleContext. Hosts create it from a
CalendarConfig, feed it configuration changes through on_configure(), route
tile clicks to dispatch_cell_click() and hand view_props() /
navigation_props() to their rendering collaborators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, cast

from calendar_navigator._internal.config import CalendarConfig
from calendar_navigator._internal.date_utils import (
    next2_start,
    next_start,
    previous2_start,
    previous_start,
)
from calendar_navigator._internal.listeners import Listeners
from calendar_navigator._internal.locales import LocaleContext
from calendar_navigator._internal.navigator import Navigator
from calendar_navigator._internal.values import (
    as_datetime,
    coerce_value,
    normalize,
    process_value,
    value_from,
)
from calendar_navigator._internal.views import is_allowed, resolve_view
from calendar_navigator._literal_types import (
    ALL_VIEWS,
    Granularity,
    NavigationDirection,
    View,
)
from calendar_navigator.exceptions import InvalidView
from calendar_navigator.types import (
    CalendarCallbacks,
    CalendarSnapshot,
    ExternalValue,
    NavigationBarProps,
    NavigationState,
    NormalizedValue,
    ViewProps,
)

_logger = logging.getLogger(__name__)

# Caller click handler fired from each view
_CLICK_CALLBACKS: dict[str, str] = {
    "century": "on_click_decade",
    "decade": "on_click_year",
    "year": "on_click_month",
    "month": "on_click_day",
}

_NAVIGATION_TARGETS: dict[str, Callable[[View, datetime], datetime | None]] = {
    "prev": previous_start,
    "next": next_start,
    "prev2": previous2_start,
    "next2": next2_start,
}


class Calendar:
    """Date-range picker core.

    Reconciles external configuration into navigation state, exposes the
    drill and pan transitions, and turns tile clicks into either a drill or
    a committed selection.

    Example:
        ```python
        picked = []
        cal = Calendar(
            CalendarConfig(min_detail="year", value=datetime(2023, 6, 15)),
            CalendarCallbacks(on_change=picked.append),
        )
        cal.view                  # 'month'
        cal.active_start_date     # datetime(2023, 6, 1, 0, 0)
        cal.drill_up()
        cal.active_start_date     # datetime(2023, 1, 1, 0, 0)
        cal.dispatch_cell_click(datetime(2023, 7, 1))   # drills to July
        cal.dispatch_cell_click(datetime(2023, 7, 4))   # commits
        picked                    # [datetime(2023, 7, 4, 0, 0)]
        ```
    """

    def __init__(
        self,
        config: CalendarConfig | None = None,
        callbacks: CalendarCallbacks | None = None,
        *,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        """Create a calendar and run its init lifecycle hook.

        Args:
            config: Construction options. Defaults to CalendarConfig().
            callbacks: Optional host event handlers.
            now: Clock used when no value is set. Defaults to datetime.now.
        """
        self._config = config if config is not None else CalendarConfig()
        self._callbacks = callbacks if callbacks is not None else CalendarCallbacks()
        self._now = now if now is not None else datetime.now
        self._value: ExternalValue = self._config.value
        self._navigator = Navigator(
            self._config.bounds,
            self._config.view,
            self._reference(self._config),
        )
        self.on_init(self._config)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_init(self, config: CalendarConfig) -> None:
        """Set up locale-dependent state for config."""
        self._locale = LocaleContext(config.locale, config.calendar_type)
        _logger.debug("Calendar initialized: %s %s", self.state, self._locale)

    def on_configure(
        self, prev_config: CalendarConfig, next_config: CalendarConfig
    ) -> None:
        """Reconcile a configuration change into navigation state.

        All decisions compare the same prev/next snapshot. In order:
        refresh the locale context if the locale changed; re-resolve the view
        if the detail bounds changed and the current view is no longer
        permitted; recompute the visible window if the bounds or the value
        changed. When none of those changed the window is left alone, so a
        user's panning survives unrelated updates.

        Args:
            prev_config: Configuration the calendar was showing.
            next_config: Configuration to adopt.
        """
        bounds_changed = (
            prev_config.min_detail != next_config.min_detail
            or prev_config.max_detail != next_config.max_detail
        )
        prev_value = normalize(prev_config.value_type, prev_config.value)
        next_value = normalize(next_config.value_type, next_config.value)
        value_from_changed = prev_value.value_from != next_value.value_from
        value_to_changed = prev_value.value_to != next_value.value_to
        value_changed = value_from_changed or value_to_changed

        locale_changed = prev_config.locale != next_config.locale or (
            prev_config.calendar_type != next_config.calendar_type
        )
        if locale_changed:
            self._locale = LocaleContext(next_config.locale, next_config.calendar_type)
            _logger.debug("Locale context refreshed: %s", self._locale)

        view: View | None = None
        if bounds_changed and not is_allowed(next_config.bounds, self.view):
            view = resolve_view(next_config.bounds, next_config.view)
            _logger.debug(
                "View %s not allowed by %s, using %s",
                self.view,
                next_config.bounds,
                view,
            )

        reference: datetime | None = None
        if bounds_changed or value_changed:
            reference = self._reference(next_config)

        self._navigator.reset(next_config.bounds, view, reference)
        self._config = next_config
        if value_changed:
            self._value = next_config.value

    def update(self, **changes: Any) -> None:
        """Apply changed options through on_configure().

        Example:
            ```python
            cal.update(value=datetime(2024, 2, 10), locale="de-DE")
            ```
        """
        next_config = CalendarConfig.model_validate(
            {**self._config.model_dump(), **changes}
        )
        self.on_configure(self._config, next_config)

    def _reference(self, config: CalendarConfig) -> datetime:
        """Instant the visible window should contain for config."""
        start = value_from(config.value_type, config.value)
        return start if start is not None else self._now()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def config(self) -> CalendarConfig:
        """Configuration currently in effect."""
        return self._config

    @property
    def callbacks(self) -> CalendarCallbacks:
        """Host event handlers."""
        return self._callbacks

    @property
    def locale_context(self) -> LocaleContext:
        """Locale-dependent formatting state."""
        return self._locale

    @property
    def state(self) -> NavigationState:
        """Current view and visible window."""
        return self._navigator.state

    @property
    def view(self) -> View:
        """Currently displayed view."""
        return self._navigator.view

    @property
    def active_start_date(self) -> datetime:
        """Start of the visible period."""
        return self._navigator.active_start_date

    @property
    def views(self) -> tuple[View, ...]:
        """Permitted views, coarsest first."""
        return self._navigator.views

    @property
    def value(self) -> ExternalValue:
        """Selected value, as last configured or committed."""
        return self._value

    @property
    def value_type(self) -> Granularity:
        """Granularity of committed selections."""
        return self._config.value_type

    @property
    def normalized_value(self) -> NormalizedValue:
        """Selected value as a canonical (from, to) pair."""
        return normalize(self.value_type, self._value)

    @property
    def can_drill_down(self) -> bool:
        """True if a click drills down rather than selecting."""
        return self._navigator.can_drill_down

    @property
    def can_drill_up(self) -> bool:
        """True if the title button can zoom out."""
        return self._navigator.can_drill_up

    # =========================================================================
    # Navigation
    # =========================================================================

    def drill_down(self, target: str | date | datetime) -> bool:
        """Zoom into the period containing target; no-op at the finest view."""
        return self._navigator.drill_down(as_datetime(target))

    def drill_up(self) -> bool:
        """Zoom out one level; no-op at the coarsest view."""
        return self._navigator.drill_up()

    def jump_to_view(self, view: View) -> None:
        """Switch directly to view (the caller checks it is permitted)."""
        self._navigator.jump_to_view(view)

    def set_active_start_date(self, active_start_date: datetime) -> None:
        """Move the visible window without changing the view."""
        self._navigator.set_active_start_date(active_start_date)

    def navigate(self, direction: NavigationDirection) -> bool:
        """Follow a navigation-bar arrow.

        Args:
            direction: prev, next, prev2 or next2.

        Returns:
            True if the window moved; False when the arrow has no target.

        Raises:
            ValueError: If direction is unknown.
        """
        target_for = _NAVIGATION_TARGETS.get(direction)
        if target_for is None:
            valid = ", ".join(_NAVIGATION_TARGETS)
            raise ValueError(f"Direction must be one of: {valid}. Got: {direction}")
        target = target_for(self.view, self.active_start_date)
        if target is None:
            return False
        self.set_active_start_date(target)
        return True

    # =========================================================================
    # Selection
    # =========================================================================

    def emit_selection(self, raw_value: object) -> ExternalValue:
        """Shape a raw selection according to the configured return mode.

        The raw value is an instant or a [from, to] pair, as dates,
        datetimes or ISO strings.

        Raises:
            InvalidReturnMode: If the return mode is not recognized.
            ValueError: If the raw value is empty, half-open or has an
                unsupported shape.
        """
        value = coerce_value(raw_value)
        if value is None or (isinstance(value, tuple) and None in value):
            raise ValueError(f"A selection needs a start and an end, got {raw_value!r}")
        selection = cast("datetime | tuple[datetime, datetime]", value)
        return process_value(self._config.return_value, self.value_type, selection)

    def commit(self, value: object) -> None:
        """Store a selection and report it through on_change."""
        processed = self.emit_selection(value)
        self._value = coerce_value(value)
        _logger.debug("Selection committed: %r", processed)
        if self._callbacks.on_change is not None:
            self._callbacks.on_change(processed)

    def _click_listeners(self) -> Listeners[datetime]:
        view = self.view
        if view not in _CLICK_CALLBACKS:
            raise InvalidView(view)
        internal = self.drill_down if self.can_drill_down else self.commit
        external = getattr(self._callbacks, _CLICK_CALLBACKS[view])
        return Listeners([internal, external])

    def dispatch_cell_click(self, instant: str | date | datetime) -> None:
        """Handle a tile click in the current view.

        Drills down when a finer view is permitted, otherwise commits the
        selection. The caller's click handler for the view runs afterwards.

        Raises:
            InvalidView: If the current view cannot be displayed.
            ValueError: If instant is a malformed ISO string.
        """
        self._click_listeners()(as_datetime(instant))

    # =========================================================================
    # Collaborator Props
    # =========================================================================

    def view_props(self) -> ViewProps:
        """Props for the rendering collaborator of the current view.

        Raises:
            InvalidView: If the current view cannot be displayed.
        """
        view = self.view
        if view not in ALL_VIEWS:
            raise InvalidView(view)
        props: dict[str, Any] = {}
        if view == "month":
            props = {
                "calendar_type": self._locale.calendar_type,
                "week_start": self._locale.week_start,
                "show_week_numbers": self._config.show_week_numbers,
            }
        return ViewProps(
            view=view,
            active_start_date=self.active_start_date,
            value=self._value,
            normalized=self.normalized_value,
            value_type=self.value_type,
            on_change=self._click_listeners(),
            **props,
        )

    def navigation_props(self) -> NavigationBarProps:
        """Props for the navigation-bar collaborator.

        Raises:
            InvalidView: If the current view cannot be displayed.
        """
        view = self.view
        start = self.active_start_date
        return NavigationBarProps(
            active_start_date=start,
            view=view,
            views=self.views,
            label=self._locale.format_label(view, start),
            drill_up_enabled=self.can_drill_up,
            prev_start=previous_start(view, start),
            next_start=next_start(view, start),
            prev2_start=previous2_start(view, start),
            next2_start=next2_start(view, start),
            drill_up=self.drill_up,
            set_active_start_date=self.set_active_start_date,
            prev_label=self._config.prev_label,
            next_label=self._config.next_label,
            prev2_label=self._config.prev2_label,
            next2_label=self._config.next2_label,
        )

    def snapshot(self) -> CalendarSnapshot:
        """Summarize the calendar for display."""
        return CalendarSnapshot(
            view=self.view,
            active_start_date=self.active_start_date,
            label=self._locale.format_label(self.view, self.active_start_date),
            views=self.views,
            value_type=self.value_type,
            return_value=self._config.return_value,
            can_drill_up=self.can_drill_up,
            can_drill_down=self.can_drill_down,
            normalized=self.normalized_value,
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"Calendar(view={self.view!r}, "
            f"active_start_date={self.active_start_date.isoformat()!r})"
        )
