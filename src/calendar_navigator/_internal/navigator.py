"""Navigation state machine.

The Navigator owns the only mutable state of a calendar: the displayed view
and the start of the visible period. Its states are the permitted views for
the current detail bounds, and it changes state only through the four
transitions below plus the reset used by reconciliation.

Invariant: after every transition, active_start_date is the canonical start
of a `view` period.
"""

from __future__ import annotations

import logging
from datetime import datetime

from calendar_navigator._internal.date_utils import period_start
from calendar_navigator._internal.views import (
    allowed_views,
    can_drill_down,
    can_drill_up,
    resolve_view,
)
from calendar_navigator._literal_types import ALL_GRANULARITIES, View
from calendar_navigator.exceptions import InvalidView
from calendar_navigator.types import DetailBounds, NavigationState

_logger = logging.getLogger(__name__)


class Navigator:
    """Drill-down / drill-up state machine over the permitted views.

    Example:
        ```python
        nav = Navigator(
            DetailBounds("year", "month"),
            requested_view="month",
            reference=datetime(2023, 6, 15),
        )
        nav.state        # NavigationState(view='month', 2023-06-01)
        nav.drill_up()   # True
        nav.state        # NavigationState(view='year', 2023-01-01)
        ```
    """

    def __init__(
        self,
        bounds: DetailBounds,
        requested_view: object,
        reference: datetime,
    ) -> None:
        """Initialize the navigator.

        Args:
            bounds: Permitted view window.
            requested_view: Initially requested view; clamped to the most
                detailed permitted view if outside bounds.
            reference: Instant the initial visible period must contain.
        """
        self._bounds = bounds
        view = resolve_view(bounds, requested_view)
        self._state = NavigationState(view, period_start(view, reference))
        _logger.debug("Navigator initialized at %s", self._state)

    @property
    def bounds(self) -> DetailBounds:
        """Permitted view window."""
        return self._bounds

    @property
    def state(self) -> NavigationState:
        """Current immutable state."""
        return self._state

    @property
    def view(self) -> View:
        """Currently displayed view."""
        return self._state.view

    @property
    def active_start_date(self) -> datetime:
        """Start of the visible period."""
        return self._state.active_start_date

    @property
    def views(self) -> tuple[View, ...]:
        """Permitted views, coarsest first."""
        return allowed_views(self._bounds)

    @property
    def can_drill_down(self) -> bool:
        """True if a finer permitted view exists."""
        return can_drill_down(self._bounds, self.view)

    @property
    def can_drill_up(self) -> bool:
        """True if a coarser permitted view exists."""
        return can_drill_up(self._bounds, self.view)

    def _transition(self, view: View, active_start_date: datetime) -> None:
        previous = self._state
        self._state = NavigationState(view, active_start_date)
        _logger.debug("Transition %s -> %s", previous, self._state)

    def drill_down(self, target: datetime) -> bool:
        """Zoom into the next finer view around target.

        Silently ignored at the finest permitted view.

        Args:
            target: Instant inside the period to open.

        Returns:
            True if the view changed.
        """
        if not self.can_drill_down:
            _logger.debug("drill_down ignored at view %s", self.view)
            return False
        views = self.views
        view = views[views.index(self.view) + 1]
        self._transition(view, period_start(view, target))
        return True

    def drill_up(self) -> bool:
        """Zoom out to the next coarser view.

        The new window is derived from the current window, not from the
        selected value, so the user's pan position survives zooming out.
        Silently ignored at the coarsest permitted view.

        Returns:
            True if the view changed.
        """
        if not self.can_drill_up:
            _logger.debug("drill_up ignored at view %s", self.view)
            return False
        views = self.views
        view = views[views.index(self.view) - 1]
        self._transition(view, period_start(view, self.active_start_date))
        return True

    def jump_to_view(self, view: View) -> None:
        """Switch directly to view, keeping the current window's anchor.

        The caller is responsible for checking the view is permitted.

        Raises:
            InvalidView: If view is not a granularity token.
        """
        if view not in ALL_GRANULARITIES:
            raise InvalidView(view, ALL_GRANULARITIES)
        self._transition(view, period_start(view, self.active_start_date))

    def set_active_start_date(self, active_start_date: datetime) -> None:
        """Move the visible window without changing the view."""
        self._transition(self.view, active_start_date)

    def reset(
        self,
        bounds: DetailBounds,
        view: View | None = None,
        reference: datetime | None = None,
    ) -> None:
        """Adopt new bounds and optionally a new view and window.

        Args:
            bounds: New permitted view window.
            view: New view, or None to keep the current one.
            reference: Instant the window must contain, or None to keep the
                current window.
        """
        self._bounds = bounds
        new_view = self.view if view is None else view
        if reference is not None:
            active_start_date = period_start(new_view, reference)
        elif new_view != self.view:
            active_start_date = period_start(new_view, self.active_start_date)
        else:
            active_start_date = self.active_start_date
        if (new_view, active_start_date) != (self.view, self.active_start_date):
            self._transition(new_view, active_start_date)
