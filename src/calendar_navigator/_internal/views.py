"""View resolution against configured detail bounds.

The permitted views are the contiguous slice of century, decade, year,
month between min_detail and max_detail. A requested view outside that
slice is clamped to the most detailed permitted view, never to the
nearest one.
"""

from __future__ import annotations

from calendar_navigator._literal_types import (
    ALL_GRANULARITIES,
    ALL_VIEWS,
    Granularity,
    View,
)
from calendar_navigator.exceptions import InvalidGranularity
from calendar_navigator.types import DetailBounds


def allowed_views(bounds: DetailBounds) -> tuple[View, ...]:
    """Return the permitted views, coarsest first.

    Example:
        ```python
        allowed_views(DetailBounds("decade", "year"))  # ('decade', 'year')
        ```
    """
    first = ALL_VIEWS.index(bounds.min_detail)
    last = ALL_VIEWS.index(bounds.max_detail)
    return ALL_VIEWS[first : last + 1]


def is_allowed(bounds: DetailBounds, view: object) -> bool:
    """Return True if view is displayable under bounds."""
    return view in allowed_views(bounds)


def resolve_view(bounds: DetailBounds, requested: object) -> View:
    """Return requested if permitted, else the most detailed permitted view.

    Unknown tokens are clamped the same way; a bad requested view usually
    comes from runtime reconfiguration and is not an error.

    Example:
        ```python
        bounds = DetailBounds("decade", "year")
        resolve_view(bounds, "month")   # 'year'
        resolve_view(bounds, "decade")  # 'decade'
        ```
    """
    views = allowed_views(bounds)
    for view in views:
        if view == requested:
            return view
    return views[-1]


def can_drill_down(bounds: DetailBounds, view: object) -> bool:
    """True if a finer permitted view exists below view."""
    views = allowed_views(bounds)
    return view in views and view != views[-1]


def can_drill_up(bounds: DetailBounds, view: object) -> bool:
    """True if a coarser permitted view exists above view."""
    views = allowed_views(bounds)
    return view in views and view != views[0]


def value_type_for(max_detail: str) -> Granularity:
    """Return the granularity one level finer than max_detail.

    Raises:
        InvalidGranularity: If max_detail is not a view token.
    """
    if max_detail not in ALL_VIEWS:
        raise InvalidGranularity(max_detail, ALL_VIEWS)
    return ALL_GRANULARITIES[ALL_VIEWS.index(max_detail) + 1]
