"""Date utilities for calendar period arithmetic.

Provides functions for flooring an instant to the start of its enclosing
century, decade, year, month or day, for computing the inclusive
[start, end] boundaries of that period, and for stepping between adjacent
periods (the navigation-bar arrows).

Centuries and decades follow the calendar convention used by the widget:
a century starts on a year ending in 01 (2001-2100) and a decade on a year
ending in 1 (2021-2030).
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from calendar_navigator._literal_types import ALL_GRANULARITIES, Granularity, View
from calendar_navigator.exceptions import InvalidGranularity

# Smallest representable step; a period ends one unit before the next begins
RESOLUTION = timedelta(microseconds=1)

# Length of one period in years, for the year-based granularities
_YEARS_PER_PERIOD: dict[str, int] = {"century": 100, "decade": 10, "year": 1}

# Step sizes for the double-arrow navigation buttons
_DOUBLE_STEP: dict[str, relativedelta] = {
    "decade": relativedelta(years=100),
    "year": relativedelta(years=10),
    "month": relativedelta(years=1),
}


def _check_granularity(granularity: str) -> None:
    if granularity not in ALL_GRANULARITIES:
        raise InvalidGranularity(granularity, ALL_GRANULARITIES)


def _first_year(granularity: str, year: int) -> int:
    """Return the first year of the century/decade/year containing year."""
    size = _YEARS_PER_PERIOD[granularity]
    return ((year - 1) // size) * size + 1


def period_start(granularity: Granularity, instant: datetime) -> datetime:
    """Floor an instant to the start of its enclosing period.

    Args:
        granularity: One of century, decade, year, month, day.
        instant: Point in time to floor. Time zone info is preserved.

    Returns:
        Midnight on the first day of the enclosing period.

    Raises:
        InvalidGranularity: If granularity is not a recognized token.

    Example:
        ```python
        period_start("month", datetime(2023, 6, 15, 13, 45))
        # datetime(2023, 6, 1, 0, 0)
        period_start("decade", datetime(2023, 6, 15))
        # datetime(2021, 1, 1, 0, 0)
        ```
    """
    _check_granularity(granularity)
    midnight = instant.replace(hour=0, minute=0, second=0, microsecond=0)
    if granularity == "day":
        return midnight
    if granularity == "month":
        return midnight.replace(day=1)
    first_year = _first_year(granularity, instant.year)
    return midnight.replace(year=first_year, month=1, day=1)


def period_range(
    granularity: Granularity, instant: datetime
) -> tuple[datetime, datetime]:
    """Return the inclusive start and end of the period containing instant.

    The end is the last representable instant strictly before the start of
    the next period. Periods running past year 9999 end at datetime.max.

    Args:
        granularity: One of century, decade, year, month, day.
        instant: Point in time inside the period.

    Returns:
        Tuple of (start, end); start always equals period_start().

    Raises:
        InvalidGranularity: If granularity is not a recognized token.

    Example:
        ```python
        period_range("day", datetime(2023, 6, 15, 8, 30))
        # (datetime(2023, 6, 15, 0, 0),
        #  datetime(2023, 6, 15, 23, 59, 59, 999999))
        ```
    """
    start = period_start(granularity, instant)
    following = shift_period(granularity, start, 1)
    if following is None:
        end = datetime.max.replace(tzinfo=start.tzinfo)
    else:
        end = following - RESOLUTION
    return start, end


def period_end(granularity: Granularity, instant: datetime) -> datetime:
    """Return the inclusive end of the period containing instant."""
    return period_range(granularity, instant)[1]


def shift_period(
    granularity: Granularity, instant: datetime, steps: int
) -> datetime | None:
    """Return the start of the period `steps` periods away from instant.

    Args:
        granularity: One of century, decade, year, month, day.
        instant: Point in time inside the reference period.
        steps: Number of periods to move; negative moves backwards.

    Returns:
        Start of the target period, or None if it falls outside the
        representable years (1-9999).

    Raises:
        InvalidGranularity: If granularity is not a recognized token.
    """
    start = period_start(granularity, instant)
    if granularity == "day":
        delta = relativedelta(days=steps)
    elif granularity == "month":
        delta = relativedelta(months=steps)
    else:
        delta = relativedelta(years=steps * _YEARS_PER_PERIOD[granularity])
    try:
        return start + delta
    except (OverflowError, ValueError):
        return None


def previous_start(view: View, instant: datetime) -> datetime | None:
    """Target of the single back arrow: the previous period of the view."""
    return shift_period(view, instant, -1)


def next_start(view: View, instant: datetime) -> datetime | None:
    """Target of the single forward arrow: the next period of the view."""
    return shift_period(view, instant, 1)


def _double_shift(view: View, instant: datetime, sign: int) -> datetime | None:
    _check_granularity(view)
    step = _DOUBLE_STEP.get(view)
    if step is None:
        # century view has no double arrows
        return None
    start = period_start(view, instant)
    try:
        shifted = start + step if sign > 0 else start - step
    except (OverflowError, ValueError):
        return None
    return period_start(view, shifted)


def previous2_start(view: View, instant: datetime) -> datetime | None:
    """Target of the double back arrow.

    Moves by one period of the next coarser unit: a century from the decade
    view, a decade from the year view and a year from the month view.
    """
    return _double_shift(view, instant, -1)


def next2_start(view: View, instant: datetime) -> datetime | None:
    """Target of the double forward arrow; see previous2_start()."""
    return _double_shift(view, instant, 1)
