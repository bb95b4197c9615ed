"""Normalization of external values.

An external value can be absent, a single instant, or a (from, to) pair.
Everything downstream works with the canonical (from, to) pair produced
here, expressed at the value type's resolution: a single instant becomes
its own enclosing period rather than a zero-width range.
"""

from __future__ import annotations

from datetime import date, datetime

from calendar_navigator._internal.date_utils import period_range
from calendar_navigator._literal_types import Granularity, ReturnMode
from calendar_navigator.exceptions import InvalidReturnMode
from calendar_navigator.types import ExternalValue, NormalizedValue


def as_datetime(value: str | date | datetime) -> datetime:
    """Promote a date or ISO string to a datetime; datetimes pass through.

    Raises:
        ValueError: If a string is not an ISO 8601 date or datetime.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return datetime(value.year, value.month, value.day)


def coerce_value(value: object) -> ExternalValue:
    """Promote dates and ISO strings inside an external value to datetimes.

    Lists are accepted as pairs and returned as tuples.

    Raises:
        ValueError: If the value has an unsupported shape or type.
    """
    if value is None:
        return None
    if isinstance(value, list | tuple):
        if len(value) != 2:
            raise ValueError(f"A value pair needs exactly 2 items, got {len(value)}")
        first, second = value
        return (
            None if first is None else as_datetime(first),
            None if second is None else as_datetime(second),
        )
    if isinstance(value, str | date):
        return as_datetime(value)
    raise ValueError(f"Unsupported value type: {type(value).__name__}")


def value_from(value_type: Granularity, value: ExternalValue) -> datetime | None:
    """Return the start of the first period covered by value."""
    raw = value[0] if isinstance(value, list | tuple) else value
    if raw is None:
        return None
    return period_range(value_type, raw)[0]


def value_to(value_type: Granularity, value: ExternalValue) -> datetime | None:
    """Return the end of the last period covered by value."""
    raw = value[1] if isinstance(value, list | tuple) else value
    if raw is None:
        return None
    return period_range(value_type, raw)[1]


def normalize(value_type: Granularity, value: ExternalValue) -> NormalizedValue:
    """Collapse an external value into a canonical (from, to) pair.

    Args:
        value_type: Granularity at which the value is expressed.
        value: None, a single instant, or a (from, to) pair.

    Returns:
        NormalizedValue; both ends are None if value is absent.

    Example:
        ```python
        normalize("day", datetime(2023, 6, 15, 9))
        # NormalizedValue(value_from=datetime(2023, 6, 15, 0, 0),
        #                 value_to=datetime(2023, 6, 15, 23, 59, 59, 999999))
        ```
    """
    return NormalizedValue(
        value_from=value_from(value_type, value),
        value_to=value_to(value_type, value),
    )


def to_array(
    value_type: Granularity,
    value: datetime | tuple[datetime, datetime] | list[datetime],
) -> tuple[datetime, datetime]:
    """Return a pair as a tuple, or the enclosing period of a single instant.

    Lists are accepted as pairs, matching coerce_value().
    """
    if isinstance(value, tuple):
        return value
    if isinstance(value, list):
        start, end = value
        return start, end
    return period_range(value_type, value)


def process_value(
    return_mode: ReturnMode,
    value_type: Granularity,
    value: datetime | tuple[datetime, datetime] | list[datetime],
) -> ExternalValue:
    """Shape a committed selection for the caller.

    Args:
        return_mode: "start" for the period start, "end" for the period end,
            "range" for the (from, to) pair.
        value_type: Granularity at which the value is expressed.
        value: The raw selection emitted by a rendering collaborator.

    Raises:
        InvalidReturnMode: If return_mode is not recognized.
    """
    if return_mode == "start":
        return value_from(value_type, value)
    if return_mode == "end":
        return value_to(value_type, value)
    if return_mode == "range":
        return to_array(value_type, value)
    raise InvalidReturnMode(return_mode)
