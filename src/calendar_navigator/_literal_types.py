"""Shared Literal type aliases and orderings for calendar granularities.

These types are exported from the public API and can be used by
library consumers for their own type hints.

Example:
    from calendar_navigator import Calendar, CalendarConfig, View

    def open_at(view: View) -> Calendar:
        return Calendar(CalendarConfig(view=view))
"""

from __future__ import annotations

from typing import Literal

# Every period size the core understands, coarsest first
Granularity = Literal["century", "decade", "year", "month", "day"]

# Granularities that can be displayed; "day" is only ever a value type
View = Literal["century", "decade", "year", "month"]

# How a committed selection is reported back to the caller
ReturnMode = Literal["start", "end", "range"]

# Week-start conventions understood by the month collaborator
CalendarType = Literal["ISO 8601", "US", "Arabic", "Hebrew"]

# Navigation-bar arrow buttons
NavigationDirection = Literal["prev", "next", "prev2", "next2"]

ALL_GRANULARITIES: tuple[Granularity, ...] = (
    "century",
    "decade",
    "year",
    "month",
    "day",
)
ALL_VIEWS: tuple[View, ...] = ("century", "decade", "year", "month")
ALL_RETURN_MODES: tuple[ReturnMode, ...] = ("start", "end", "range")
ALL_CALENDAR_TYPES: tuple[CalendarType, ...] = ("ISO 8601", "US", "Arabic", "Hebrew")

__all__ = [
    "ALL_CALENDAR_TYPES",
    "ALL_GRANULARITIES",
    "ALL_RETURN_MODES",
    "ALL_VIEWS",
    "CalendarType",
    "Granularity",
    "NavigationDirection",
    "ReturnMode",
    "View",
]
