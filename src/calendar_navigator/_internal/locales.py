"""Per-calendar locale context.

Each Calendar owns one LocaleContext. It holds the locale tag, the
week-start convention derived from it, and the month names used to label
the navigation bar. Nothing here touches the process-wide locale, so two
calendars with different locales can live side by side.
"""

from __future__ import annotations

import locale
import logging
from collections.abc import Sequence
from datetime import datetime

from babel import Locale, UnknownLocaleError
from babel.dates import get_month_names

from calendar_navigator._internal.date_utils import period_range
from calendar_navigator._literal_types import ALL_CALENDAR_TYPES, CalendarType, View
from calendar_navigator.exceptions import InvalidView

_logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

# Regions whose weeks start on Sunday
_US_REGIONS = frozenset(
    {"US", "CA", "MX", "BR", "JP", "KR", "TW", "PH", "IN", "IL", "SA", "ZA", "AR"}
)

# Python weekday index of the first day of the week (0 = Monday)
_WEEK_START: dict[str, int] = {
    "ISO 8601": 0,
    "US": 6,
    "Arabic": 5,
    "Hebrew": 6,
}

_RANGE_SEPARATOR = " – "


def normalize_locale_tag(tag: str) -> str:
    """Convert 'en_US.UTF-8' style tags to BCP 47 'en-US'."""
    base = tag.split(".", 1)[0].split("@", 1)[0]
    parts = base.replace("_", "-").split("-")
    if len(parts) == 1:
        return parts[0].lower()
    return f"{parts[0].lower()}-{parts[1].upper()}"


def platform_locale() -> str:
    """Return the process locale as a BCP 47 tag, or DEFAULT_LOCALE."""
    tag, _encoding = locale.getlocale()
    if not tag or tag in ("C", "POSIX"):
        return DEFAULT_LOCALE
    return normalize_locale_tag(tag)


def month_names_for_locale(tag: str) -> tuple[str, ...]:
    """Return the twelve stand-alone month names for a locale, January first.

    Unknown regions fall back to their language, and unknown languages to
    DEFAULT_LOCALE.

    Example:
        ```python
        month_names_for_locale("de-DE")[5]  # 'Juni'
        month_names_for_locale("fr-FR")[0]  # 'janvier'
        ```
    """
    language = normalize_locale_tag(tag).partition("-")[0]
    for candidate in (tag, language, DEFAULT_LOCALE):
        try:
            parsed = Locale.parse(normalize_locale_tag(candidate), sep="-")
        except (ValueError, UnknownLocaleError):
            _logger.debug("No locale data for %r", candidate)
            continue
        names = get_month_names("wide", context="stand-alone", locale=parsed)
        return tuple(str(names[month]) for month in range(1, 13))
    raise ValueError(f"No locale data for {tag!r} or {DEFAULT_LOCALE!r}")


def calendar_type_for_locale(tag: str) -> CalendarType:
    """Pick the week-start convention customary for a locale.

    Example:
        ```python
        calendar_type_for_locale("en-US")  # 'US'
        calendar_type_for_locale("de-DE")  # 'ISO 8601'
        calendar_type_for_locale("he-IL")  # 'Hebrew'
        ```
    """
    language, _, region = normalize_locale_tag(tag).partition("-")
    if language == "ar":
        return "Arabic"
    if language == "he":
        return "Hebrew"
    if region in _US_REGIONS:
        return "US"
    return "ISO 8601"


class LocaleContext:
    """Locale-dependent formatting state for one calendar.

    Attributes:
        locale: BCP 47 locale tag in effect.
        calendar_type: Week-start convention in effect.
    """

    def __init__(
        self,
        locale: str | None = None,
        calendar_type: CalendarType | None = None,
        month_names: Sequence[str] | None = None,
    ) -> None:
        """Initialize the context.

        Args:
            locale: Locale tag; the platform locale when None.
            calendar_type: Explicit week-start convention; derived from the
                locale when None.
            month_names: Twelve month names, January first. Defaults to the
                locale's own names.

        Raises:
            ValueError: If calendar_type or month_names is malformed.
        """
        self.locale = normalize_locale_tag(locale) if locale else platform_locale()
        if calendar_type is not None and calendar_type not in ALL_CALENDAR_TYPES:
            raise ValueError(
                f"calendar_type must be one of: {', '.join(ALL_CALENDAR_TYPES)}. "
                f"Got: {calendar_type}"
            )
        self.calendar_type: CalendarType = calendar_type or calendar_type_for_locale(
            self.locale
        )
        names = (
            list(month_names)
            if month_names is not None
            else list(month_names_for_locale(self.locale))
        )
        if len(names) != 12:
            raise ValueError(f"month_names needs 12 entries, got {len(names)}")
        self._month_names = tuple(names)
        _logger.debug(
            "Locale context ready: locale=%s calendar_type=%s",
            self.locale,
            self.calendar_type,
        )

    @property
    def week_start(self) -> int:
        """First day of the week as a Python weekday index (0 = Monday)."""
        return _WEEK_START[self.calendar_type]

    def month_name(self, month: int) -> str:
        """Return the name of a month, 1-12."""
        return self._month_names[month - 1]

    def format_label(self, view: View, active_start_date: datetime) -> str:
        """Return the navigation-bar title of the visible period.

        Example:
            ```python
            ctx = LocaleContext("en-US")
            ctx.format_label("century", datetime(2001, 1, 1))  # '2001 – 2100'
            ctx.format_label("month", datetime(2023, 6, 1))    # 'June 2023'
            ```

        Raises:
            InvalidView: If view is not a displayable view.
        """
        if view == "month":
            month = self.month_name(active_start_date.month)
            return f"{month} {active_start_date.year}"
        if view == "year":
            return str(active_start_date.year)
        if view in ("century", "decade"):
            start, end = period_range(view, active_start_date)
            return f"{start.year}{_RANGE_SEPARATOR}{end.year}"
        raise InvalidView(view)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"LocaleContext(locale={self.locale!r}, "
            f"calendar_type={self.calendar_type!r})"
        )
