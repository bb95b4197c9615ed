"""
calendar_navigator - navigation core for an embeddable date-range picker.

Decides which granularity (century, decade, year, month) a picker shows,
which period is visible, and how drilling, panning, selection and external
reconfiguration interact. Rendering is left to the host.
"""

from calendar_navigator._internal.config import CalendarConfig
from calendar_navigator._internal.date_utils import period_range, period_start
from calendar_navigator._internal.listeners import Listeners
from calendar_navigator._internal.locales import LocaleContext
from calendar_navigator._internal.values import normalize, to_array
from calendar_navigator._internal.views import (
    allowed_views,
    can_drill_down,
    can_drill_up,
    is_allowed,
    resolve_view,
)
from calendar_navigator._literal_types import (
    CalendarType,
    Granularity,
    NavigationDirection,
    ReturnMode,
    View,
)
from calendar_navigator.calendar import Calendar
from calendar_navigator.exceptions import (
    CalendarNavigatorError,
    ConfigError,
    InvalidDetailBounds,
    InvalidGranularity,
    InvalidReturnMode,
    InvalidView,
)
from calendar_navigator.types import (
    CalendarCallbacks,
    CalendarSnapshot,
    DetailBounds,
    ExternalValue,
    NavigationBarProps,
    NavigationState,
    NormalizedValue,
    PeriodInfo,
    ViewProps,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Calendar",
    "CalendarConfig",
    "CalendarCallbacks",
    "LocaleContext",
    "Listeners",
    # Type aliases
    "CalendarType",
    "ExternalValue",
    "Granularity",
    "NavigationDirection",
    "ReturnMode",
    "View",
    # Exceptions
    "CalendarNavigatorError",
    "ConfigError",
    "InvalidDetailBounds",
    "InvalidGranularity",
    "InvalidReturnMode",
    "InvalidView",
    # State and prop types
    "CalendarSnapshot",
    "DetailBounds",
    "NavigationBarProps",
    "NavigationState",
    "NormalizedValue",
    "PeriodInfo",
    "ViewProps",
    # Functions
    "allowed_views",
    "can_drill_down",
    "can_drill_up",
    "is_allowed",
    "normalize",
    "period_range",
    "period_start",
    "resolve_view",
    "to_array",
]
