"""Internal implementation modules. Not part of the public API."""

from calendar_navigator._internal.config import CalendarConfig, ConfigManager
from calendar_navigator._internal.locales import LocaleContext
from calendar_navigator._internal.navigator import Navigator

__all__ = ["CalendarConfig", "ConfigManager", "LocaleContext", "Navigator"]
