"""Conversion options, defaults and business-day holiday masks."""

from tsfreq.config.holidays import (
    clear_holidays_map,
    is_business_day,
    make_holidays_map,
    set_holidays_map,
)
from tsfreq.config.options import (
    ConversionOptions,
    get_option,
    get_options,
    options_context,
    reset_options,
    resolve_options,
    set_option,
)

__all__ = [
    "ConversionOptions",
    "clear_holidays_map",
    "get_option",
    "get_options",
    "is_business_day",
    "make_holidays_map",
    "options_context",
    "reset_options",
    "resolve_options",
    "set_holidays_map",
    "set_option",
]
