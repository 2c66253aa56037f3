"""Typed calendar arithmetic and frequency conversion."""

from tsfreq.config import (
    ConversionOptions,
    clear_holidays_map,
    get_option,
    make_holidays_map,
    reset_options,
    set_holidays_map,
    set_option,
)
from tsfreq.conversion import convert_moment, convert_range
from tsfreq.core import *  # noqa: F401,F403
from tsfreq.core import __all__ as _core_all
from tsfreq.core.literals import (
    M1, M2, M3, M4, M5, M6, M7, M8, M9, M10, M11, M12,
    Q1, Q2, Q3, Q4,
    U,
    Y,
    bdaily,
    daily,
    mm,
    parse_moment,
    qq,
    weekly,
    yy,
)
from tsfreq.services import convert_series, fconvert

__all__ = list(_core_all) + [
    "ConversionOptions",
    "M1", "M2", "M3", "M4", "M5", "M6", "M7", "M8", "M9", "M10", "M11", "M12",
    "Q1", "Q2", "Q3", "Q4",
    "U",
    "Y",
    "bdaily",
    "clear_holidays_map",
    "convert_moment",
    "convert_range",
    "convert_series",
    "daily",
    "fconvert",
    "get_option",
    "make_holidays_map",
    "mm",
    "parse_moment",
    "qq",
    "reset_options",
    "set_holidays_map",
    "set_option",
    "weekly",
    "yy",
]
