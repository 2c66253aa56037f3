"""Core domain objects: frequency tags, moments, durations, ranges, literals."""

from tsfreq.core.errors import (
    ConversionNotImplementedError,
    IllegalComparisonError,
    IllegalOperationError,
    InvalidArgumentError,
    MixedFrequencyError,
    TimeSeriesFrequencyError,
    WeekendBoundaryError,
)
from tsfreq.core.frequencies import (
    BusinessDaily,
    Daily,
    Frequency,
    Monthly,
    Quarterly,
    Unit,
    Weekly,
    Yearly,
    all_frequencies,
    is_calendar,
    is_unit,
    is_yp,
)
from tsfreq.core.moments import (
    MIT,
    Duration,
    make_moment,
    make_moment_from_date,
    to_date,
    year_period,
)
from tsfreq.core.ranges import MITRange, StepRange, moment_range
from tsfreq.core.series import TimeSeries

__all__ = [
    "BusinessDaily",
    "ConversionNotImplementedError",
    "Daily",
    "Duration",
    "Frequency",
    "IllegalComparisonError",
    "IllegalOperationError",
    "InvalidArgumentError",
    "MIT",
    "MITRange",
    "MixedFrequencyError",
    "Monthly",
    "Quarterly",
    "StepRange",
    "TimeSeries",
    "TimeSeriesFrequencyError",
    "Unit",
    "WeekendBoundaryError",
    "Weekly",
    "Yearly",
    "all_frequencies",
    "is_calendar",
    "is_unit",
    "is_yp",
    "make_moment",
    "make_moment_from_date",
    "moment_range",
    "to_date",
    "year_period",
]
