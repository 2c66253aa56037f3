from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from numbers import Integral
from typing import TYPE_CHECKING, Optional

from tsfreq.core.calendar import (
    DateLike,
    date_of,
    day_number,
    day_of_year,
    days_in_year,
    first_day_of_year,
    format_day,
    iso_week,
    year_of,
)
from tsfreq.core.errors import (
    ConversionNotImplementedError,
    IllegalComparisonError,
    IllegalOperationError,
    InvalidArgumentError,
    MixedFrequencyError,
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
    YPFrequency,
)
from tsfreq.core import periods

if TYPE_CHECKING:
    from tsfreq.core.ranges import MITRange


def _check_freq(freq: Frequency) -> None:
    if not isinstance(freq, Frequency) or type(freq) in (Frequency, YPFrequency):
        raise TypeError(f"Expected a concrete Frequency, got {freq!r}")


def _check_ordinal(value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError("value", value, ["integer ordinal"])
    return int(value)


# ============================================================
# Moment in time
# ============================================================
@dataclass(frozen=True, eq=False)
class MIT:
    """
    Moment in time: an integer ordinal tagged with a frequency.

    Arithmetic:
      MIT - MIT -> Duration (same frequency only)
      MIT +/- Duration -> MIT
      MIT +/- int -> MIT
      MIT + MIT -> IllegalOperationError
    """

    freq: Frequency
    value: int

    def __post_init__(self) -> None:
        _check_freq(self.freq)
        object.__setattr__(self, "value", _check_ordinal(self.value))

    # ---------- arithmetic ----------
    def __add__(self, other):
        if isinstance(other, MIT):
            raise IllegalOperationError("+", self, other)
        if isinstance(other, Duration):
            if other.freq != self.freq:
                raise MixedFrequencyError(self.freq, other.freq)
            return MIT(self.freq, self.value + other.value)
        if isinstance(other, Integral):
            return MIT(self.freq, self.value + int(other))
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Integral):
            return MIT(self.freq, int(other) + self.value)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, MIT):
            if other.freq != self.freq:
                raise MixedFrequencyError(self.freq, other.freq)
            return Duration(self.freq, self.value - other.value)
        if isinstance(other, Duration):
            if other.freq != self.freq:
                raise MixedFrequencyError(self.freq, other.freq)
            return MIT(self.freq, self.value - other.value)
        if isinstance(other, Integral):
            return MIT(self.freq, self.value - int(other))
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Integral):
            raise IllegalOperationError("-", other, self)
        return NotImplemented

    # ---------- comparison ----------
    def __eq__(self, other) -> bool:
        if isinstance(other, MIT):
            return self.freq == other.freq and self.value == other.value
        if isinstance(other, Duration):
            return False
        if isinstance(other, Integral):
            return self.value == int(other)
        return NotImplemented

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        return hash((MIT, self.freq, self.value))

    def _ordinals(self, other) -> tuple[int, int]:
        if isinstance(other, MIT):
            if other.freq != self.freq:
                raise MixedFrequencyError(self.freq, other.freq)
            return self.value, other.value
        if isinstance(other, Duration):
            raise IllegalComparisonError(self, other)
        if isinstance(other, Integral):
            return self.value, int(other)
        raise TypeError(f"Cannot compare MIT with {type(other).__name__}")

    def __lt__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a < b

    def __le__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a <= b

    def __gt__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a > b

    def __ge__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a >= b

    # ---------- conversions ----------
    def __int__(self) -> int:
        return self.value

    def __float__(self) -> float:
        if isinstance(self.freq, YPFrequency):
            year, period = year_period(self)
            return year + (period - 1) / self.freq.periods_per_year
        return float(self.value)

    def __str__(self) -> str:
        return format_moment(self)

    @property
    def year(self) -> int:
        return year_period(self)[0]

    @property
    def period(self) -> int:
        return year_period(self)[1]

    def to(self, last: "MIT") -> "MITRange":
        from tsfreq.core.ranges import MITRange

        return MITRange(self, last)


# ============================================================
# Duration
# ============================================================
@dataclass(frozen=True, eq=False)
class Duration:
    """Distance between two moments of the same frequency."""

    freq: Frequency
    value: int

    def __post_init__(self) -> None:
        _check_freq(self.freq)
        object.__setattr__(self, "value", _check_ordinal(self.value))

    def _other_value(self, other) -> Optional[int]:
        if isinstance(other, Duration):
            if other.freq != self.freq:
                raise MixedFrequencyError(self.freq, other.freq)
            return other.value
        if isinstance(other, Integral):
            return int(other)
        return None

    def __add__(self, other):
        if isinstance(other, MIT):
            return other + self
        v = self._other_value(other)
        if v is None:
            return NotImplemented
        return Duration(self.freq, self.value + v)

    def __radd__(self, other):
        if isinstance(other, Integral):
            return Duration(self.freq, int(other) + self.value)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, MIT):
            raise IllegalOperationError("-", self, other)
        v = self._other_value(other)
        if v is None:
            return NotImplemented
        return Duration(self.freq, self.value - v)

    def __rsub__(self, other):
        if isinstance(other, Integral):
            return Duration(self.freq, int(other) - self.value)
        return NotImplemented

    def __neg__(self) -> "Duration":
        return Duration(self.freq, -self.value)

    def __floordiv__(self, other):
        v = self._other_value(other)
        if v is None:
            return NotImplemented
        return Duration(self.freq, self.value // v)

    def __mod__(self, other):
        v = self._other_value(other)
        if v is None:
            return NotImplemented
        return Duration(self.freq, self.value % v)

    def __eq__(self, other) -> bool:
        if isinstance(other, Duration):
            return self.freq == other.freq and self.value == other.value
        if isinstance(other, MIT):
            return False
        if isinstance(other, Integral):
            return self.value == int(other)
        return NotImplemented

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        return hash((Duration, self.freq, self.value))

    def _ordinals(self, other) -> tuple[int, int]:
        if isinstance(other, Duration):
            if other.freq != self.freq:
                raise MixedFrequencyError(self.freq, other.freq)
            return self.value, other.value
        if isinstance(other, MIT):
            raise IllegalComparisonError(self, other)
        if isinstance(other, Integral):
            return self.value, int(other)
        raise TypeError(f"Cannot compare Duration with {type(other).__name__}")

    def __lt__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a < b

    def __le__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a <= b

    def __gt__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a > b

    def __ge__(self, other) -> bool:
        a, b = self._ordinals(other)
        return a >= b

    def __int__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value}{self.freq.letter}"


# ============================================================
# Construction / decomposition
# ============================================================
def make_moment(freq: Frequency, year: int, period: Optional[int] = None) -> MIT:
    """
    Build a moment from (year, period).

      YP:            period in 1..periods_per_year
      Weekly:        period-th week from the one containing January 1st
      Daily:         day of year
      BusinessDaily: period-th business day from the first one of the year
      Unit:          make_moment(Unit(), n)
    """
    _check_freq(freq)
    if isinstance(freq, Unit):
        if period is not None:
            raise InvalidArgumentError("period", period, [None])
        return MIT(freq, year)

    if period is None:
        if isinstance(freq, Yearly):
            period = 1
        else:
            raise InvalidArgumentError("period", period, ["int"])

    year, period = int(year), int(period)
    if isinstance(freq, YPFrequency):
        n = freq.periods_per_year
        if not 1 <= period <= n:
            raise InvalidArgumentError("period", period, range(1, n + 1))
        return MIT(freq, n * year + period - 1)

    jan1 = first_day_of_year(year)
    if isinstance(freq, Weekly):
        return MIT(freq, periods.day_to_weekly(jan1, freq.end_day) + period - 1)
    if isinstance(freq, Daily):
        if not 1 <= period <= days_in_year(year):
            raise InvalidArgumentError("period", period, range(1, days_in_year(year) + 1))
        return MIT(freq, jan1 + period - 1)
    if isinstance(freq, BusinessDaily):
        return MIT(freq, periods.day_to_bdaily(jan1, bias_previous=False) + period - 1)
    raise ConversionNotImplementedError(freq, None, "Cannot build from (year, period).")


def make_moment_from_date(freq: Frequency, value: DateLike, bias_previous: bool = True) -> MIT:
    """
    Moment of `freq` containing a calendar date. Weekend dates for
    BusinessDaily land on Friday (bias_previous) or Monday.
    """
    _check_freq(freq)
    if isinstance(freq, Unit):
        raise ConversionNotImplementedError(freq, None, "Unit moments have no date.")
    return MIT(freq, periods.containing(freq, day_number(value), bias_previous))


def year_period(m: MIT) -> tuple[int, int]:
    """
    Exact inverse of make_moment. For YP frequencies the period is always
    in [1, periods_per_year], also for ordinals at or below zero.
    """
    freq = m.freq
    if isinstance(freq, YPFrequency):
        year, rem = divmod(m.value, freq.periods_per_year)
        return year, rem + 1
    if isinstance(freq, Weekly):
        end = periods.last_day(freq, m.value)
        return year_of(end), -(-day_of_year(end) // 7)
    if isinstance(freq, Daily):
        return year_of(m.value), day_of_year(m.value)
    if isinstance(freq, BusinessDaily):
        day = periods.bdaily_to_day(m.value)
        year = year_of(day)
        first = periods.day_to_bdaily(first_day_of_year(year), bias_previous=False)
        return year, m.value - first + 1
    raise ConversionNotImplementedError(freq, None, "Unit moments have no year or period.")


def boundary_day(m: MIT, values_base: str = "end") -> int:
    return periods.boundary_day(m.freq, m.value, values_base)


def to_date(m: MIT, values_base: str = "end") -> date:
    """
    First (values_base='begin') or last (values_base='end') calendar date of
    the moment's period.
    """
    return date_of(boundary_day(m, values_base))


def format_moment(m: MIT) -> str:
    freq = m.freq
    if isinstance(freq, Unit):
        return f"{m.value}U"
    if isinstance(freq, Yearly):
        return f"{year_period(m)[0]}Y"
    if isinstance(freq, (Quarterly, Monthly)):
        year, period = year_period(m)
        return f"{year}{freq.letter}{period}"
    if isinstance(freq, Weekly):
        iso_year, week = iso_week(periods.last_day(freq, m.value))
        return f"{iso_year}W{week}"
    return format_day(periods.first_day(freq, m.value))
