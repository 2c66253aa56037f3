from __future__ import annotations

import numpy as np

from tsfreq.core.calendar import first_day_of_month, iso_weekday, month_index
from tsfreq.core.errors import ConversionNotImplementedError
from tsfreq.core.frequencies import (
    BusinessDaily,
    Daily,
    Frequency,
    Weekly,
    YPFrequency,
)


# ============================================================
# Period geometry: ordinal <-> day number (Rata Die)
# ============================================================
# Every function accepts a scalar or an array of ordinals/days and
# returns the same shape.


def _prepare(x) -> tuple[np.ndarray, bool]:
    arr = np.asarray(x, dtype=np.int64)
    return arr, arr.ndim == 0


def _finish(arr: np.ndarray, scalar: bool):
    return int(arr) if scalar else arr


def _no_calendar(freq: Frequency) -> ConversionNotImplementedError:
    return ConversionNotImplementedError(freq, None, "Frequency has no calendar dates.")


def start_month(freq: YPFrequency, ordinals):
    return np.asarray(ordinals, dtype=np.int64) * freq.months_per_period + freq.month_offset


def end_month(freq: YPFrequency, ordinals):
    return start_month(freq, ordinals) + freq.months_per_period - 1


def month_period(freq: YPFrequency, months):
    """
    YP period containing a month index.
    """
    return np.floor_divide(np.asarray(months, dtype=np.int64) - freq.month_offset, freq.months_per_period)


def bdaily_to_day(ordinals):
    n, scalar = _prepare(ordinals)
    return _finish(n + 2 * np.floor_divide(n - 1, 5), scalar)


def day_to_bdaily(days, bias_previous: bool = True):
    """
    Weekend days land on the preceding Friday (bias_previous) or the
    following Monday.
    """
    d, scalar = _prepare(days)
    weeks, rem = np.divmod(d, 7)
    if bias_previous:
        adjust = (rem == 6).astype(np.int64)   # Saturday
    else:
        adjust = -(rem == 0).astype(np.int64)  # Sunday
    return _finish(d - 2 * weeks - adjust, scalar)


def day_to_weekly(days, end_day: int = 7):
    d, scalar = _prepare(days)
    ceil_week = -np.floor_divide(-d, 7)
    correction = np.clip(iso_weekday(d) - end_day, 0, 1)
    return _finish(ceil_week + correction, scalar)


def first_day(freq: Frequency, ordinals):
    """
    First calendar day of the period(s).
    """
    n, scalar = _prepare(ordinals)
    if isinstance(freq, YPFrequency):
        out = first_day_of_month(start_month(freq, n))
    elif isinstance(freq, Weekly):
        out = 7 * n - (7 - freq.end_day) - 6
    elif isinstance(freq, Daily):
        out = n
    elif isinstance(freq, BusinessDaily):
        out = bdaily_to_day(n)
    else:
        raise _no_calendar(freq)
    return _finish(np.asarray(out, dtype=np.int64), scalar)


def last_day(freq: Frequency, ordinals):
    """
    Last calendar day of the period(s).
    """
    n, scalar = _prepare(ordinals)
    if isinstance(freq, YPFrequency):
        out = first_day_of_month(start_month(freq, n) + freq.months_per_period) - 1
    elif isinstance(freq, Weekly):
        out = 7 * n - (7 - freq.end_day)
    elif isinstance(freq, Daily):
        out = n
    elif isinstance(freq, BusinessDaily):
        out = bdaily_to_day(n)
    else:
        raise _no_calendar(freq)
    return _finish(np.asarray(out, dtype=np.int64), scalar)


def boundary_day(freq: Frequency, ordinals, values_base: str = "end"):
    if values_base == "begin":
        return first_day(freq, ordinals)
    return last_day(freq, ordinals)


def containing(freq: Frequency, days, bias_previous: bool = True):
    """
    Ordinal(s) of the period(s) of `freq` containing the given day(s).
    For BusinessDaily, weekend days are snapped using `bias_previous`.
    """
    d, scalar = _prepare(days)
    if isinstance(freq, YPFrequency):
        out = month_period(freq, month_index(d))
    elif isinstance(freq, Weekly):
        out = day_to_weekly(d, freq.end_day)
    elif isinstance(freq, Daily):
        out = d
    elif isinstance(freq, BusinessDaily):
        out = day_to_bdaily(d, bias_previous)
    else:
        raise _no_calendar(freq)
    return _finish(np.asarray(out, dtype=np.int64), scalar)


def effective_first_day(freq: Frequency, ordinals):
    """
    First day a period stands for when aligning period starts: a business
    day also stands for the weekend right before it.
    """
    if isinstance(freq, BusinessDaily):
        n = np.asarray(ordinals, dtype=np.int64)
        out = bdaily_to_day(n - 1) + 1
        return out if np.ndim(out) else int(out)
    return first_day(freq, ordinals)


def effective_last_day(freq: Frequency, ordinals):
    """
    Last day a period stands for when aligning period ends: a business day
    also stands for the weekend right after it.
    """
    if isinstance(freq, BusinessDaily):
        n = np.asarray(ordinals, dtype=np.int64)
        out = bdaily_to_day(n + 1) - 1
        return out if np.ndim(out) else int(out)
    return last_day(freq, ordinals)
