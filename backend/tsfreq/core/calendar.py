from __future__ import annotations

from datetime import date, datetime
from typing import Union

import numpy as np
from dateutil.parser import isoparse


# Day numbers are Rata Die: day 1 = 0001-01-01, day 0 = 0000-12-31.
# numpy datetime64 counts from 1970-01-01, which is day 719163.
UNIX_EPOCH_DAY = 719163
UNIX_EPOCH_MONTH = 1970 * 12

DateLike = Union[date, datetime, str]


# ============================================================
# Leap years
# ============================================================
def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


# ============================================================
# date <-> day number
# ============================================================
def to_python_date(value: DateLike) -> date:
    """
    Accepts a date, a datetime or an ISO string ('2022-05-02').
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return isoparse(value.strip()).date()
    raise TypeError(f"Unsupported date value: {value!r}")


def day_number(value: DateLike) -> int:
    return to_python_date(value).toordinal()


def date_of(day: int) -> date:
    """
    Raises ValueError for days before 0001-01-01 (not representable as date).
    """
    return date.fromordinal(int(day))


def _as_datetime64(days) -> np.ndarray:
    return (np.asarray(days, dtype=np.int64) - UNIX_EPOCH_DAY).astype("datetime64[D]")


# ============================================================
# Month index (12 * year + month - 1), vectorized
# ============================================================
def month_index(days):
    """
    Month index of one or many day numbers. Works for year 0 and before.
    """
    months = _as_datetime64(days).astype("datetime64[M]").astype(np.int64) + UNIX_EPOCH_MONTH
    return months if np.ndim(months) else int(months)


def first_day_of_month(months):
    m = np.asarray(months, dtype=np.int64) - UNIX_EPOCH_MONTH
    days = m.astype("datetime64[M]").astype("datetime64[D]").astype(np.int64) + UNIX_EPOCH_DAY
    return days if np.ndim(days) else int(days)


def year_of(days):
    return month_index(days) // 12


def day_of_year(day: int) -> int:
    return int(day) - first_day_of_month(12 * year_of(day)) + 1


def first_day_of_year(year: int) -> int:
    return first_day_of_month(12 * int(year))


def iso_weekday(days):
    """
    1 = Monday ... 7 = Sunday. Day 1 (0001-01-01) is a Monday.
    """
    return np.mod(np.asarray(days) - 1, 7) + 1 if np.ndim(days) else (int(days) - 1) % 7 + 1


def is_weekend(days):
    return iso_weekday(days) >= 6


def iso_week(day: int) -> tuple[int, int]:
    """
    (iso_year, iso_week) of a day number.
    """
    day = int(day)
    thursday = day - iso_weekday(day) + 4
    iso_year = int(year_of(thursday))
    week = (thursday - first_day_of_year(iso_year)) // 7 + 1
    return iso_year, week


def format_day(day: int) -> str:
    return str(np.datetime_as_string(np.datetime64(int(day) - UNIX_EPOCH_DAY, "D")))
