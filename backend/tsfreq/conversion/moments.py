from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from tsfreq.config.defaults import (
    DEFAULT_BDAILY_ROUND_TO,
    DEFAULT_ROUND_TO,
    DEFAULT_VALUES_BASE,
    ROUND_TO,
    VALUES_BASES,
)
from tsfreq.core.calendar import format_day, is_weekend
from tsfreq.core.errors import (
    ConversionNotImplementedError,
    InvalidArgumentError,
    WeekendBoundaryError,
)
from tsfreq.core.frequencies import BusinessDaily, Daily, Frequency, is_unit, is_yp
from tsfreq.core.moments import MIT
from tsfreq.core.periods import (
    boundary_day,
    containing,
    day_to_bdaily,
    effective_first_day,
    effective_last_day,
    end_month,
    first_day,
    last_day,
    month_period,
    start_month,
)


def check_choice(name: str, value: str, legal: Iterable[str]) -> None:
    legal = tuple(legal)
    if value not in legal:
        raise InvalidArgumentError(name, value, legal)


def check_convertible(from_freq: Frequency, to_freq: Frequency) -> None:
    if not isinstance(to_freq, Frequency):
        raise TypeError(f"Expected a Frequency, got {to_freq!r}")
    if from_freq != to_freq and (is_unit(from_freq) or is_unit(to_freq)):
        raise ConversionNotImplementedError(from_freq, to_freq)


def default_round_to(to_freq: Frequency) -> str:
    if isinstance(to_freq, BusinessDaily):
        return DEFAULT_BDAILY_ROUND_TO
    return DEFAULT_ROUND_TO


# ============================================================
# Vectorized kernels (ordinals -> ordinals)
# ============================================================
def _yp_to_yp(from_freq, to_freq, n: np.ndarray, values_base: str, round_to: str) -> np.ndarray:
    """
    Both sides through the month index (12 * year + month - 1).
    """
    if values_base == "begin":
        k = start_month(from_freq, n)
        p = month_period(to_freq, k)
        if round_to == "next":
            p = p + (start_month(to_freq, p) < k)
        return p

    k = end_month(from_freq, n)
    p = month_period(to_freq, k)
    if round_to == "previous":
        p = p - (end_month(to_freq, p) > k)
    return p


def _via_days(from_freq, to_freq, n: np.ndarray, values_base: str, round_to: str) -> np.ndarray:
    """
    Through the Gregorian boundary date of each source period.
    """
    days = boundary_day(from_freq, n, values_base)
    p = containing(to_freq, days)
    if values_base == "begin" and round_to == "next":
        p = p + (first_day(to_freq, p) < effective_first_day(from_freq, n))
    elif values_base == "end" and round_to == "previous":
        p = p - (last_day(to_freq, p) > effective_last_day(from_freq, n))
    return p


def convert_ordinals(
    from_freq: Frequency,
    to_freq: Frequency,
    ordinals,
    values_base: str = DEFAULT_VALUES_BASE,
    round_to: str = DEFAULT_ROUND_TO,
) -> np.ndarray:
    """
    Array version of convert_moment. Arguments are assumed validated.
    """
    n = np.atleast_1d(np.asarray(ordinals, dtype=np.int64))
    if from_freq == to_freq:
        return n.copy()

    if isinstance(to_freq, Daily):
        return boundary_day(from_freq, n, values_base)

    if isinstance(to_freq, BusinessDaily):
        days = boundary_day(from_freq, n, values_base)
        if round_to == "current":
            weekend = is_weekend(days)
            if np.any(weekend):
                raise WeekendBoundaryError(format_day(days[weekend][0]))
            return day_to_bdaily(days)
        return day_to_bdaily(days, bias_previous=(round_to == "previous"))

    if is_yp(from_freq) and is_yp(to_freq):
        return _yp_to_yp(from_freq, to_freq, n, values_base, round_to)

    return _via_days(from_freq, to_freq, n, values_base, round_to)


# ============================================================
# Public API
# ============================================================
def convert_moment(
    to_freq: Frequency,
    m: MIT,
    values_base: str = DEFAULT_VALUES_BASE,
    round_to: Optional[str] = None,
) -> MIT:
    """
    Convert a single moment to another frequency.

    values_base: 'begin' or 'end', which boundary date of `m` represents it
    round_to:    'current' (default) keeps the destination period containing
                 that boundary; 'next' moves to the first destination period
                 starting at or after the begin boundary; 'previous' moves to
                 the last one ending at or before the end boundary.
                 For BusinessDaily targets the default is 'previous' and
                 'current' raises WeekendBoundaryError on Saturday/Sunday.
    """
    check_choice("values_base", values_base, VALUES_BASES)
    if round_to is None:
        round_to = default_round_to(to_freq)
    check_choice("round_to", round_to, ROUND_TO)

    check_convertible(m.freq, to_freq)
    if m.freq == to_freq:
        return m

    out = convert_ordinals(m.freq, to_freq, [m.value], values_base, round_to)
    return MIT(to_freq, int(out[0]))
