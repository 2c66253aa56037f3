from __future__ import annotations

from typing import Optional

import numpy as np
import structlog

from tsfreq.config.defaults import DEFAULT_TRIM, TRIMS
from tsfreq.config.holidays import holiday_mask, is_business_day
from tsfreq.config.options import ConversionOptions, resolve_options
from tsfreq.conversion.moments import check_choice, check_convertible, convert_ordinals
from tsfreq.core.frequencies import BusinessDaily, Daily, Frequency, is_yp
from tsfreq.core.moments import MIT
from tsfreq.core.periods import (
    bdaily_to_day,
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
from tsfreq.core.ranges import MITRange

logger = structlog.get_logger(__name__)


# ============================================================
# Edge detection per conversion family
# ============================================================
# Each helper returns (first, last, partial_start, partial_end): the
# destination periods containing the source's start and end, and whether
# those edge periods are only partially covered by the source.


def _yp_parts(from_freq, to_freq, first: int, last: int) -> tuple[int, int, bool, bool]:
    s = int(start_month(from_freq, first))
    e = int(end_month(from_freq, last))
    fi = int(month_period(to_freq, s))
    li = int(month_period(to_freq, e))
    return fi, li, int(start_month(to_freq, fi)) < s, int(end_month(to_freq, li)) > e


def _nearest_working_day(ordinal: int, step: int, options: ConversionOptions) -> int:
    while not is_business_day(ordinal, options):
        ordinal += step
    return ordinal


def _edge_days(from_freq, first: int, last: int, options: ConversionOptions) -> Optional[tuple[int, int, int, int]]:
    """
    (end day of first, end day of last, first covered day, last covered day).
    A business day also covers the weekend, and under skip-holidays the
    holidays, up to its working neighbours. None when the range holds no
    working day at all.
    """
    if not isinstance(from_freq, BusinessDaily):
        return (
            int(last_day(from_freq, first)),
            int(last_day(from_freq, last)),
            int(effective_first_day(from_freq, first)),
            int(effective_last_day(from_freq, last)),
        )

    mask = holiday_mask(np.arange(first, last + 1), options)
    if mask is None:
        start, end, before, after = first, last, first - 1, last + 1
    else:
        working = np.arange(first, last + 1)[mask]
        if working.size == 0:
            return None
        start, end = int(working[0]), int(working[-1])
        before = _nearest_working_day(start - 1, -1, options)
        after = _nearest_working_day(end + 1, 1, options)
    days = bdaily_to_day(np.array([start, end, before, after]))
    return int(days[0]), int(days[1]), int(days[2]) + 1, int(days[3]) - 1


def _coarsening_parts(from_freq, to_freq, first, last, options) -> Optional[tuple[int, int, bool, bool]]:
    """
    Edge destination periods hold the end days of the first and last source
    periods. An edge is partial when the source does not cover it to its
    outer boundary.
    """
    days = _edge_days(from_freq, first, last, options)
    if days is None:
        return None
    first_end, last_end, covered_from, covered_to = days
    fi = int(containing(to_freq, first_end))
    li = int(containing(to_freq, last_end))
    return (
        fi,
        li,
        int(first_day(to_freq, fi)) < covered_from,
        int(last_day(to_freq, li)) > covered_to,
    )


def _refining_parts(from_freq, to_freq, first, last) -> tuple[int, int, bool, bool]:
    """
    An edge is partial when the destination period containing it does not
    map back onto the source's edge moment.
    """
    fi = int(containing(to_freq, first_day(from_freq, first)))
    li = int(containing(to_freq, last_day(from_freq, last)))
    back_first = int(convert_ordinals(to_freq, from_freq, [fi], "begin", "current")[0])
    back_last = int(convert_ordinals(to_freq, from_freq, [li], "end", "current")[0])
    return fi, li, back_first != first, back_last != last


# ============================================================
# Public API
# ============================================================
def convert_range(
    to_freq: Frequency,
    rng: MITRange,
    trim: str = DEFAULT_TRIM,
    options: Optional[ConversionOptions] = None,
) -> MITRange:
    """
    Destination range covered by a source range.

    trim:
      'both'  drop partially covered periods at both edges
      'end'   drop a partial leading period only
      'begin' drop a partial trailing period only
    Results may be empty (e.g. 2022M8:2022M7); emptiness is never an error.
    """
    check_choice("trim", trim, TRIMS)
    from_freq = rng.freq
    check_convertible(from_freq, to_freq)
    if from_freq == to_freq:
        return rng

    first, last = rng.first.value, rng.last.value
    if rng.is_empty:
        fi = int(convert_ordinals(from_freq, to_freq, [first], "begin", "next")[0])
        return MITRange(MIT(to_freq, fi), MIT(to_freq, fi - 1))

    opts = resolve_options(options)

    if isinstance(to_freq, Daily):
        fi, li = first_day(from_freq, first), last_day(from_freq, last)
        return MITRange(MIT(to_freq, fi), MIT(to_freq, li))

    if isinstance(to_freq, BusinessDaily):
        fi = day_to_bdaily(first_day(from_freq, first), bias_previous=False)
        li = day_to_bdaily(last_day(from_freq, last), bias_previous=True)
        return MITRange(MIT(to_freq, fi), MIT(to_freq, li))

    if is_yp(from_freq) and is_yp(to_freq):
        parts = _yp_parts(from_freq, to_freq, first, last)
    elif to_freq.periods_per_year <= from_freq.periods_per_year:
        parts = _coarsening_parts(from_freq, to_freq, first, last, opts)
        if parts is None:
            fi = int(containing(to_freq, bdaily_to_day(first)))
            return MITRange(MIT(to_freq, fi + 1), MIT(to_freq, fi))
    else:
        parts = _refining_parts(from_freq, to_freq, first, last)

    fi, li, partial_start, partial_end = parts
    drop_start = partial_start and trim in ("both", "end")
    drop_end = partial_end and trim in ("both", "begin")
    if drop_start or drop_end:
        logger.debug(
            "range_edges_truncated",
            from_freq=repr(from_freq),
            to_freq=repr(to_freq),
            trim=trim,
            leading=drop_start,
            trailing=drop_end,
        )

    return MITRange(MIT(to_freq, fi + int(drop_start)), MIT(to_freq, li - int(drop_end)))
