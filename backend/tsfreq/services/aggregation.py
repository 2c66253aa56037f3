from __future__ import annotations

from typing import Optional

import numpy as np
import structlog

from tsfreq.config.defaults import (
    DEFAULT_DOWNSAMPLING_METHOD,
    DEFAULT_INTERPOLATION,
    DEFAULT_UPSAMPLING_METHOD,
    DEFAULT_VALUES_BASE,
    DOWNSAMPLING_METHODS,
    INTERPOLATION_VALUES_BASES,
    INTERPOLATIONS,
    METHODS,
    UPSAMPLING_METHODS,
    VALUES_BASES,
)
from tsfreq.config.holidays import holiday_mask
from tsfreq.config.options import ConversionOptions, resolve_options
from tsfreq.conversion.moments import check_choice, check_convertible, convert_ordinals
from tsfreq.conversion.ranges import convert_range
from tsfreq.core.calendar import is_weekend
from tsfreq.core.errors import InvalidArgumentError
from tsfreq.core.frequencies import BusinessDaily, Daily, Frequency, is_yp
from tsfreq.core.periods import (
    bdaily_to_day,
    containing,
    day_to_bdaily,
    end_month,
    first_day,
    last_day,
    month_period,
    start_month,
)
from tsfreq.core.series import TimeSeries

logger = structlog.get_logger(__name__)


# Trim that drops only the partial edge a policy cannot fill.
_UPSAMPLING_TRIM = {"end": "begin", "begin": "end", "middle": "both"}
_DOWNSAMPLING_TRIM = {"mean": "both", "sum": "both", "begin": "end", "end": "begin"}


# ============================================================
# Helpers
# ============================================================
def _lookup(series: TimeSeries, ordinals: np.ndarray) -> np.ndarray:
    """
    Values at source ordinals, NaN outside the series.
    """
    pos = np.asarray(ordinals, dtype=np.int64) - series.first.value
    inside = (pos >= 0) & (pos < len(series))
    out = np.full(pos.shape, np.nan)
    out[inside] = series.values[pos[inside]]
    return out


def _reduce(values: np.ndarray, method: str, skip_nans: bool, weights: Optional[np.ndarray] = None) -> float:
    if skip_nans:
        keep = ~np.isnan(values)
        values = values[keep]
        if weights is not None:
            weights = weights[keep]
    if values.size == 0:
        return np.nan
    if method == "begin":
        return float(values[0])
    if method == "end":
        return float(values[-1])
    if method == "sum":
        return float(np.sum(values if weights is None else values * weights))
    if weights is None:
        return float(np.mean(values))
    return float(np.sum(values * weights) / np.sum(weights))


def _extended_anchors(series: TimeSeries) -> tuple[np.ndarray, np.ndarray]:
    """
    Source ordinals first - 1 .. last + 1 with linearly extrapolated values
    at both ends.
    """
    v = series.values
    if len(v) >= 2:
        before, after = 2 * v[0] - v[1], 2 * v[-1] - v[-2]
    else:
        before, after = v[0], v[-1]
    ordinals = np.arange(series.first.value - 1, series.last.value + 2, dtype=np.int64)
    return ordinals, np.concatenate([[before], v, [after]])


def _empty_result(to_freq: Frequency, series: TimeSeries, options: ConversionOptions) -> TimeSeries:
    rng = convert_range(to_freq, series.range, options=options)
    return TimeSeries(rng.first, np.empty(0))


# ============================================================
# Upsampling
# ============================================================
def _bdaily_to_daily(series: TimeSeries, values_base: Optional[str]) -> TimeSeries:
    """
    Weekends are NaN, or carry Friday forward ('begin') / Monday back ('end').
    """
    rng = convert_range(Daily(), series.range)
    days = rng.ordinals()
    if values_base is None:
        out = np.full(days.shape, np.nan)
        weekday = ~is_weekend(days)
        out[weekday] = _lookup(series, day_to_bdaily(days[weekday]))
    else:
        out = _lookup(series, day_to_bdaily(days, bias_previous=(values_base == "begin")))
    return TimeSeries(rng.first, out)


def _upsample_const(to_freq, series: TimeSeries, values_base: str, options) -> TimeSeries:
    rng = convert_range(to_freq, series.range, trim=_UPSAMPLING_TRIM[values_base], options=options)
    dest = rng.ordinals()
    src = convert_ordinals(to_freq, series.freq, dest, values_base, "current")
    idx = np.clip(src - series.first.value, 0, len(series) - 1)
    return TimeSeries(rng.first, series.values[idx])


def _upsample_linear(to_freq, series: TimeSeries, values_base: str, options) -> TimeSeries:
    """
    Piecewise-linear in destination-ordinal space between anchors placed at
    each source period's begin, end or middle.
    """
    from_freq = series.freq
    rng = convert_range(to_freq, series.range, trim=_UPSAMPLING_TRIM[values_base], options=options)
    ordinals, anchor_values = _extended_anchors(series)

    begin_pos = convert_ordinals(from_freq, to_freq, ordinals, "begin", "next").astype(float)
    end_pos = convert_ordinals(from_freq, to_freq, ordinals, "end", "previous").astype(float)
    if values_base == "begin":
        positions = begin_pos
    elif values_base == "end":
        positions = end_pos
    else:
        positions = (begin_pos + end_pos) / 2.0

    out = np.interp(rng.ordinals().astype(float), positions, anchor_values)
    return TimeSeries(rng.first, out)


# ============================================================
# Downsampling
# ============================================================
def _daily_to_bdaily(series: TimeSeries) -> TimeSeries:
    rng = convert_range(BusinessDaily(), series.range)
    return TimeSeries(rng.first, _lookup(series, bdaily_to_day(rng.ordinals())))


def _downsample_yp(to_freq, series: TimeSeries, method: str, options: ConversionOptions) -> TimeSeries:
    """
    Month-weighted: each source period counts with the number of months it
    shares with the destination period.
    """
    from_freq = series.freq
    rng = convert_range(to_freq, series.range, trim=_DOWNSAMPLING_TRIM[method], options=options)
    out = np.empty(len(rng))
    for k, p in enumerate(rng.ordinals()):
        s, e = int(start_month(to_freq, p)), int(end_month(to_freq, p))
        src = np.arange(month_period(from_freq, s), month_period(from_freq, e) + 1)
        overlap = (
            np.minimum(end_month(from_freq, src), e)
            - np.maximum(start_month(from_freq, src), s)
            + 1
        ).astype(float)
        weights = overlap / from_freq.months_per_period if method == "sum" else overlap
        out[k] = _reduce(_lookup(series, src), method, options.business_skip_nans, weights)
    return TimeSeries(rng.first, out)


def _downsample_calendar(to_freq, series: TimeSeries, method: str, options: ConversionOptions) -> TimeSeries:
    """
    Each source period belongs to the destination period containing its
    last day.
    """
    from_freq = series.freq
    rng = convert_range(to_freq, series.range, trim=_DOWNSAMPLING_TRIM[method], options=options)

    src = series.range.ordinals()
    values = series.values
    if isinstance(from_freq, BusinessDaily):
        mask = holiday_mask(src, options)
        if mask is not None:
            src, values = src[mask], values[mask]

    owner = containing(to_freq, last_day(from_freq, src))
    dest = rng.ordinals()
    lo = np.searchsorted(owner, dest, side="left")
    hi = np.searchsorted(owner, dest, side="right")

    out = np.array([
        _reduce(values[i:j], method, options.business_skip_nans) for i, j in zip(lo, hi)
    ])
    return TimeSeries(rng.first, out)


def _downsample_linear(to_freq, series: TimeSeries, method: str, options: ConversionOptions) -> TimeSeries:
    """
    Reduce over a daily reconstruction of the source:
      mean/end: linear between period-end anchors
      begin:    linear between period-begin anchors
      sum:      each value spread evenly over its days
    """
    from_freq = series.freq
    rng = convert_range(to_freq, series.range, trim=_DOWNSAMPLING_TRIM[method], options=options)

    src = series.range.ordinals()
    begins, ends = first_day(from_freq, src), last_day(from_freq, src)
    days = np.arange(begins[0], ends[-1] + 1)

    if method == "sum":
        pos = containing(from_freq, days) - series.first.value
        daily = series.values[pos] / (ends - begins + 1)[pos]
    else:
        ordinals, anchor_values = _extended_anchors(series)
        base = "begin" if method == "begin" else "end"
        anchors = first_day(from_freq, ordinals) if base == "begin" else last_day(from_freq, ordinals)
        daily = np.interp(days.astype(float), anchors.astype(float), anchor_values)

    dest = rng.ordinals()
    skip_nans = options.business_skip_nans
    if method in ("begin", "end"):
        edge = first_day(to_freq, dest) if method == "begin" else last_day(to_freq, dest)
        pos = edge - days[0]
        inside = (pos >= 0) & (pos < len(days))
        out = np.full(len(dest), np.nan)
        out[inside] = daily[pos[inside]]
        return TimeSeries(rng.first, out)

    owner = containing(to_freq, days)
    lo = np.searchsorted(owner, dest, side="left")
    hi = np.searchsorted(owner, dest, side="right")
    out = np.array([_reduce(daily[i:j], method, skip_nans) for i, j in zip(lo, hi)])
    return TimeSeries(rng.first, out)


# ============================================================
# Public API
# ============================================================
def convert_series(
    to_freq: Frequency,
    series: TimeSeries,
    method: Optional[str] = None,
    interpolation: str = DEFAULT_INTERPOLATION,
    values_base: Optional[str] = None,
    options: Optional[ConversionOptions] = None,
) -> TimeSeries:
    """
    Convert a series to another frequency.

    Upsampling (finer destination):
      method 'const' (default) repeats each value, or interpolation='linear'
      (also method='linear') interpolates between anchors at values_base
      'begin' / 'end' (default) / 'middle'.
    Downsampling (coarser or equal destination):
      method 'mean' (default), 'sum', 'begin' or 'end' over the source
      periods of each destination period; interpolation='linear' reduces a
      daily reconstruction instead (approximate).
    """
    from_freq = series.freq
    check_convertible(from_freq, to_freq)
    check_choice("interpolation", interpolation, INTERPOLATIONS)
    if method is not None:
        check_choice("method", method, METHODS)
    if values_base is not None:
        check_choice("values_base", values_base, INTERPOLATION_VALUES_BASES)

    if from_freq == to_freq:
        return TimeSeries(series.first, series.values.copy())

    opts = resolve_options(options)
    if len(series) == 0:
        return _empty_result(to_freq, series, opts)

    upsampling = to_freq.periods_per_year > from_freq.periods_per_year
    if upsampling:
        method = method or DEFAULT_UPSAMPLING_METHOD
        if method == "linear":
            method, interpolation = "const", "linear"
        if method != "const":
            raise InvalidArgumentError("method", method, UPSAMPLING_METHODS)
    else:
        method = method or DEFAULT_DOWNSAMPLING_METHOD
        if method not in DOWNSAMPLING_METHODS:
            raise InvalidArgumentError("method", method, DOWNSAMPLING_METHODS)

    logger.debug(
        "series_conversion",
        from_freq=repr(from_freq),
        to_freq=repr(to_freq),
        direction="up" if upsampling else "down",
        method=method,
        interpolation=interpolation,
        length=len(series),
    )

    if upsampling:
        if interpolation == "linear":
            return _upsample_linear(to_freq, series, values_base or DEFAULT_VALUES_BASE, opts)
        if isinstance(from_freq, BusinessDaily) and isinstance(to_freq, Daily):
            if values_base == "middle":
                raise InvalidArgumentError("values_base", values_base, VALUES_BASES)
            return _bdaily_to_daily(series, values_base)
        values_base = values_base or DEFAULT_VALUES_BASE
        if values_base not in VALUES_BASES:
            raise InvalidArgumentError("values_base", values_base, VALUES_BASES)
        return _upsample_const(to_freq, series, values_base, opts)

    if isinstance(from_freq, Daily) and isinstance(to_freq, BusinessDaily):
        return _daily_to_bdaily(series)
    if interpolation == "linear" and not isinstance(from_freq, (Daily, BusinessDaily)):
        return _downsample_linear(to_freq, series, method, opts)
    if is_yp(from_freq) and is_yp(to_freq):
        return _downsample_yp(to_freq, series, method, opts)
    return _downsample_calendar(to_freq, series, method, opts)
