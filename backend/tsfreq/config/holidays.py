from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd
import structlog

from tsfreq.config.options import ConversionOptions, resolve_options, set_option
from tsfreq.core.calendar import UNIX_EPOCH_DAY, DateLike, to_python_date
from tsfreq.core.periods import day_to_bdaily

logger = structlog.get_logger(__name__)


def make_holidays_map(holidays: Iterable[DateLike], start: DateLike, end: DateLike) -> pd.Series:
    """
    Business-day mask between start and end (inclusive).

    Returns a bool Series indexed by BusinessDaily ordinal: True for a
    working day, False for a holiday.
    """
    bdays = pd.bdate_range(start=to_python_date(start), end=to_python_date(end))
    days = bdays.values.astype("datetime64[D]").astype(np.int64) + UNIX_EPOCH_DAY
    holiday_index = pd.DatetimeIndex([pd.Timestamp(to_python_date(h)) for h in holidays])

    return pd.Series(
        ~bdays.isin(holiday_index),
        index=pd.Index(day_to_bdaily(days), name="bdaily"),
        name="is_business_day",
        dtype=bool,
    )


def set_holidays_map(holidays_map: pd.Series) -> None:
    set_option("business_holidays_map", holidays_map)


def clear_holidays_map() -> None:
    set_option("business_holidays_map", None)


def is_business_day(ordinal: int, options: Optional[ConversionOptions] = None) -> bool:
    """
    Ordinals outside the map are working days.
    """
    holidays_map = resolve_options(options).business_holidays_map
    if holidays_map is None:
        return True
    return bool(holidays_map.get(int(ordinal), True))


def holiday_mask(ordinals: np.ndarray, options: ConversionOptions) -> Optional[np.ndarray]:
    """
    Working-day mask for business-daily ordinals, or None when holidays are
    not skipped.
    """
    if not options.business_skip_holidays:
        return None
    holidays_map = options.business_holidays_map
    if holidays_map is None:
        logger.warning("holidays_map_missing", business_skip_holidays=True)
        return None
    mask = holidays_map.reindex(np.asarray(ordinals, dtype=np.int64), fill_value=True)
    return mask.to_numpy(dtype=bool)
