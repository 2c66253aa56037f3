from __future__ import annotations

from typing import Union

from tsfreq.conversion.moments import convert_moment
from tsfreq.conversion.ranges import convert_range
from tsfreq.core.frequencies import Frequency
from tsfreq.core.moments import MIT
from tsfreq.core.ranges import MITRange
from tsfreq.core.series import TimeSeries
from tsfreq.services.aggregation import convert_series


def fconvert(to_freq: Frequency, x: Union[MIT, MITRange, TimeSeries], **kwargs):
    """
    Single entry point:
      MIT        -> convert_moment(to_freq, x, values_base=..., round_to=...)
      MITRange   -> convert_range(to_freq, x, trim=..., options=...)
      TimeSeries -> convert_series(to_freq, x, method=..., interpolation=..., values_base=..., options=...)
    """
    if isinstance(x, MIT):
        return convert_moment(to_freq, x, **kwargs)
    if isinstance(x, MITRange):
        return convert_range(to_freq, x, **kwargs)
    if isinstance(x, TimeSeries):
        return convert_series(to_freq, x, **kwargs)
    raise TypeError(f"Cannot convert {type(x).__name__} to {to_freq!r}")
