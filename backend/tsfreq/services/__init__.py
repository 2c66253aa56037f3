"""Value aggregation/interpolation and the fconvert entry point."""

from tsfreq.services.aggregation import convert_series
from tsfreq.services.fconvert import fconvert

__all__ = [
    "convert_series",
    "fconvert",
]
