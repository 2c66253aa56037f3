"""Frequency conversion of single moments and ranges."""

from tsfreq.conversion.moments import convert_moment, convert_ordinals
from tsfreq.conversion.ranges import convert_range

__all__ = [
    "convert_moment",
    "convert_ordinals",
    "convert_range",
]
