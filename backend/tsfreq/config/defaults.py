"""Frequency conversion defaults and legal argument values."""

# Which boundary date of a period represents it during conversion.
VALUES_BASES: tuple[str, ...] = ("begin", "end")
DEFAULT_VALUES_BASE: str = "end"

# Linear interpolation may also anchor at period midpoints.
INTERPOLATION_VALUES_BASES: tuple[str, ...] = ("begin", "end", "middle")

# Bias used to land a boundary on a destination period.
ROUND_TO: tuple[str, ...] = ("previous", "next", "current")
DEFAULT_ROUND_TO: str = "current"
DEFAULT_BDAILY_ROUND_TO: str = "previous"

# Edge truncation for range conversion.
TRIMS: tuple[str, ...] = ("begin", "end", "both")
DEFAULT_TRIM: str = "both"

# Value aggregation.
UPSAMPLING_METHODS: tuple[str, ...] = ("const", "linear")
DOWNSAMPLING_METHODS: tuple[str, ...] = ("mean", "sum", "begin", "end")
METHODS: tuple[str, ...] = ("const", "linear", "mean", "sum", "begin", "end")
DEFAULT_UPSAMPLING_METHOD: str = "const"
DEFAULT_DOWNSAMPLING_METHOD: str = "mean"

INTERPOLATIONS: tuple[str, ...] = ("none", "linear")
DEFAULT_INTERPOLATION: str = "none"
