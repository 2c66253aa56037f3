from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator

from tsfreq.core.errors import InvalidArgumentError


class ConversionOptions(BaseModel):
    """
    Options consumed by frequency conversion:
      business_skip_holidays: leave holidays out of business-daily alignment and reductions
      business_skip_nans:     reductions ignore NaN instead of propagating it
      business_holidays_map:  bool Series indexed by BusinessDaily ordinal, False = holiday
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    business_skip_holidays: bool = False
    business_skip_nans: bool = False
    business_holidays_map: Optional[pd.Series] = None

    @field_validator("business_holidays_map")
    @classmethod
    def _check_holidays_map(cls, v: Optional[pd.Series]) -> Optional[pd.Series]:
        if v is None:
            return v
        if not pd.api.types.is_bool_dtype(v.dtype):
            raise ValueError(f"business_holidays_map must have bool dtype, got {v.dtype}")
        if not pd.api.types.is_integer_dtype(v.index.dtype):
            raise ValueError("business_holidays_map must be indexed by BusinessDaily ordinals")
        return v


# ============================================================
# Process-wide store (read once per conversion call)
# ============================================================
_current = ConversionOptions()


def get_options() -> ConversionOptions:
    return _current


def resolve_options(options: Optional[ConversionOptions] = None) -> ConversionOptions:
    return options if options is not None else _current


def get_option(name: str) -> Any:
    if name not in ConversionOptions.model_fields:
        raise InvalidArgumentError("option", name, ConversionOptions.model_fields)
    return getattr(_current, name)


def set_option(name: str, value: Any) -> ConversionOptions:
    global _current
    if name not in ConversionOptions.model_fields:
        raise InvalidArgumentError("option", name, ConversionOptions.model_fields)
    _current = ConversionOptions.model_validate({**dict(_current), name: value})
    return _current


def reset_options() -> None:
    global _current
    _current = ConversionOptions()


@contextmanager
def options_context(**overrides: Any) -> Iterator[ConversionOptions]:
    """
    Temporarily override options, restoring the previous ones on exit.
    """
    global _current
    previous = _current
    for name in overrides:
        if name not in ConversionOptions.model_fields:
            raise InvalidArgumentError("option", name, ConversionOptions.model_fields)
    _current = ConversionOptions.model_validate({**dict(previous), **overrides})
    try:
        yield _current
    finally:
        _current = previous
