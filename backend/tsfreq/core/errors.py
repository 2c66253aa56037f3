from __future__ import annotations

from typing import Any, Iterable


class TimeSeriesFrequencyError(ValueError):
    """Base class for every error raised by tsfreq."""


class MixedFrequencyError(TimeSeriesFrequencyError, TypeError):
    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Mixing frequencies not allowed: {left!r} and {right!r}.")


class IllegalOperationError(TimeSeriesFrequencyError, TypeError):
    def __init__(self, operation: str, left: Any, right: Any) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Illegal operation {operation!r} between "
            f"{type(left).__name__} and {type(right).__name__}."
        )


class IllegalComparisonError(TimeSeriesFrequencyError, TypeError):
    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Illegal comparison between {type(left).__name__} and {type(right).__name__}."
        )


class ConversionNotImplementedError(TimeSeriesFrequencyError, NotImplementedError):
    def __init__(self, from_freq: Any, to_freq: Any, detail: str = "") -> None:
        self.from_freq = from_freq
        self.to_freq = to_freq
        msg = f"Conversion from {from_freq!r} to {to_freq!r} not implemented."
        if detail:
            msg = f"{msg} {detail}"
        super().__init__(msg)


class InvalidArgumentError(TimeSeriesFrequencyError):
    def __init__(self, name: str, value: Any, legal: Iterable[Any]) -> None:
        self.name = name
        self.value = value
        self.legal = tuple(legal)
        super().__init__(
            f"Invalid {name}: {value!r}. Expected one of {list(self.legal)}."
        )


class WeekendBoundaryError(TimeSeriesFrequencyError):
    """
    round_to="current" requested on a boundary that is not a business day.
    """

    def __init__(self, day: str) -> None:
        self.day = day
        super().__init__(
            f"{day} is a weekend. Use round_to='previous' or round_to='next' "
            f"to snap it to a business day."
        )
