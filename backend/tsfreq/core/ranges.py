from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator

import numpy as np

from tsfreq.core.errors import InvalidArgumentError, MixedFrequencyError
from tsfreq.core.frequencies import Frequency
from tsfreq.core.moments import MIT, Duration


# ============================================================
# Contiguous range of moments
# ============================================================
@dataclass(frozen=True)
class MITRange:
    """
    Inclusive, unit-step range [first, last] of moments of one frequency.

    An empty range is a legal value and is stored as last = first - 1,
    e.g. MITRange(2022M8, 2022M6) -> 2022M8:2022M7.
    """

    first: MIT
    last: MIT

    def __post_init__(self) -> None:
        if not isinstance(self.first, MIT) or not isinstance(self.last, MIT):
            raise TypeError("MITRange bounds must be MIT values.")
        if self.first.freq != self.last.freq:
            raise MixedFrequencyError(self.first.freq, self.last.freq)
        if self.last.value < self.first.value - 1:
            object.__setattr__(self, "last", self.first - 1)

    @property
    def freq(self) -> Frequency:
        return self.first.freq

    @property
    def is_empty(self) -> bool:
        return self.last.value < self.first.value

    def __len__(self) -> int:
        return self.last.value - self.first.value + 1

    def __iter__(self) -> Iterator[MIT]:
        freq = self.freq
        for v in range(self.first.value, self.last.value + 1):
            yield MIT(freq, v)

    def __reversed__(self) -> Iterator[MIT]:
        freq = self.freq
        for v in range(self.last.value, self.first.value - 1, -1):
            yield MIT(freq, v)

    def __contains__(self, item) -> bool:
        if not isinstance(item, MIT) or item.freq != self.freq:
            return False
        return self.first.value <= item.value <= self.last.value

    def __getitem__(self, key):
        if isinstance(key, slice):
            values = range(self.first.value, self.last.value + 1)[key]
            if values.step != 1:
                raise InvalidArgumentError("slice step", values.step, [1])
            return MITRange(MIT(self.freq, values.start), MIT(self.freq, values.stop - 1))
        if isinstance(key, Integral):
            n = len(self)
            i = int(key)
            if i < 0:
                i += n
            if not 0 <= i < n:
                raise IndexError(f"MITRange index out of range: {key}")
            return MIT(self.freq, self.first.value + i)
        raise TypeError(f"MITRange indices must be integers or slices, not {type(key).__name__}")

    def __add__(self, other) -> "MITRange":
        if isinstance(other, (Duration, Integral)):
            return MITRange(self.first + other, self.last + other)
        return NotImplemented

    def __sub__(self, other) -> "MITRange":
        if isinstance(other, (Duration, Integral)):
            return MITRange(self.first - other, self.last - other)
        return NotImplemented

    def __or__(self, other) -> "MITRange":
        if isinstance(other, MITRange):
            return self.union(other)
        return NotImplemented

    def union(self, other: "MITRange") -> "MITRange":
        if other.freq != self.freq:
            raise MixedFrequencyError(self.freq, other.freq)
        return MITRange(min(self.first, other.first), max(self.last, other.last))

    def ordinals(self) -> np.ndarray:
        return np.arange(self.first.value, self.last.value + 1, dtype=np.int64)

    def __str__(self) -> str:
        return f"{self.first}:{self.last}"


def moment_range(first: MIT, last: MIT) -> MITRange:
    return MITRange(first, last)


# ============================================================
# Stepped range (custom strides)
# ============================================================
@dataclass(frozen=True)
class StepRange:
    """
    first, first + step, ... up to and including last when it is hit.
    Not used by frequency conversion.
    """

    first: MIT
    step: Duration
    last: MIT

    def __post_init__(self) -> None:
        freq = self.first.freq
        for other in (self.step.freq, self.last.freq):
            if other != freq:
                raise MixedFrequencyError(freq, other)
        if self.step.value == 0:
            raise InvalidArgumentError("step", self.step, ["non-zero Duration"])

    def _values(self) -> range:
        stop = self.last.value + (1 if self.step.value > 0 else -1)
        return range(self.first.value, stop, self.step.value)

    def __len__(self) -> int:
        return len(self._values())

    def __iter__(self) -> Iterator[MIT]:
        freq = self.first.freq
        for v in self._values():
            yield MIT(freq, v)

    def __contains__(self, item) -> bool:
        return isinstance(item, MIT) and item.freq == self.first.freq and item.value in self._values()
