from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd

from tsfreq.core.errors import MixedFrequencyError
from tsfreq.core.frequencies import Frequency
from tsfreq.core.moments import MIT
from tsfreq.core.ranges import MITRange


@dataclass
class TimeSeries:
    """
    Minimal value carrier: a first moment plus a float array, one value
    per consecutive moment.
    """

    first: MIT
    values: np.ndarray

    def __post_init__(self) -> None:
        if not isinstance(self.first, MIT):
            raise TypeError(f"TimeSeries.first must be a MIT, got {self.first!r}")
        self.values = np.asarray(self.values, dtype=float).reshape(-1)

    @classmethod
    def from_range(cls, rng: MITRange, values) -> "TimeSeries":
        values = np.asarray(values, dtype=float).reshape(-1)
        if len(values) != len(rng):
            raise ValueError(
                f"Range {rng} has {len(rng)} moments but {len(values)} values were given."
            )
        return cls(rng.first, values)

    @property
    def freq(self) -> Frequency:
        return self.first.freq

    @property
    def last(self) -> MIT:
        return self.first + (len(self.values) - 1)

    @property
    def range(self) -> MITRange:
        return MITRange(self.first, self.last)

    def __len__(self) -> int:
        return len(self.values)

    def _position(self, m: MIT) -> int:
        if m.freq != self.freq:
            raise MixedFrequencyError(self.freq, m.freq)
        i = m.value - self.first.value
        if not 0 <= i < len(self.values):
            raise KeyError(f"{m} is outside {self.range}")
        return i

    def __getitem__(self, key: Union[MIT, MITRange]):
        if isinstance(key, MIT):
            return float(self.values[self._position(key)])
        if isinstance(key, MITRange):
            if key.is_empty:
                return TimeSeries(key.first, np.empty(0))
            i, j = self._position(key.first), self._position(key.last)
            return TimeSeries(key.first, self.values[i:j + 1].copy())
        raise TypeError(f"TimeSeries indices must be MIT or MITRange, not {type(key).__name__}")

    def to_pandas(self, name: Union[str, None] = None) -> pd.Series:
        index = pd.Index([str(m) for m in self.range], name=self.freq.name)
        return pd.Series(self.values.copy(), index=index, name=name)

    def __str__(self) -> str:
        return f"TimeSeries({self.range}, {len(self)} values)"
