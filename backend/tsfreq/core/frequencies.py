from __future__ import annotations

from dataclasses import dataclass

from tsfreq.core.errors import ConversionNotImplementedError, InvalidArgumentError


# ============================================================
# Frequency tags
# ============================================================
@dataclass(frozen=True)
class Frequency:
    """
    Structural frequency tag. Two tags are equal only when the variant and
    every parameter match.
    """

    @property
    def letter(self) -> str:
        raise NotImplementedError

    @property
    def periods_per_year(self) -> int:
        raise ConversionNotImplementedError(self, None, "Frequency has no calendar meaning.")

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Unit(Frequency):
    @property
    def letter(self) -> str:
        return "U"


@dataclass(frozen=True)
class YPFrequency(Frequency):
    """
    Fixed number of periods per year. Period n covers the months
      [n * months_per_period + month_offset, (n + 1) * months_per_period + month_offset - 1]
    in month-index space (month_index = 12 * year + month - 1).
    """

    @property
    def months_per_period(self) -> int:
        return 12 // self.periods_per_year

    @property
    def end_month(self) -> int:
        return self.months_per_period

    @property
    def month_offset(self) -> int:
        return self.end_month - self.months_per_period


@dataclass(frozen=True)
class Yearly(YPFrequency):
    end_month: int = 12

    def __post_init__(self) -> None:
        if not 1 <= int(self.end_month) <= 12:
            raise InvalidArgumentError("end_month", self.end_month, range(1, 13))
        object.__setattr__(self, "end_month", int(self.end_month))

    @property
    def letter(self) -> str:
        return "Y"

    @property
    def periods_per_year(self) -> int:
        return 1


@dataclass(frozen=True)
class Quarterly(YPFrequency):
    end_month: int = 3

    def __post_init__(self) -> None:
        if not 1 <= int(self.end_month) <= 12:
            raise InvalidArgumentError("end_month", self.end_month, range(1, 13))
        # Quarterly(6), Quarterly(9), Quarterly(12) share Quarterly(3) boundaries
        object.__setattr__(self, "end_month", (int(self.end_month) - 1) % 3 + 1)

    @property
    def letter(self) -> str:
        return "Q"

    @property
    def periods_per_year(self) -> int:
        return 4


@dataclass(frozen=True)
class Monthly(YPFrequency):
    @property
    def letter(self) -> str:
        return "M"

    @property
    def periods_per_year(self) -> int:
        return 12


@dataclass(frozen=True)
class Weekly(Frequency):
    end_day: int = 7

    def __post_init__(self) -> None:
        if not 1 <= int(self.end_day) <= 7:
            raise InvalidArgumentError("end_day", self.end_day, range(1, 8))
        object.__setattr__(self, "end_day", int(self.end_day))

    @property
    def letter(self) -> str:
        return "W"

    @property
    def periods_per_year(self) -> int:
        return 52


@dataclass(frozen=True)
class Daily(Frequency):
    @property
    def letter(self) -> str:
        return "D"

    @property
    def periods_per_year(self) -> int:
        return 365


@dataclass(frozen=True)
class BusinessDaily(Frequency):
    @property
    def letter(self) -> str:
        return "B"

    @property
    def periods_per_year(self) -> int:
        return 260


# ============================================================
# Classification helpers
# ============================================================
def is_yp(freq: Frequency) -> bool:
    return isinstance(freq, YPFrequency)


def is_calendar(freq: Frequency) -> bool:
    return isinstance(freq, (Weekly, Daily, BusinessDaily))


def is_unit(freq: Frequency) -> bool:
    return isinstance(freq, Unit)


def all_frequencies() -> list[Frequency]:
    """
    Every distinct calendar-bearing frequency (25 tags). Weekly(7),
    Quarterly(3) and Yearly(12) are the defaults, so they are not repeated.
    """
    freqs: list[Frequency] = [Daily(), BusinessDaily()]
    freqs += [Weekly(e) for e in range(1, 8)]
    freqs.append(Monthly())
    freqs += [Quarterly(e) for e in range(1, 4)]
    freqs += [Yearly(e) for e in range(1, 13)]
    return freqs
