from __future__ import annotations

import re
from dataclasses import dataclass
from numbers import Integral
from typing import Union

from tsfreq.core.calendar import DateLike
from tsfreq.core.errors import InvalidArgumentError
from tsfreq.core.frequencies import (
    BusinessDaily,
    Daily,
    Frequency,
    Monthly,
    Quarterly,
    Unit,
    Weekly,
    Yearly,
)
from tsfreq.core.moments import MIT, make_moment, make_moment_from_date
from tsfreq.core.ranges import MITRange


# ============================================================
# Period literals: 2020 * Q1, Q1(2020), M12(1988), Y(2020), 5 * U
# ============================================================
@dataclass(frozen=True)
class PeriodLiteral:
    freq: Frequency
    period: Union[int, None] = None

    def __call__(self, year: int) -> MIT:
        return make_moment(self.freq, year, self.period)

    def __rmul__(self, year) -> MIT:
        if isinstance(year, Integral):
            return self(int(year))
        return NotImplemented


U = PeriodLiteral(Unit())
Y = PeriodLiteral(Yearly(), 1)
Q1, Q2, Q3, Q4 = (PeriodLiteral(Quarterly(), q) for q in range(1, 5))
M1, M2, M3, M4, M5, M6, M7, M8, M9, M10, M11, M12 = (
    PeriodLiteral(Monthly(), m) for m in range(1, 13)
)


def yy(year: int) -> MIT:
    return make_moment(Yearly(), year, 1)


def qq(year: int, quarter: int) -> MIT:
    return make_moment(Quarterly(), year, quarter)


def mm(year: int, month: int) -> MIT:
    return make_moment(Monthly(), year, month)


# ============================================================
# String literals
# ============================================================
_MOMENT_RE = re.compile(r"^(-?\d+)\s*([YQMU])\s*(\d+)?$")


def parse_moment(text: str) -> MIT:
    """
    Parse a literal like '2020Q1', '1988M12', '2020Y' or '5U'.
    """
    t = str(text).strip().upper()
    match = _MOMENT_RE.match(t)
    if match is None:
        raise ValueError(f"Unsupported moment literal: {text!r}")

    number, letter, period = match.group(1), match.group(2), match.group(3)
    if letter == "U":
        if period is not None:
            raise ValueError(f"Unsupported moment literal: {text!r}")
        return MIT(Unit(), int(number))

    if letter == "Y":
        if period not in (None, "1"):
            raise ValueError(f"Unsupported moment literal: {text!r}")
        return yy(int(number))

    if period is None:
        raise ValueError(f"Missing period in moment literal: {text!r}")
    if letter == "Q":
        return qq(int(number), int(period))
    return mm(int(number), int(period))


def _date_literal(freq: Frequency, text: DateLike, bias_previous: bool) -> Union[MIT, MITRange]:
    # "2022-01-01:2022-01-31" is a range; business-day edges snap inward.
    if isinstance(text, str) and ":" in text:
        start, end = text.split(":", 1)
        first = make_moment_from_date(freq, start.strip(), bias_previous=False)
        last = make_moment_from_date(freq, end.strip(), bias_previous=True)
        if isinstance(freq, BusinessDaily) and last < first:
            raise InvalidArgumentError("range", text, ["range containing a business day"])
        return MITRange(first, last)
    return make_moment_from_date(freq, text, bias_previous=bias_previous)


def daily(text: DateLike) -> Union[MIT, MITRange]:
    return _date_literal(Daily(), text, True)


def bdaily(text: DateLike, bias_previous: bool = True) -> Union[MIT, MITRange]:
    return _date_literal(BusinessDaily(), text, bias_previous)


def weekly(text: DateLike, end_day: int = 7) -> Union[MIT, MITRange]:
    return _date_literal(Weekly(end_day), text, True)
