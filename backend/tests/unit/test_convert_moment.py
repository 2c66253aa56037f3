"""
Unit tests for single-moment frequency conversion.

Tests:
  - YP <-> YP through the month index, with fiscal offsets and round_to
  - Calendar conversions through boundary dates
  - BusinessDaily targets and weekend handling
  - Argument validation
"""

import pytest

from tsfreq.conversion.moments import convert_moment
from tsfreq.core.errors import (
    ConversionNotImplementedError,
    InvalidArgumentError,
    WeekendBoundaryError,
)
from tsfreq.core.frequencies import (
    BusinessDaily,
    Daily,
    Monthly,
    Quarterly,
    Unit,
    Weekly,
    Yearly,
)
from tsfreq.core.literals import bdaily, daily, mm, qq, weekly, yy
from tsfreq.core.moments import MIT, make_moment


# ---------------------------------------------------------------------------
# YP <-> YP
# ---------------------------------------------------------------------------


class TestYearPeriod:
    def test_quarter_to_year_both_bases(self):
        assert convert_moment(Yearly(), qq(2020, 1), values_base="end") == yy(2020)
        assert convert_moment(Yearly(), qq(2020, 1), values_base="begin") == yy(2020)

    def test_month_to_quarter_round_to(self):
        m = mm(20, 2)
        assert convert_moment(Quarterly(), m, round_to="previous") == qq(19, 4)
        assert convert_moment(Quarterly(), m, round_to="current") == qq(20, 1)
        assert convert_moment(Quarterly(), m, round_to="next") == qq(20, 1)

    def test_month_at_quarter_end_previous(self):
        assert convert_moment(Quarterly(), mm(20, 3), round_to="previous") == qq(20, 1)

    def test_fiscal_year_to_quarter(self):
        y = MIT(Yearly(7), 22)
        assert convert_moment(Quarterly(), y, values_base="begin") == qq(21, 3)
        assert convert_moment(Quarterly(), y, values_base="begin", round_to="next") == qq(21, 4)
        assert convert_moment(Quarterly(), y, values_base="end") == qq(22, 3)
        assert convert_moment(Quarterly(), y, values_base="end", round_to="previous") == qq(22, 2)

    def test_month_to_fiscal_year(self):
        m = mm(20, 1)
        assert convert_moment(Yearly(9), m, values_base="begin", round_to="next") == MIT(Yearly(9), 21)
        assert convert_moment(Yearly(9), m) == MIT(Yearly(9), 20)

    def test_year_to_month(self):
        assert convert_moment(Monthly(), yy(2020), values_base="begin") == mm(2020, 1)
        assert convert_moment(Monthly(), yy(2020), values_base="end") == mm(2020, 12)

    def test_shifted_quarter_to_month(self):
        q = MIT(Quarterly(2), 4 * 2020)
        assert convert_moment(Monthly(), q, values_base="begin") == mm(2019, 12)
        assert convert_moment(Monthly(), q, values_base="end") == mm(2020, 2)

    @pytest.mark.parametrize("month", [1, 4, 7, 10])
    def test_round_trip_through_coarser(self, month):
        m = mm(2020, month)
        q = convert_moment(Quarterly(), m, values_base="begin")
        assert convert_moment(Monthly(), q, values_base="begin") == m

    def test_identity(self):
        m = qq(2020, 2)
        assert convert_moment(Quarterly(), m) is m


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------


class TestCalendar:
    def test_month_to_daily(self):
        assert convert_moment(Daily(), mm(2022, 1)) == daily("2022-01-31")
        assert convert_moment(Daily(), mm(2022, 1), values_base="begin") == daily("2022-01-01")

    def test_bdaily_to_daily(self):
        assert convert_moment(Daily(), bdaily("2022-05-02")) == daily("2022-05-02")

    def test_daily_to_bdaily_weekend(self):
        sunday = daily("2022-05-01")
        assert convert_moment(BusinessDaily(), sunday) == bdaily("2022-04-29")
        assert convert_moment(BusinessDaily(), sunday, round_to="next") == bdaily("2022-05-02")
        with pytest.raises(WeekendBoundaryError):
            convert_moment(BusinessDaily(), sunday, round_to="current")

    def test_month_to_bdaily(self):
        jan = mm(2022, 1)  # starts on a Saturday, ends on a Monday
        assert convert_moment(BusinessDaily(), jan, values_base="begin") == bdaily("2021-12-31")
        assert convert_moment(BusinessDaily(), jan, values_base="begin", round_to="next") == bdaily(
            "2022-01-03"
        )
        assert convert_moment(BusinessDaily(), jan, round_to="current") == bdaily("2022-01-31")
        with pytest.raises(WeekendBoundaryError):
            convert_moment(BusinessDaily(), jan, values_base="begin", round_to="current")

    def test_bdaily_to_month_begin_next(self):
        # first business day of May 2022 is Monday the 2nd
        assert convert_moment(Monthly(), bdaily("2022-05-02"), values_base="begin", round_to="next") == mm(2022, 5)
        assert convert_moment(Monthly(), bdaily("2022-07-06"), values_base="begin", round_to="next") == mm(2022, 8)
        assert convert_moment(Monthly(), bdaily("2022-08-02"), values_base="begin", round_to="next") == mm(2022, 9)

    def test_bdaily_to_month_end_previous(self):
        assert convert_moment(Monthly(), bdaily("2022-06-28"), round_to="previous") == mm(2022, 5)
        assert convert_moment(Monthly(), bdaily("2022-12-30"), round_to="previous") == mm(2022, 12)
        assert convert_moment(Monthly(), bdaily("2022-11-29"), round_to="previous") == mm(2022, 10)

    def test_weekly_to_month(self):
        w = MIT(Weekly(4), 2)  # 0001-01-05 .. 0001-01-11
        assert convert_moment(Monthly(), w, values_base="begin", round_to="next") == mm(1, 2)
        assert convert_moment(Monthly(), w, values_base="begin") == mm(1, 1)

    def test_daily_to_shifted_week(self):
        assert convert_moment(Weekly(4), MIT(Daily(), 1), values_base="begin", round_to="next") == MIT(Weekly(4), 2)
        assert convert_moment(Weekly(4), MIT(Daily(), 100), round_to="previous") == MIT(Weekly(4), 14)

    def test_month_to_week(self):
        jan = mm(2022, 1)
        assert convert_moment(Weekly(), jan) == weekly("2022-02-06")
        assert convert_moment(Weekly(), jan, round_to="previous") == weekly("2022-01-30")
        assert convert_moment(Weekly(), jan, values_base="begin") == weekly("2022-01-02")
        assert convert_moment(Weekly(), jan, values_base="begin", round_to="next") == weekly("2022-01-09")

    def test_week_to_week(self):
        w = weekly("2022-01-09")
        assert convert_moment(Weekly(3), w) == weekly("2022-01-12", end_day=3)
        assert convert_moment(Weekly(3), w, round_to="previous") == weekly("2022-01-05", end_day=3)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unit(self):
        with pytest.raises(ConversionNotImplementedError) as exc:
            convert_moment(Monthly(), MIT(Unit(), 3))
        assert exc.value.from_freq == Unit()
        with pytest.raises(ConversionNotImplementedError):
            convert_moment(Unit(), mm(2020, 1))

    def test_invalid_values_base(self):
        with pytest.raises(InvalidArgumentError) as exc:
            convert_moment(Quarterly(), mm(2020, 1), values_base="middle")
        assert exc.value.legal == ("begin", "end")

    def test_invalid_round_to(self):
        with pytest.raises(InvalidArgumentError) as exc:
            convert_moment(Quarterly(), mm(2020, 1), round_to="nex")
        assert exc.value.value == "nex"

    def test_fiscal_year_from_date_helper(self):
        assert convert_moment(Yearly(7), make_moment(Monthly(), 2022, 8)) == MIT(Yearly(7), 2023)
