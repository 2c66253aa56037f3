"""
Unit tests for MITRange and StepRange.
"""

import pytest

from tsfreq.core.errors import MixedFrequencyError
from tsfreq.core.frequencies import Monthly, Quarterly
from tsfreq.core.literals import mm, qq
from tsfreq.core.moments import Duration
from tsfreq.core.ranges import MITRange, StepRange, moment_range


@pytest.fixture
def year_2022() -> MITRange:
    return MITRange(mm(2022, 1), mm(2022, 12))


class TestMITRange:
    def test_length_is_plain_int(self, year_2022):
        assert len(year_2022) == 12
        assert isinstance(len(year_2022), int)

    def test_iteration(self, year_2022):
        months = list(year_2022)
        assert months[0] == mm(2022, 1)
        assert months[-1] == mm(2022, 12)
        assert list(reversed(year_2022))[0] == mm(2022, 12)

    def test_membership(self, year_2022):
        assert mm(2022, 5) in year_2022
        assert mm(2023, 1) not in year_2022
        assert qq(2022, 1) not in year_2022

    def test_indexing(self, year_2022):
        assert year_2022[0] == mm(2022, 1)
        assert year_2022[-1] == mm(2022, 12)
        assert year_2022[2:4] == MITRange(mm(2022, 3), mm(2022, 4))
        with pytest.raises(IndexError):
            year_2022[12]

    def test_empty_range_is_normalized(self):
        r = MITRange(mm(2022, 8), mm(2022, 6))
        assert r == MITRange(mm(2022, 8), mm(2022, 7))
        assert r.is_empty
        assert len(r) == 0
        assert list(r) == []

    def test_mixed_bounds(self):
        with pytest.raises(MixedFrequencyError):
            MITRange(mm(2022, 1), qq(2022, 4))

    def test_union(self, year_2022):
        other = MITRange(mm(2021, 6), mm(2022, 3))
        assert year_2022.union(other) == MITRange(mm(2021, 6), mm(2022, 12))
        assert (year_2022 | other) == year_2022.union(other)
        with pytest.raises(MixedFrequencyError):
            year_2022.union(MITRange(qq(2022, 1), qq(2022, 2)))

    def test_shift(self, year_2022):
        assert year_2022 + 12 == MITRange(mm(2023, 1), mm(2023, 12))
        assert year_2022 - Duration(Monthly(), 1) == MITRange(mm(2021, 12), mm(2022, 11))

    def test_helpers(self, year_2022):
        assert moment_range(mm(2022, 1), mm(2022, 12)) == year_2022
        assert mm(2022, 1).to(mm(2022, 12)) == year_2022
        assert str(year_2022) == "2022M1:2022M12"
        assert list(year_2022.ordinals()[:2]) == [2022 * 12, 2022 * 12 + 1]


class TestStepRange:
    def test_stride(self):
        r = StepRange(qq(2020, 1), Duration(Quarterly(), 2), qq(2021, 4))
        assert list(r) == [qq(2020, 1), qq(2020, 3), qq(2021, 1), qq(2021, 3)]
        assert len(r) == 4
        assert qq(2020, 3) in r
        assert qq(2020, 2) not in r

    def test_mixed(self):
        with pytest.raises(MixedFrequencyError):
            StepRange(qq(2020, 1), Duration(Monthly(), 2), qq(2021, 4))
