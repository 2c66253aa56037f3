"""
Every ordered pair of calendar-bearing frequencies converts without error.

Tests:
  - convert_moment with default arguments
  - convert_range under each trim policy
  - convert_series with default and linear interpolation
"""

import itertools

import numpy as np
import pytest

from tsfreq.conversion.moments import convert_moment
from tsfreq.conversion.ranges import convert_range
from tsfreq.core.frequencies import all_frequencies
from tsfreq.core.moments import MIT
from tsfreq.core.ranges import MITRange
from tsfreq.core.series import TimeSeries
from tsfreq.services.aggregation import convert_series

PAIRS = [(a, b) for a, b in itertools.permutations(all_frequencies(), 2)]


def _id(pair):
    a, b = pair
    return f"{a!r}->{b!r}"


def test_pair_count():
    assert len(PAIRS) == 25 * 24


@pytest.mark.parametrize("pair", PAIRS, ids=_id)
def test_moment(pair):
    from_freq, to_freq = pair
    out = convert_moment(to_freq, MIT(from_freq, 100))
    assert out.freq == to_freq


@pytest.mark.parametrize("trim", ["begin", "end", "both"])
@pytest.mark.parametrize("pair", PAIRS, ids=_id)
def test_range(pair, trim):
    from_freq, to_freq = pair
    out = convert_range(to_freq, MITRange(MIT(from_freq, 100), MIT(from_freq, 899)), trim=trim)
    assert out.freq == to_freq
    assert not out.is_empty


@pytest.mark.parametrize("interpolation", ["none", "linear"])
@pytest.mark.parametrize("pair", PAIRS, ids=_id)
def test_series(pair, interpolation):
    from_freq, to_freq = pair
    series = TimeSeries(MIT(from_freq, 100), np.arange(800, dtype=float))
    out = convert_series(to_freq, series, interpolation=interpolation)
    assert out.freq == to_freq
    assert len(out) > 0


@pytest.mark.parametrize("start, stop", [(100, 899), (361, 422), (1, 60)])
@pytest.mark.parametrize("pair", PAIRS, ids=_id)
def test_range_edges_match_moment_conversion(pair, start, stop):
    from_freq, to_freq = pair
    rng = MITRange(MIT(from_freq, start), MIT(from_freq, stop))
    first = convert_moment(to_freq, rng.first, values_base="begin", round_to="next")
    last = convert_moment(to_freq, rng.last, values_base="end", round_to="previous")
    assert convert_range(to_freq, rng) == MITRange(first, last)
