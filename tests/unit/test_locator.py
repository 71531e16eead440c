"""Unit tests for nearest sample lookup."""

from datetime import timedelta

import pytest

from areagraph.locator import locate
from areagraph.utils.scales import build_time_scale


@pytest.fixture
def time_scale(hourly_datetimes):
    """Time scale putting the three samples at 0, 100 and 200 px."""
    return build_time_scale(hourly_datetimes, width=200)


def test_empty_datetimes(time_scale):
    """Test no index is found without samples."""
    assert locate(50, [], time_scale) is None


def test_exact_positions(hourly_datetimes, time_scale):
    """Test pointers on a sample resolve to it."""
    assert [locate(x, hourly_datetimes, time_scale) for x in (0, 100, 200)] == [0, 1, 2]


def test_tie_resolves_to_earlier(hourly_datetimes, time_scale):
    """Test a pointer exactly between two samples picks the earlier one."""
    assert locate(50, hourly_datetimes, time_scale) == 0
    assert locate(150, hourly_datetimes, time_scale) == 1


def test_closest_neighbour(hourly_datetimes, time_scale):
    """Test the strictly closer neighbour wins."""
    assert locate(49, hourly_datetimes, time_scale) == 0
    assert locate(51, hourly_datetimes, time_scale) == 1
    assert locate(149, hourly_datetimes, time_scale) == 1
    assert locate(151, hourly_datetimes, time_scale) == 2


def test_clamped(hourly_datetimes, time_scale):
    """Test pointers outside the data clamp to the ends."""
    assert locate(-40, hourly_datetimes, time_scale) == 0
    assert locate(260, hourly_datetimes, time_scale) == 2


def test_explicit_domain(hourly_datetimes, start):
    """Test lookup against a domain wider than the data."""
    scale = build_time_scale(
        hourly_datetimes,
        start_time=start - timedelta(hours=1),
        end_time=start + timedelta(hours=5),
        width=600
    )
    assert locate(0, hourly_datetimes, scale) == 0
    assert locate(200, hourly_datetimes, scale) == 1
    assert locate(240, hourly_datetimes, scale) == 1
    assert locate(599, hourly_datetimes, scale) == 2


def test_single_sample(start):
    """Test a single sample is always the closest."""
    scale = build_time_scale([start], width=100)
    assert locate(0, [start], scale) == 0
    assert locate(100, [start], scale) == 0
