import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add project root to Python path
root_dir = Path(__file__).resolve().parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from areagraph.config import GraphConfig
from areagraph.fills import FillResolver
from areagraph.models import Sample


@pytest.fixture
def start():
    """Start of the sample time range."""
    return datetime(2024, 1, 1)


@pytest.fixture
def hourly_datetimes(start):
    """Three evenly spaced datetimes."""
    return [start + timedelta(hours=i) for i in range(3)]


@pytest.fixture
def price_records(hourly_datetimes):
    """Original records backing the price samples."""
    return [
        {'datetime': dt, 'price': price}
        for dt, price in zip(hourly_datetimes, [10.0, 20.0, 5.0])
    ]


@pytest.fixture
def price_samples(price_records):
    """Samples with a single `price` layer: 10, 20, 5."""
    return [
        Sample(datetime=r['datetime'], values={'price': r['price']}, meta=r)
        for r in price_records
    ]


@pytest.fixture
def mixed_samples(hourly_datetimes):
    """Samples with one positive and one negative layer."""
    values = [
        {'solar': 3.0, 'export': -2.0},
        {'solar': 5.0, 'export': -1.0},
        {'solar': 0.0, 'export': -4.0},
    ]
    return [Sample(datetime=dt, values=v) for dt, v in zip(hourly_datetimes, values)]


@pytest.fixture
def solid_fills():
    """Fill resolver giving every layer the same grey."""
    return FillResolver(lambda key: '#616161')


@pytest.fixture
def flat_config():
    """Configuration without axis reserves, so viewport == plot area."""
    return GraphConfig(value_axis_width=0.0, time_axis_height=0.0)
