"""Scale utilities for graph geometry."""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

TimeLike = Union[datetime, pd.Timestamp, str, int, float]


def _ratio(value: float, start: float, stop: float) -> float:
    """Position of `value` between `start` and `stop`; 0.5 if degenerate."""
    span = stop - start
    if span == 0:
        return 0.5
    return (value - start) / span


class LinearScale:
    """Linear scale for numeric values."""

    def __init__(self, domain: Tuple[float, float], range: Tuple[float, float]):
        """Initialize the scale.

        Args:
            domain: Input domain (min, max)
            range: Output range (min, max)
        """
        self.domain = domain
        self.range = range

    def __call__(self, value: float) -> float:
        return self.transform(value)

    def transform(self, value: float) -> float:
        """Transform a value from domain to range.

        Args:
            value: Input value

        Returns:
            Transformed value
        """
        domain_ratio = _ratio(value, self.domain[0], self.domain[1])
        return self.range[0] + domain_ratio * (self.range[1] - self.range[0])

    def invert(self, value: float) -> float:
        """Transform a value from range back to domain.

        Args:
            value: Input value

        Returns:
            Original value
        """
        range_ratio = _ratio(value, self.range[0], self.range[1])
        return self.domain[0] + range_ratio * (self.domain[1] - self.domain[0])


class TimeScale:
    """Time scale for datetime values."""

    def __init__(self, domain: Tuple[datetime, datetime], range: Tuple[float, float]):
        """Initialize the scale.

        Args:
            domain: Input domain (min, max)
            range: Output range (min, max)
        """
        self.domain = domain
        self.range = range
        self._span = (domain[1] - domain[0]).total_seconds()

    def __call__(self, value: datetime) -> float:
        return self.transform(value)

    def transform(self, value: datetime) -> float:
        """Transform a datetime to pixel coordinate.

        Args:
            value: Input datetime

        Returns:
            Pixel coordinate
        """
        offset = (value - self.domain[0]).total_seconds()
        time_ratio = _ratio(offset, 0.0, self._span)
        return self.range[0] + time_ratio * (self.range[1] - self.range[0])

    def invert(self, value: float) -> datetime:
        """Transform a pixel coordinate back to datetime.

        Args:
            value: Pixel coordinate

        Returns:
            Original datetime
        """
        range_ratio = _ratio(value, self.range[0], self.range[1])
        return self.domain[0] + timedelta(seconds=range_ratio * self._span)


def to_datetime(value: Optional[TimeLike]) -> Optional[datetime]:
    """Coerce a timestamp-like value to `datetime`."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return pd.Timestamp(value).to_pydatetime()


def build_time_scale(
    datetimes: Sequence[datetime],
    start_time: Optional[TimeLike] = None,
    end_time: Optional[TimeLike] = None,
    width: float = 0.0
) -> Optional[TimeScale]:
    """Build the time scale of the graph.

    Args:
        datetimes: Sample datetimes in ascending order
        start_time: Explicit start of the domain, first datetime if None
        end_time: Explicit end of the domain, last datetime if None
        width: Pixel width of the plot area

    Returns:
        TimeScale over `[start, end]` onto `[0, width]`, or None when a
        domain endpoint is undefined
    """
    start = to_datetime(start_time)
    end = to_datetime(end_time)
    if start is None:
        start = datetimes[0] if len(datetimes) else None
    if end is None:
        end = datetimes[-1] if len(datetimes) else None
    if start is None or end is None:
        logger.debug("Time domain undefined, no time scale built")
        return None
    return TimeScale((start, end), (0.0, float(width)))


def max_stacked_value(layers: Iterable) -> float:
    """Get the maximum finite top value over all layers, 0 if none."""
    tops = np.array(
        [dp.top for layer in layers for dp in layer.datapoints],
        dtype=float
    )
    tops = tops[np.isfinite(tops)]
    if tops.size == 0:
        return 0.0
    return float(tops.max())


def build_value_scale(
    height: float,
    max_value: float,
    padding: float = 4.0,
    headroom: float = 1.1
) -> LinearScale:
    """Build the value scale of the graph.

    Args:
        height: Pixel height of the plot area
        max_value: Maximum stacked value
        padding: Pixel padding above the domain top
        headroom: Multiplier on `max_value` for the domain top

    Returns:
        LinearScale over `[0, max_value * headroom]` onto `[height, padding]`
    """
    return LinearScale((0.0, max_value * headroom), (float(height), float(padding)))
