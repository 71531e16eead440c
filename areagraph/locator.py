"""Nearest sample lookup for pointer positions."""

from bisect import bisect_left
from datetime import datetime
from typing import Optional, Sequence

from .utils.scales import TimeScale


def locate(
    pointer_x: float,
    datetimes: Sequence[datetime],
    time_scale: TimeScale
) -> Optional[int]:
    """Find the index of the sample closest in time to a pointer position.

    Args:
        pointer_x: Pointer position in plot pixel coordinates
        datetimes: Sample datetimes in ascending order
        time_scale: Time scale of the plot

    Returns:
        Index of the closest sample (the earlier one on a tie), or None if
        there are no samples
    """
    if not len(datetimes):
        return None
    pointed = time_scale.invert(pointer_x)

    i = bisect_left(datetimes, pointed)
    if i >= len(datetimes):
        return len(datetimes) - 1
    if i > 0 and pointed - datetimes[i - 1] <= datetimes[i] - pointed:
        i -= 1
    return i
