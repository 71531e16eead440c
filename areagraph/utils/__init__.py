"""Graph utilities."""

from .cache import Memo
from .logger import setup_logging
from .scales import LinearScale, TimeScale, build_time_scale, build_value_scale, max_stacked_value

__all__ = [
    'Memo',
    'setup_logging',
    'LinearScale',
    'TimeScale',
    'build_time_scale',
    'build_value_scale',
    'max_stacked_value'
]
