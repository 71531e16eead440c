"""Layer fill resolution."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

import numpy as np
from matplotlib.colors import LinearSegmentedColormap, Normalize, to_hex

from .models import DataPoint, LayerKey

logger = logging.getLogger(__name__)

Color = Any  # Any matplotlib colour specification


@dataclass(frozen=True)
class Solid:
    """Homogeneous fill."""
    color: Color

    def color_at(self, point: DataPoint) -> Color:
        return self.color


@dataclass(frozen=True)
class Gradient:
    """Fill computed per data point, rendering a horizontal gradient."""
    func: Callable[[DataPoint], Color]

    def color_at(self, point: DataPoint) -> Color:
        return self.func(point)


Fill = Union[Solid, Gradient]


def as_fill(value: Union[Fill, Color, Callable[[DataPoint], Color]]) -> Fill:
    """Coerce a colour or a point-to-colour function into a fill."""
    if isinstance(value, (Solid, Gradient)):
        return value
    if callable(value):
        return Gradient(value)
    return Solid(value)


class FillResolver:
    """Resolves stroke, fill and marker fill of each layer key.

    Resolved fills are cached per key, so a resolver should live as long as
    the data it was created for.
    """

    def __init__(
        self,
        fill_of: Callable[[LayerKey], Any],
        marker_fill_of: Optional[Callable[[LayerKey], Any]] = None,
        stroke_of: Optional[Callable[[LayerKey], Color]] = None
    ):
        """Initialize the resolver.

        Args:
            fill_of: Maps a layer key to a colour or a point-to-colour function
            marker_fill_of: Same format, overrides `fill_of` for the focal marker
            stroke_of: Maps a layer key to a stroke colour
        """
        self.fill_of = fill_of
        self.marker_fill_of = marker_fill_of
        self.stroke_of = stroke_of
        self._fills: Dict[LayerKey, Fill] = {}
        self._marker_fills: Dict[LayerKey, Fill] = {}

    def layer_fill(self, key: LayerKey) -> Fill:
        """Get the fill of a layer."""
        if key not in self._fills:
            self._fills[key] = as_fill(self.fill_of(key))
        return self._fills[key]

    def marker_fill(self, key: LayerKey) -> Fill:
        """Get the focal marker fill of a layer, the layer fill by default."""
        if self.marker_fill_of is None:
            return self.layer_fill(key)
        if key not in self._marker_fills:
            self._marker_fills[key] = as_fill(self.marker_fill_of(key))
        return self._marker_fills[key]

    def stroke(self, key: LayerKey) -> Optional[Color]:
        """Get the stroke colour of a layer, None for no stroke."""
        if self.stroke_of is None:
            return None
        return self.stroke_of(key)


def linear_color_ramp(
    vmin: float,
    vmax: float,
    low: Color = 'yellow',
    high: Color = 'red'
) -> Callable[[float], str]:
    """Build a function mapping values linearly onto a two-stop colour ramp.

    Args:
        vmin: Value mapped to `low`
        vmax: Value mapped to `high`
        low: Colour of the low end
        high: Colour of the high end

    Returns:
        Callable returning hex colours; values outside the range are clipped
        and non-finite values get the low colour
    """
    cmap = LinearSegmentedColormap.from_list('ramp', [low, high])
    norm = Normalize(vmin=vmin, vmax=vmax, clip=True)
    low_hex = to_hex(low)

    def ramp(value: float) -> str:
        if value is None or not np.isfinite(value):
            return low_hex
        return to_hex(cmap(float(norm(value))))

    return ramp
