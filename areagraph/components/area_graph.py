"""Stacked area graph component."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..config import GraphConfig
from ..fills import FillResolver
from ..models import FocusMarker, LayerKey, Sample, SelectionState, StackedLayer, TooltipAnchor
from ..stacking import stack
from ..utils.cache import Memo
from ..utils.scales import (
    LinearScale,
    TimeLike,
    TimeScale,
    build_time_scale,
    build_value_scale,
    max_stacked_value,
)
from .interaction import (
    ChartInteractionController,
    GraphView,
    TimeIndexNotifier,
    TooltipHandler,
)

logger = logging.getLogger(__name__)


def _noop(*args, **kwargs) -> None:
    return None


@dataclass
class InteractionHandlers:
    """Pointer event handlers bound to a graph."""
    background_move: Callable[[float], Optional[TooltipAnchor]] = _noop
    background_tap: Callable[[float], Optional[TooltipAnchor]] = _noop
    background_out: Callable[[], None] = _noop
    layer_move: Callable[[int, float], Optional[TooltipAnchor]] = _noop
    layer_tap: Callable[[int, float], Optional[TooltipAnchor]] = _noop
    layer_out: Callable[[], None] = _noop


@dataclass
class GraphState:
    """Everything a renderer needs to draw the graph."""
    layers: List[StackedLayer] = field(default_factory=list)
    datetimes: List[datetime] = field(default_factory=list)
    time_scale: Optional[TimeScale] = None
    value_scale: Optional[LinearScale] = None
    selection: SelectionState = field(default_factory=SelectionState)
    tooltip_anchor: Optional[TooltipAnchor] = None
    marker: Optional[FocusMarker] = None
    handlers: InteractionHandlers = field(default_factory=InteractionHandlers)

    @property
    def is_empty(self) -> bool:
        """True if there is nothing to render."""
        return not self.layers or self.time_scale is None or self.value_scale is None


class AreaGraph:
    """Stacked area graph with pointer inspection.

    Derived values are cached on the identity of their inputs: calling
    `update` again with the same samples, keys and fill functions reuses
    the stacked layers, and pointer events never restack.
    """

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        notifier: Optional[TimeIndexNotifier] = None,
        tooltip_handler: Optional[TooltipHandler] = None
    ):
        """Initialize the graph.

        Args:
            config: Graph configuration
            notifier: Called with the focused time index so that other views
                can highlight the same instant
            tooltip_handler: Called with the tooltip anchor on every change
        """
        self.config = config or GraphConfig()
        self.controller = ChartInteractionController(
            self.config,
            notifier=notifier,
            tooltip_handler=tooltip_handler
        )

        self._layers = Memo('layers')
        self._datetimes = Memo('datetimes')
        self._max_value = Memo('max_value')
        self._time_scale = Memo('time_scale')
        self._value_scale = Memo('value_scale')

    @property
    def tooltip_anchor(self) -> Optional[TooltipAnchor]:
        return self.controller.anchor

    @property
    def selection(self) -> SelectionState:
        return self.controller.selection

    def plot_size(self, viewport_width: float, viewport_height: float) -> Tuple[float, float]:
        """Get the plot area size left after the axis reserves."""
        return (
            viewport_width - self.config.value_axis_width,
            viewport_height - self.config.time_axis_height
        )

    def update(
        self,
        samples: Sequence[Sample],
        layer_keys: Sequence[LayerKey],
        fill_of: Callable[[LayerKey], Any],
        viewport_width: float,
        viewport_height: float,
        stroke_of: Optional[Callable[[LayerKey], Any]] = None,
        marker_fill_of: Optional[Callable[[LayerKey], Any]] = None,
        start_time: Optional[TimeLike] = None,
        end_time: Optional[TimeLike] = None,
        selection: Optional[SelectionState] = None,
        is_mobile: bool = False,
        origin: Tuple[float, float] = (0.0, 0.0)
    ) -> GraphState:
        """Recompute the graph for new data or viewport.

        Args:
            samples: Samples sorted by datetime
            layer_keys: Layer keys in bottom-to-top order
            fill_of: Maps a layer key to a colour or a point-to-colour function
            viewport_width: Width of the graph surface in pixels
            viewport_height: Height of the graph surface in pixels
            stroke_of: Maps a layer key to a stroke colour
            marker_fill_of: Overrides `fill_of` for the focal marker
            start_time: Start of the time domain, first sample if None
            end_time: End of the time domain, last sample if None
            selection: Selection recorded by the host to adopt
            is_mobile: Whether events come from taps instead of hover
            origin: Page position of the plot area

        Returns:
            GraphState: Geometry, anchor and bound handlers; empty when there
            is nothing to render
        """
        width, height = self.plot_size(viewport_width, viewport_height)

        layers = self._layers(
            (samples, layer_keys, fill_of, stroke_of, marker_fill_of),
            lambda: stack(
                samples,
                layer_keys,
                FillResolver(fill_of, marker_fill_of=marker_fill_of, stroke_of=stroke_of),
                strict=self.config.strict
            )
        )
        datetimes = self._datetimes(
            (samples,),
            lambda: [sample.datetime for sample in samples or []]
        )
        max_value = self._max_value((layers,), lambda: max_stacked_value(layers))
        value_scale = self._value_scale(
            (height, max_value),
            lambda: build_value_scale(
                height,
                max_value,
                padding=self.config.value_axis_padding,
                headroom=self.config.value_headroom
            )
        )
        time_scale = self._time_scale(
            (width, datetimes, start_time, end_time),
            lambda: build_time_scale(datetimes, start_time, end_time, width)
        )

        if not layers or time_scale is None or width <= 0 or height <= 0:
            logger.debug("Nothing to render")
            self.controller.attach(GraphView(is_mobile=is_mobile))
            return GraphState()

        self.controller.attach(GraphView(
            layers=layers,
            datetimes=datetimes,
            time_scale=time_scale,
            value_scale=value_scale,
            origin=origin,
            is_mobile=is_mobile
        ))
        if selection is not None:
            self.controller.select(selection)

        return GraphState(
            layers=layers,
            datetimes=datetimes,
            time_scale=time_scale,
            value_scale=value_scale,
            selection=self.controller.selection,
            tooltip_anchor=self.controller.anchor,
            marker=self.controller.marker,
            handlers=InteractionHandlers(
                background_move=self.controller.background_move,
                background_tap=self.controller.background_tap,
                background_out=self.controller.pointer_out,
                layer_move=self.controller.layer_move,
                layer_tap=self.controller.layer_tap,
                layer_out=self.controller.pointer_out
            )
        )
