"""Pointer interaction of the area graph."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..config import GraphConfig
from ..locator import locate
from ..models import IDLE, FocusMarker, SelectionState, StackedLayer, TooltipAnchor
from ..utils.scales import LinearScale, TimeScale

logger = logging.getLogger(__name__)

TimeIndexNotifier = Callable[[Optional[int]], None]
TooltipHandler = Callable[[Optional[TooltipAnchor]], None]


@dataclass
class GraphView:
    """Geometry the controller resolves pointer events against."""
    layers: List[StackedLayer] = field(default_factory=list)
    datetimes: List[datetime] = field(default_factory=list)
    time_scale: Optional[TimeScale] = None
    value_scale: Optional[LinearScale] = None
    origin: Tuple[float, float] = (0.0, 0.0)  # Page position of the plot area
    is_mobile: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.layers or self.time_scale is None or self.value_scale is None


def focus_marker(view: GraphView, selection: SelectionState) -> Optional[FocusMarker]:
    """Get the marker of the selected data point, None when idle."""
    if selection.is_idle or view.is_empty:
        return None
    layer = view.layers[selection.layer_index]
    point = layer.datapoints[selection.time_index]
    return FocusMarker(
        x=view.origin[0] + view.time_scale(view.datetimes[selection.time_index]),
        y=view.origin[1] + view.value_scale(point.top),
        fill=layer.marker_fill_at(selection.time_index),
        time_index=selection.time_index,
        layer_index=selection.layer_index
    )


def tooltip_position(
    is_mobile: bool,
    marker: FocusMarker,
    offset: float = 7.0,
    mobile_anchor: Tuple[float, float] = (0.0, 0.0)
) -> Tuple[float, float]:
    """Get the tooltip position for a marker.

    On mobile the tooltip goes to a fixed spot for readability, otherwise it
    floats next to the marker.
    """
    if is_mobile:
        return mobile_anchor
    return (marker.x - offset, marker.y - offset)


class ChartInteractionController:
    """Selection state machine driven by pointer events.

    The controller is the only writer of the selection. After each
    transition the marker and tooltip anchor are recomputed before the host
    callbacks run.
    """

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        notifier: Optional[TimeIndexNotifier] = None,
        tooltip_handler: Optional[TooltipHandler] = None
    ):
        """Initialize the controller.

        Args:
            config: Graph configuration
            notifier: Called with the focused time index, None on clear
            tooltip_handler: Called with the new tooltip anchor, None on clear
        """
        self.config = config or GraphConfig()
        self.notifier = notifier
        self.tooltip_handler = tooltip_handler

        self.view = GraphView()
        self.selection: SelectionState = IDLE
        self.marker: Optional[FocusMarker] = None
        self.anchor: Optional[TooltipAnchor] = None

    @property
    def is_focused(self) -> bool:
        return not self.selection.is_idle

    def attach(self, view: GraphView) -> None:
        """Bind the controller to new geometry.

        A selection that no longer fits the data is reset to idle.

        Args:
            view: Current layers, datetimes and scales
        """
        self.view = view
        n_samples = len(view.datetimes)
        if self.is_focused and (
            view.is_empty or not self.selection.is_valid_for(n_samples, len(view.layers))
        ):
            logger.debug(f"Resetting stale selection {self.selection}")
            self._transition(IDLE)
        else:
            self._recompute()

    def select(self, selection: SelectionState) -> Optional[TooltipAnchor]:
        """Adopt a selection recorded elsewhere, e.g. by a sibling graph.

        Args:
            selection: Selection to adopt

        Returns:
            Optional[TooltipAnchor]: Anchor of the resulting selection
        """
        if selection == self.selection:
            return self.anchor
        n_samples = len(self.view.datetimes)
        if selection.is_idle:
            self._transition(IDLE)
        elif self.view.is_empty or not selection.is_valid_for(n_samples, len(self.view.layers)):
            logger.debug(f"Ignoring out-of-range selection {selection}")
            self._transition(IDLE)
        else:
            self._transition(selection)
        return self.anchor

    def background_move(self, x: float) -> Optional[TooltipAnchor]:
        """Handle hover over the graph background."""
        if self.view.is_mobile:
            return self.anchor
        return self._focus(x, self.config.reference_layer_index)

    def layer_move(self, layer_index: int, x: float) -> Optional[TooltipAnchor]:
        """Handle hover over a layer."""
        if self.view.is_mobile:
            return self.anchor
        return self._focus(x, layer_index)

    def background_tap(self, x: float) -> Optional[TooltipAnchor]:
        """Handle a tap on the graph background (mobile)."""
        if not self.view.is_mobile:
            return self.anchor
        return self._focus(x, self.config.reference_layer_index)

    def layer_tap(self, layer_index: int, x: float) -> Optional[TooltipAnchor]:
        """Handle a tap on a layer (mobile)."""
        if not self.view.is_mobile:
            return self.anchor
        return self._focus(x, layer_index)

    def pointer_out(self) -> None:
        """Handle the pointer leaving the graph."""
        if self.view.is_empty:
            return
        self._transition(IDLE)

    def clear(self) -> None:
        """Clear the selection."""
        if self.view.is_empty:
            return
        self._transition(IDLE)

    def _focus(self, x: float, layer_index: int) -> Optional[TooltipAnchor]:
        if self.view.is_empty:
            return None

        if not 0 <= layer_index < len(self.view.layers):
            message = f"Layer index {layer_index} out of range for {len(self.view.layers)} layers"
            if self.config.strict:
                raise ValueError(message)
            logger.warning(message)
            return self.anchor

        time_index = locate(x - self.view.origin[0], self.view.datetimes, self.view.time_scale)
        if time_index is None:
            return self.anchor
        self._transition(SelectionState(time_index, layer_index))
        return self.anchor

    def _transition(self, selection: SelectionState) -> None:
        self.selection = selection
        self._recompute()
        if self.notifier is not None:
            self.notifier(selection.time_index)
        if self.tooltip_handler is not None:
            self.tooltip_handler(self.anchor)

    def _recompute(self) -> None:
        self.marker = focus_marker(self.view, self.selection)
        if self.marker is None:
            self.anchor = None
            return
        x, y = tooltip_position(
            self.view.is_mobile,
            self.marker,
            offset=self.config.tooltip_offset,
            mobile_anchor=self.config.mobile_anchor
        )
        sample = self.view.layers[self.selection.layer_index].datapoints[self.selection.time_index].sample
        self.anchor = TooltipAnchor(x=x, y=y, sample=sample)
