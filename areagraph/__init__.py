"""Stacked area time-series graph with pointer inspection."""

from .config import GraphConfig
from .models import (
    DataPoint,
    FocusMarker,
    LayerKey,
    Sample,
    SelectionState,
    StackedLayer,
    TooltipAnchor,
    samples_from_frame,
    samples_from_records,
)
from .fills import FillResolver, Gradient, Solid, as_fill, linear_color_ramp
from .stacking import stack
from .locator import locate
from .components import AreaGraph, ChartInteractionController, GraphState
from .prices import PriceGraphData, prepare_price_graph

__all__ = [
    'GraphConfig',
    'DataPoint',
    'FocusMarker',
    'LayerKey',
    'Sample',
    'SelectionState',
    'StackedLayer',
    'TooltipAnchor',
    'samples_from_frame',
    'samples_from_records',
    'FillResolver',
    'Gradient',
    'Solid',
    'as_fill',
    'linear_color_ramp',
    'stack',
    'locate',
    'AreaGraph',
    'ChartInteractionController',
    'GraphState',
    'PriceGraphData',
    'prepare_price_graph',
]
