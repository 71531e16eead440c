"""Graph components."""

from .area_graph import AreaGraph, GraphState, InteractionHandlers
from .interaction import ChartInteractionController, GraphView, focus_marker, tooltip_position

__all__ = [
    'AreaGraph',
    'GraphState',
    'InteractionHandlers',
    'ChartInteractionController',
    'GraphView',
    'focus_marker',
    'tooltip_position'
]
