"""Integration tests for the price history graph."""

import pandas as pd
import pytest

from areagraph import AreaGraph, GraphConfig, SelectionState, prepare_price_graph
from areagraph.prices import PRICE_LAYER_KEY


@pytest.fixture
def price_history():
    """Zone price history as delivered by the backend."""
    return [
        {'stateDatetime': '2024-01-01T00:00:00Z', 'price': {'value': 10.0, 'currency': 'EUR'}},
        {'stateDatetime': '2024-01-01T01:00:00Z', 'price': {'value': 20.0, 'currency': 'EUR'}},
        {'stateDatetime': '2024-01-01T02:00:00Z', 'price': {'value': 5.0, 'currency': 'EUR'}},
        {'stateDatetime': '2024-01-01T03:00:00Z', 'price': None},
    ]


def test_prepare_price_graph(price_history):
    """Test history records become graph inputs."""
    data = prepare_price_graph(price_history)

    assert data.layer_keys == [PRICE_LAYER_KEY]
    assert len(data.samples) == 4
    assert data.samples[1].meta is price_history[1]
    assert data.samples[0].value(PRICE_LAYER_KEY) == 10.0
    assert pd.isna(data.samples[3].value(PRICE_LAYER_KEY))
    assert data.max_price == 20.0
    assert data.stroke_of(PRICE_LAYER_KEY) == 'darkgray'
    assert data.fill_of(PRICE_LAYER_KEY) == '#616161'


def test_prepare_empty_history():
    """Test an empty history gives no graph."""
    assert prepare_price_graph([]) is None
    assert prepare_price_graph(None) is None
    assert prepare_price_graph(pd.DataFrame()) is None


def test_prepare_from_frame(price_history):
    """Test a DataFrame history is accepted."""
    data = prepare_price_graph(pd.DataFrame(price_history))

    assert len(data.samples) == 4
    assert data.samples[2].meta['price']['value'] == 5.0


def test_price_graph_interaction(price_history):
    """Test hovering the price graph colours the marker by price."""
    data = prepare_price_graph(price_history)
    notified = []
    tooltips = []
    graph = AreaGraph(GraphConfig(), notifier=notified.append, tooltip_handler=tooltips.append)

    state = graph.update(
        data.samples,
        data.layer_keys,
        data.fill_of,
        viewport_width=340,
        viewport_height=120,
        stroke_of=data.stroke_of,
        marker_fill_of=data.marker_fill_of
    )

    assert not state.is_empty
    assert [dp.as_pair() for dp in state.layers[0].datapoints] == [[0, 10], [0, 20], [0, 5], [0, 0]]
    assert state.layers[0].fill_at(1) == '#616161'

    # Samples are 100 px apart
    state.handlers.background_move(100)
    assert graph.controller.marker.fill == '#ff0000'
    assert tooltips[-1].meta['price']['value'] == 20.0

    # Missing price gets the low end of the ramp
    state.handlers.background_move(300)
    assert graph.controller.marker.fill == '#ffff00'

    state.handlers.background_out()
    assert notified == [1, 3, None]
    assert tooltips[-1] is None


def test_coordinated_graphs(price_history):
    """Test a time index focused in one graph can drive a sibling graph."""
    data = prepare_price_graph(price_history)
    sibling = AreaGraph(GraphConfig())
    inputs = dict(
        samples=data.samples,
        layer_keys=data.layer_keys,
        fill_of=data.fill_of,
        viewport_width=340,
        viewport_height=120
    )
    sibling.update(**inputs)

    def share(time_index):
        sibling.update(**inputs, selection=SelectionState(time_index, 0) if time_index is not None else SelectionState())

    graph = AreaGraph(GraphConfig(), notifier=share)
    state = graph.update(**inputs)

    state.handlers.background_move(200)
    assert sibling.selection == SelectionState(2, 0)
    assert sibling.tooltip_anchor.meta is price_history[2]

    state.handlers.background_out()
    assert sibling.selection == SelectionState()
