"""Tests for graph configuration."""

import pytest

from areagraph.config import GraphConfig


def test_defaults():
    """Test default configuration values."""
    config = GraphConfig()
    assert config.value_axis_width == 40
    assert config.time_axis_height == 20
    assert config.value_axis_padding == 4
    assert config.value_headroom == pytest.approx(1.1)
    assert config.tooltip_offset == 7
    assert config.mobile_anchor == (0.0, 0.0)
    assert config.reference_layer_index == 0


@pytest.mark.parametrize('values', [
    {'value_axis_width': -1},
    {'time_axis_height': -1},
    {'value_axis_padding': -0.5},
    {'value_headroom': 0.9},
    {'reference_layer_index': -1},
])
def test_validation(values):
    """Test invalid values are rejected."""
    with pytest.raises(ValueError):
        GraphConfig(**values)


def test_from_dict():
    """Test building a configuration from a dictionary."""
    config = GraphConfig.from_dict({
        'tooltip_offset': 10,
        'mobile_anchor': [5, 6],
        'strict': False,
        'unknown': 'ignored',
    })

    assert config.tooltip_offset == 10
    assert config.mobile_anchor == (5, 6)
    assert config.strict is False
    assert config.value_axis_width == 40


def test_from_dict_validates():
    """Test dictionary values are validated."""
    with pytest.raises(ValueError, match='headroom'):
        GraphConfig.from_dict({'value_headroom': 0.5})
