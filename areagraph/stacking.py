"""Diverging stacking of graph layers."""

import logging
from typing import List, Sequence

import numpy as np

from .fills import FillResolver
from .models import DataPoint, LayerKey, Sample, StackedLayer, validate_samples

logger = logging.getLogger(__name__)


def stack_values(values: np.ndarray) -> np.ndarray:
    """Stack a (samples x layers) value matrix with a diverging offset.

    Non-negative values pile up from zero on a running positive sum, negative
    values pile down on a running negative sum. Non-finite values make a
    zero-height band on the positive sum.

    Args:
        values: Value matrix, one column per layer in stacking order

    Returns:
        np.ndarray: Array of shape (layers, samples, 2) holding the
        `[lower, upper]` pair of every band
    """
    values = np.asarray(values, dtype=float)
    n_samples, n_layers = values.shape
    values = np.where(np.isfinite(values), values, 0.0)

    result = np.empty((n_layers, n_samples, 2))
    positive = np.zeros(n_samples)
    negative = np.zeros(n_samples)
    for j in range(n_layers):
        v = values[:, j]
        up = v >= 0
        result[j, :, 0] = np.where(up, positive, negative + v)
        result[j, :, 1] = np.where(up, positive + v, negative)
        positive = np.where(up, positive + v, positive)
        negative = np.where(up, negative, negative + v)
    return result


def stack(
    samples: Sequence[Sample],
    layer_keys: Sequence[LayerKey],
    fills: FillResolver,
    strict: bool = True
) -> List[StackedLayer]:
    """Transform samples into stacked layers.

    Args:
        samples: Samples sorted by datetime
        layer_keys: Layer keys in bottom-to-top order
        fills: Fill resolver for the current data
        strict: Whether to raise on caller contract violations

    Returns:
        List[StackedLayer]: One layer per key, empty if there is nothing to stack
    """
    if not samples or not layer_keys:
        return []

    validate_samples(samples, layer_keys, strict=strict)

    values = np.array(
        [[sample.value(key) for key in layer_keys] for sample in samples],
        dtype=float
    )
    stacked = stack_values(values)
    logger.debug(f"Stacked {len(layer_keys)} layers over {len(samples)} samples")

    layers = []
    for j, key in enumerate(layer_keys):
        datapoints = [
            DataPoint(float(lower), float(upper), sample)
            for (lower, upper), sample in zip(stacked[j], samples)
        ]
        layers.append(StackedLayer(
            key=key,
            stroke=fills.stroke(key),
            fill=fills.layer_fill(key),
            marker_fill=fills.marker_fill(key),
            datapoints=datapoints
        ))
    return layers
