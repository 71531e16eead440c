"""Price history graph preparation."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .fills import linear_color_ramp
from .models import DataPoint, LayerKey, Sample

logger = logging.getLogger(__name__)

PRICE_LAYER_KEY = 'price'


@dataclass
class PriceGraphData:
    """Inputs of an area graph showing a price history."""
    samples: List[Sample]
    layer_keys: List[LayerKey]
    stroke_of: Callable[[LayerKey], Any]
    fill_of: Callable[[LayerKey], Any]
    marker_fill_of: Callable[[LayerKey], Callable[[DataPoint], Any]]
    max_price: float


def _price_value(record: Mapping[str, Any]) -> float:
    price = record.get('price') or {}
    value = price.get('value') if isinstance(price, Mapping) else None
    if value is None:
        return np.nan
    return float(value)


def prepare_price_graph(
    history: Union[Sequence[Mapping[str, Any]], pd.DataFrame],
    low_color: str = 'yellow',
    high_color: str = 'red'
) -> Optional[PriceGraphData]:
    """Prepare graph inputs from a zone price history.

    Each history record has a `stateDatetime` and a `price` mapping with a
    `value`. The focal marker is coloured on a ramp over `[0, max price]`.

    Args:
        history: Price history records, oldest first
        low_color: Marker colour at price 0
        high_color: Marker colour at the maximum price

    Returns:
        Optional[PriceGraphData]: Graph inputs, None if the history is empty
    """
    if isinstance(history, pd.DataFrame):
        records: List[Dict[str, Any]] = history.to_dict('records')
    else:
        records = list(history or [])
    if not records:
        return None

    prices = np.array([_price_value(record) for record in records], dtype=float)
    finite = prices[np.isfinite(prices)]
    max_price = float(finite.max()) if finite.size else 0.0
    ramp = linear_color_ramp(0.0, max(max_price, 0.0), low=low_color, high=high_color)

    timestamps = pd.to_datetime([record['stateDatetime'] for record in records])
    samples = [
        Sample(
            datetime=timestamp.to_pydatetime(),
            values={PRICE_LAYER_KEY: float(price)},
            meta=record
        )
        for record, timestamp, price in zip(records, timestamps, prices)
    ]
    logger.debug(f"Prepared price graph with {len(samples)} samples, max price {max_price}")

    def marker_fill_of(key: LayerKey) -> Callable[[DataPoint], Any]:
        return lambda point: ramp(point.sample.value(key))

    return PriceGraphData(
        samples=samples,
        layer_keys=[PRICE_LAYER_KEY],
        stroke_of=lambda key: 'darkgray',
        fill_of=lambda key: '#616161',
        marker_fill_of=marker_fill_of,
        max_price=max_price
    )
