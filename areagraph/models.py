"""Data model of the stacked area graph."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from .fills import Fill

logger = logging.getLogger(__name__)

LayerKey = str


@dataclass
class Sample:
    """One input record of the graph."""
    datetime: datetime
    values: Dict[LayerKey, float] = field(default_factory=dict)
    meta: Any = None  # Pointer to the original record

    def value(self, key: LayerKey) -> float:
        """Get the value of a layer, NaN if missing."""
        value = self.values.get(key)
        if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
            return np.nan
        return value


@dataclass
class DataPoint:
    """Stacked `[baseline, top]` pair of one sample in one layer."""
    baseline: float
    top: float
    sample: Sample

    def __iter__(self) -> Iterator[float]:
        yield self.baseline
        yield self.top

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return (self.baseline, self.top)[index]

    def as_pair(self) -> List[float]:
        return [self.baseline, self.top]


@dataclass
class StackedLayer:
    """One stacked band of the graph."""
    key: LayerKey
    stroke: Optional[str]
    fill: 'Fill'
    marker_fill: 'Fill'
    datapoints: List[DataPoint] = field(default_factory=list)

    def fill_at(self, index: int) -> Any:
        """Resolve the fill colour of the data point at `index`."""
        return self.fill.color_at(self.datapoints[index])

    def marker_fill_at(self, index: int) -> Any:
        """Resolve the marker colour of the data point at `index`."""
        return self.marker_fill.color_at(self.datapoints[index])


@dataclass(frozen=True)
class SelectionState:
    """Focused `(time_index, layer_index)`; both None when idle."""
    time_index: Optional[int] = None
    layer_index: Optional[int] = None

    @property
    def is_idle(self) -> bool:
        return self.time_index is None or self.layer_index is None

    def is_valid_for(self, n_samples: int, n_layers: int) -> bool:
        """Check whether the selection indexes data of the given size."""
        if self.is_idle:
            return True
        return 0 <= self.time_index < n_samples and 0 <= self.layer_index < n_layers


IDLE = SelectionState()


@dataclass(frozen=True)
class FocusMarker:
    """Pixel position and colour of the focused data point."""
    x: float
    y: float
    fill: Any
    time_index: int
    layer_index: int


@dataclass(frozen=True)
class TooltipAnchor:
    """Pixel position of the detail tooltip and the sample it describes."""
    x: float
    y: float
    sample: Sample

    @property
    def meta(self) -> Any:
        return self.sample.meta


def validate_samples(
    samples: Sequence[Sample],
    layer_keys: Sequence[LayerKey],
    strict: bool = True
) -> None:
    """Check the caller contract on graph input.

    Samples must be sorted by datetime and carry a value for every layer key.
    In strict mode a violation raises, otherwise it is logged and the graph
    degrades (missing values count as non-finite).

    Args:
        samples: Input samples
        layer_keys: Layer keys in stacking order
        strict: Whether to raise on violations

    Raises:
        ValueError: If the contract is violated in strict mode
    """
    problems = []
    for i in range(1, len(samples)):
        if samples[i].datetime < samples[i - 1].datetime:
            problems.append(f"Samples are not sorted by datetime at index {i}")
            break

    for i, sample in enumerate(samples):
        missing = [key for key in layer_keys if key not in sample.values]
        if missing:
            problems.append(f"Sample {i} is missing layer keys: {missing}")
            break

    for problem in problems:
        if strict:
            raise ValueError(problem)
        logger.warning(problem)


def samples_from_records(
    records: Iterable[Mapping[str, Any]],
    datetime_key: str,
    layer_keys: Sequence[LayerKey]
) -> List[Sample]:
    """Build samples from dict records, keeping each record as `meta`.

    Args:
        records: Input records
        datetime_key: Key of the timestamp in each record
        layer_keys: Keys of the layer values in each record

    Returns:
        List[Sample]: Samples in input order
    """
    samples = []
    for record in records:
        values = {key: record[key] for key in layer_keys if key in record}
        samples.append(Sample(
            datetime=pd.Timestamp(record[datetime_key]).to_pydatetime(),
            values=values,
            meta=record
        ))
    return samples


def samples_from_frame(
    df: pd.DataFrame,
    datetime_column: str,
    layer_keys: Sequence[LayerKey]
) -> List[Sample]:
    """Build samples from a DataFrame, keeping each row as `meta`.

    Args:
        df: Input data, one row per timestamp
        datetime_column: Timestamp column
        layer_keys: Value columns in stacking order

    Returns:
        List[Sample]: Samples in row order

    Raises:
        ValueError: If a required column is missing
    """
    required_columns = [datetime_column] + list(layer_keys)
    missing_columns = [col for col in required_columns if col not in df.columns]
    if missing_columns:
        raise ValueError(f"Missing required columns: {missing_columns}")

    timestamps = pd.to_datetime(df[datetime_column])
    # Nullable dtypes hold pd.NA for missing cells
    values = df[list(layer_keys)].apply(pd.to_numeric, errors='coerce').to_numpy(
        dtype=float,
        na_value=np.nan
    )
    samples = []
    for i, (_, row) in enumerate(df.iterrows()):
        samples.append(Sample(
            datetime=timestamps.iloc[i].to_pydatetime(),
            values={key: float(values[i, j]) for j, key in enumerate(layer_keys)},
            meta=row
        ))
    return samples
