"""Graph configuration."""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass
class GraphConfig:
    """Layout and behaviour configuration of the area graph."""
    value_axis_width: float = 40.0  # Horizontal space reserved for the value axis
    time_axis_height: float = 20.0  # Vertical space reserved for the time axis
    value_axis_padding: float = 4.0  # Top padding so peaks aren't clipped
    value_headroom: float = 1.1  # Value domain = max stacked value * headroom
    tooltip_offset: float = 7.0
    mobile_anchor: Tuple[float, float] = (0.0, 0.0)
    reference_layer_index: int = 0  # Layer focused by background events
    strict: bool = __debug__  # Raise on caller contract violations

    def __post_init__(self):
        """Validate after construction."""
        self.validate()

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a value is out of range
        """
        if self.value_axis_width < 0 or self.time_axis_height < 0:
            raise ValueError("Axis reserves must be non-negative")
        if self.value_axis_padding < 0:
            raise ValueError("Value axis padding must be non-negative")
        if self.value_headroom < 1.0:
            raise ValueError("Value headroom must be at least 1.0")
        if self.reference_layer_index < 0:
            raise ValueError("Reference layer index must be non-negative")

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'GraphConfig':
        """Create a configuration from a dictionary, ignoring unknown keys.

        Args:
            config: Configuration values

        Returns:
            GraphConfig: Validated configuration
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in config.items() if k in known}
        if 'mobile_anchor' in values:
            values['mobile_anchor'] = tuple(values['mobile_anchor'])
        return cls(**values)
