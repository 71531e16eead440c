"""Memoization utilities for derived graph values."""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Callable, Optional, Tuple

logger = logging.getLogger(__name__)

# Inputs of these types are compared by value, everything else by identity
_VALUE_TYPES = (type(None), bool, int, float, str, bytes, date, datetime, timedelta, tuple)


def same_input(a: Any, b: Any) -> bool:
    """Check whether two memo inputs are the same.

    Containers and callables match only when they are the same object;
    scalars and tuples of scalars match on equality.
    """
    if a is b:
        return True
    if isinstance(a, _VALUE_TYPES) and type(a) is type(b):
        if isinstance(a, tuple):
            return len(a) == len(b) and all(same_input(x, y) for x, y in zip(a, b))
        return a == b
    return False


class Memo:
    """Single-slot cache that recomputes only when its inputs change."""

    def __init__(self, name: str = ""):
        """Initialize the memo.

        Args:
            name: Name used in log messages
        """
        self.name = name
        self._inputs: Optional[Tuple[Any, ...]] = None
        self._value: Any = None
        self.hits = 0
        self.misses = 0

    def matches(self, inputs: Tuple[Any, ...]) -> bool:
        """Check whether `inputs` are the cached inputs."""
        return self._inputs is not None and same_input(tuple(inputs), self._inputs)

    def clear(self) -> None:
        """Drop the cached value."""
        self._inputs = None
        self._value = None

    def __call__(self, inputs: Tuple[Any, ...], compute: Callable[[], Any]) -> Any:
        """Return the cached value for `inputs` or compute and store it.

        Args:
            inputs: Values the result depends on
            compute: Function producing the value

        Returns:
            Any: Cached or freshly computed value
        """
        if self.matches(inputs):
            self.hits += 1
            return self._value

        logger.debug(f"Recomputing '{self.name}'")
        self.misses += 1
        self._value = compute()
        self._inputs = tuple(inputs)
        return self._value
