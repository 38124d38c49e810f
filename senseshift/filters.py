"""Value filters and the mixin that chains them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from senseshift.helpers import lookup_table_interpolate_linear


class Filter(ABC):
    """Transforms one sensor value into another."""

    @abstractmethod
    def filter(self, sensor: Any, value: Any) -> Any:
        """Return the filtered form of ``value`` read from ``sensor`` (which may be ``None``)."""


class Filtered:
    """Mixin holding an ordered chain of filters."""

    def __init__(self) -> None:
        super().__init__()
        self.filters: list[Filter] = []

    def add_filter(self, filter_: Filter) -> None:
        """Append one filter to the end of the chain."""
        self.filters.append(filter_)

    def add_filters(self, filters: Iterable[Filter]) -> None:
        """Append several filters to the end of the chain, keeping their order."""
        self.filters.extend(filters)

    def set_filters(self, filters: Iterable[Filter]) -> None:
        """Replace the whole chain."""
        self.filters = list(filters)

    def clear_filters(self) -> None:
        """Remove every filter from the chain."""
        self.filters.clear()


class AddFilter(Filter):
    """Adds a fixed offset."""

    def __init__(self, offset) -> None:
        self.offset = offset

    def filter(self, sensor, value):
        return value + self.offset


class SubtractFilter(Filter):
    """Subtracts a fixed offset."""

    def __init__(self, offset) -> None:
        self.offset = offset

    def filter(self, sensor, value):
        return value - self.offset


class MultiplyFilter(Filter):
    """Multiplies by a fixed factor."""

    def __init__(self, factor) -> None:
        self.factor = factor

    def filter(self, sensor, value):
        return value * self.factor


class VoltageDividerFilter(MultiplyFilter):
    """Recovers the original voltage in front of a voltage divider of resistors ``r1`` and ``r2`` (Ohms)."""

    def __init__(self, r1: float, r2: float) -> None:
        super().__init__((r1 + r2) / r2)


class ClampFilter(Filter):
    """Keeps the value within ``min_value``..``max_value``."""

    def __init__(self, min_value, max_value) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def filter(self, sensor, value):
        if value < self.min_value:
            return self.min_value
        if self.max_value < value:
            return self.max_value
        return value


MinMaxFilter = ClampFilter
RangeFilter = ClampFilter


class LambdaFilter(Filter):
    """Applies an arbitrary one-argument function."""

    def __init__(self, function: Callable[[Any], Any]) -> None:
        self.function = function

    def filter(self, sensor, value):
        return self.function(value)


def _average(values) -> Any:
    total = sum(values)
    count = len(values)
    if isinstance(total, int):
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient
    return total / count


class SlidingWindowMovingAverageFilter(Filter):
    """Averages the last ``window_size`` values."""

    def __init__(self, window_size: int) -> None:
        if window_size < 1:
            raise ValueError("window size must be at least 1")
        self.window_size = window_size
        self._queue: deque = deque(maxlen=window_size)

    def filter(self, sensor, value):
        self._queue.append(value)
        return _average(self._queue)


class ExponentialMovingAverageFilter(Filter):
    """Exponentially smooths values; the first value passes through unchanged."""

    def __init__(self, alpha: float) -> None:
        self.alpha = alpha
        self._acc = None

    def filter(self, sensor, value):
        if self._acc is None:
            self._acc = value
        else:
            self._acc = self.alpha * value + (1 - self.alpha) * self._acc
        return self._acc


class SinglePointDeadzoneFilter(Filter):
    """Snaps values lying within ``deadzone`` of ``center`` to ``center``."""

    def __init__(self, deadzone: float, center: float = 0.5) -> None:
        self.deadzone = deadzone
        self.center = center

    def filter(self, sensor, value):
        return self.center if abs(value - self.center) < self.deadzone else value


CenterDeadzoneFilter = SinglePointDeadzoneFilter


class LookupTableInterpolationFilter(Filter):
    """Interpolates the value through a key-to-value table, e.g. voltage to battery level."""

    def __init__(self, lookup_table: Mapping[Any, Any]) -> None:
        self.lookup_table = lookup_table

    def filter(self, sensor, value):
        return lookup_table_interpolate_linear(self.lookup_table, value)


class AnalogInvertFilter(Filter):
    """Inverts an analog value in the range 0.0..1.0."""

    def filter(self, sensor, value):
        return 1.0 - value