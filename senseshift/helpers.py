"""Numeric helpers and a multi-subscriber callback list."""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)


def _truncating_div(numerator, denominator):
    """Divide like a typed division: integers truncate toward zero, others divide exactly."""
    if isinstance(numerator, int) and isinstance(denominator, int):
        quotient = abs(numerator) // abs(denominator)
        return quotient if (numerator >= 0) == (denominator > 0) else -quotient
    return numerator / denominator


def lerp(completion: float, start, end):
    """Linearly interpolate between ``start`` and ``end`` by ``completion`` (0..1).

    Integer endpoints give an integer result, truncated toward zero.
    """
    result = start + (end - start) * completion
    if isinstance(start, int) and isinstance(end, int):
        return int(result)
    return result


def remap(value, min_value, max_value, min_out, max_out):
    """Remap ``value`` from (``min_value``, ``max_value``) to (``min_out``, ``max_out``).

    An empty or inverted input range is logged and yields the middle of the output range.
    """
    if max_value <= min_value:
        logger.error("[util.remap] Invalid input range, min <= max")
        return _truncating_div(min_out + max_out, 2)
    numerator = (value - min_value) * (max_out - min_out)
    return _truncating_div(numerator, max_value - min_value) + min_out


def remap_simple(value, max_value, max_out):
    """Remap ``value`` from (0, ``max_value``) to (0, ``max_out``)."""
    return _truncating_div(value * max_out, max_value)


def lookup_table_interpolate_linear(lookup_table: Mapping[Any, Any], value):
    """Look ``value`` up in a key-to-value table, interpolating between the two nearest keys.

    Values outside the table's key range give the value of the nearest end.
    """
    if not lookup_table:
        raise ValueError("lookup table is empty")
    keys = sorted(lookup_table)
    if value <= keys[0]:
        return lookup_table[keys[0]]
    if value >= keys[-1]:
        return lookup_table[keys[-1]]

    index = bisect_left(keys, value)
    upper = keys[index]
    lower = keys[index - 1]
    completion = float(_truncating_div(value - lower, upper - lower))
    return lerp(completion, lookup_table[lower], lookup_table[upper])


def version_code(major: int, minor: int, patch: int) -> int:
    """Pack a version into one comparable integer."""
    return (major << 16) | (minor << 8) | patch


class CallbackManager:
    """A list of callbacks that are all called with the same arguments."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def add(self, callback: Callable[..., Any]) -> None:
        """Append a callback."""
        self._callbacks.append(callback)

    def call(self, *args: Any) -> None:
        """Call every callback, in the order they were added."""
        for callback in self._callbacks:
            callback(*args)

    def __call__(self, *args: Any) -> None:
        self.call(*args)

    def __len__(self) -> int:
        return len(self._callbacks)