"""Volume-weighted and least-squares moving averages over numeric data series.

The single-window functions suit streaming use, where only the most recent
window matters; the ``*_series`` functions suit batch analysis and plotting.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real
from typing import TypeVar

from quant_mathema.errors import InvalidCastError

__all__ = ["vwma", "vwma_series", "lsma", "lsma_series"]

T = TypeVar("T")


def _to_float(value: Real) -> float:
    """Convert to float, falling back to 0.0 for values a float cannot hold."""
    try:
        return float(value)
    except OverflowError:
        return 0.0


def _cast(value: Real) -> float:
    """Convert to float, raising InvalidCastError when a float cannot hold it."""
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidCastError() from exc


def _windows(values: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield every contiguous window of ``size`` values, in order."""
    window: deque[T] = deque(maxlen=size)
    for value in values:
        window.append(value)
        if len(window) == size:
            yield list(window)


def vwma(data_window: Iterable[Real], volume_window: Iterable[Real]) -> float:
    """Return the volume-weighted moving average of one window.

    Returns 0.0 when the windows differ in length or are empty. When the
    volumes sum to zero or less, the last data value is returned.
    """
    prices = [_to_float(x) for x in data_window]
    volumes = [_to_float(v) for v in volume_window]
    if len(prices) != len(volumes) or not prices:
        return 0.0

    volume_sum = sum(volumes)
    if volume_sum > 0.0:
        return sum(p * v for p, v in zip(prices, volumes)) / volume_sum
    return prices[-1]


def vwma_series(
    data: Iterable[Real], volume_data: Iterable[Real], window_len: int
) -> list[float]:
    """Return the volume-weighted moving average of every sliding window.

    Returns an empty list when the series differ in length, are empty, or
    are shorter than ``window_len``. Raises ValueError when ``window_len``
    is not positive.
    """
    prices = list(data)
    volumes = list(volume_data)
    if len(prices) != len(volumes) or not prices:
        return []
    if window_len <= 0:
        raise ValueError(f"window_len must be positive, got {window_len}")
    return [
        vwma(price_window, volume_window)
        for price_window, volume_window in zip(
            _windows(prices, window_len), _windows(volumes, window_len)
        )
    ]


def lsma(data_window: Iterable[Real]) -> float:
    """Return the least-squares moving average of one window.

    A line is fitted to the values against their positions and its value at
    the last position is returned. An empty window gives NaN. Raises
    InvalidCastError when a value cannot be held by a float.
    """
    values = [_cast(x) for x in data_window]
    if len(values) == 1:
        return values[0]
    if not values:
        return math.nan

    n = float(len(values))
    x_sum = t_sum = t_squared_sum = x_t_sum = 0.0
    for position, x in enumerate(values):
        t = float(position)
        x_sum += x
        t_sum += t
        t_squared_sum += t * t
        x_t_sum += t * x

    slope = (n * x_t_sum - t_sum * x_sum) / (n * t_squared_sum - t_sum * t_sum)
    intercept = (x_sum - slope * t_sum) / n
    return slope * (n - 1.0) + intercept


def lsma_series(data: Iterable[Real], window_len: int) -> list[float]:
    """Return the least-squares moving average of every sliding window.

    Returns an empty list when the data is empty, ``window_len`` is 0, or the
    data is shorter than ``window_len``. Raises ValueError for a negative
    ``window_len`` and InvalidCastError as :func:`lsma` does.
    """
    if window_len < 0:
        raise ValueError(f"window_len must not be negative, got {window_len}")
    values = list(data)
    if not values or window_len == 0:
        return []
    return [lsma(window) for window in _windows(values, window_len)]