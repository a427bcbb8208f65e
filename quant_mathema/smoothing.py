"""Simple and exponential moving averages over numeric data series.

The single-window functions suit streaming use, where only the most recent
window matters; the ``*_series`` functions suit batch analysis and plotting.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real
from typing import TypeVar

from quant_mathema.stats import mu

__all__ = ["sma", "sma_series", "ema", "ema_series"]

N = TypeVar("N", bound=Real)


def _to_float(value: Real) -> float:
    """Convert to float, falling back to 0.0 for values a float cannot hold."""
    try:
        return float(value)
    except OverflowError:
        return 0.0


def _check_window_len(window_len: int) -> None:
    if window_len < 0:
        raise ValueError(f"window_len must not be negative, got {window_len}")


def _windows(values: Sequence[N], size: int) -> Iterator[list[N]]:
    """Yield every contiguous window of ``size`` values, in order."""
    window: deque[N] = deque(maxlen=size)
    for value in values:
        window.append(value)
        if len(window) == size:
            yield list(window)


def sma(data_window: Iterable[N]) -> N:
    """Return the simple moving average of one window, or 0 when it is empty.

    Integer windows give an integer average, truncated toward zero.
    """
    return mu(data_window)


def sma_series(data: Iterable[N], window_len: int) -> list[N]:
    """Return the simple moving average of every sliding window of ``window_len``.

    Returns an empty list when ``window_len`` is 0 or longer than the data.
    """
    _check_window_len(window_len)
    values = list(data)
    if window_len == 0 or len(values) < window_len:
        return []
    return [sma(window) for window in _windows(values, window_len)]


def ema(data_window: Iterable[Real]) -> float:
    """Return the exponential moving average of one window, or 0.0 when empty.

    The smoothing factor is ``2 / (len + 1)`` and the first value seeds the
    average.
    """
    values = [_to_float(x) for x in data_window]
    if not values:
        return 0.0
    alpha = 2.0 / (len(values) + 1.0)
    average = values[0]
    for x in values[1:]:
        average = alpha * x + (1.0 - alpha) * average
    return average


def ema_series(data: Iterable[Real], window_len: int) -> list[float]:
    """Return the running exponential moving average over the whole series.

    The smoothing factor is ``2 / (window_len + 1)``; the first value seeds the
    average and every value yields one output. Returns an empty list when
    ``window_len`` is 0 or longer than the data.
    """
    _check_window_len(window_len)
    values = [_to_float(x) for x in data]
    if window_len == 0 or len(values) < window_len:
        return []
    alpha = 2.0 / (window_len + 1.0)
    average = values[0]
    result = [average]
    for x in values[1:]:
        average = alpha * x + (1.0 - alpha) * average
        result.append(average)
    return result