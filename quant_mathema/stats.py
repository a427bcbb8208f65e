"""Descriptive statistics over numeric data series.

Integer inputs keep integer results where the computation allows it:
means and medians of integers are truncated toward zero, as with
integer division in fixed-width arithmetic.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real
from typing import TypeVar

__all__ = [
    "mu",
    "mean",
    "median",
    "median_unsorted",
    "minimum",
    "maximum",
    "data_range",
    "variance",
    "stdev",
]

N = TypeVar("N", bound=Real)


def _is_integral(value: object) -> bool:
    return isinstance(value, int)


def _divide(total: Real, divisor: int) -> Real:
    """Divide, truncating toward zero when both operands are integers."""
    if _is_integral(total):
        quotient = abs(total) // divisor
        return -quotient if total < 0 else quotient
    return total / divisor


def mu(data: Iterable[N]) -> N:
    """Return the arithmetic mean of the data, or 0 when it is empty."""
    values = list(data)
    if not values:
        return 0
    return _divide(sum(values), len(values))


def mean(data: Iterable[N]) -> N:
    """Return the arithmetic mean of the data; same as :func:`mu`."""
    return mu(data)


def median(data: Iterable[N]) -> N:
    """Return the median of data that is already sorted, or 0 when empty."""
    values = list(data)
    if not values:
        return 0
    mid = len(values) // 2
    if len(values) % 2 == 0:
        return _divide(values[mid] + values[mid - 1], 2)
    return values[mid]


def median_unsorted(data: Iterable[N]) -> N:
    """Return the median of unsorted data, or 0 when empty.

    Raises ValueError if the data holds a NaN, which has no place in an order.
    """
    values = list(data)
    if not values:
        return 0
    if any(isinstance(x, float) and math.isnan(x) for x in values):
        raise ValueError("cannot order data containing NaN")
    return median(sorted(values))


def minimum(data: Iterable[N]) -> N | None:
    """Return the smallest value, or None when the data is empty."""
    iterator = iter(data)
    try:
        smallest = next(iterator)
    except StopIteration:
        return None
    for x in iterator:
        if x < smallest:
            smallest = x
    return smallest


def maximum(data: Iterable[N]) -> N | None:
    """Return the largest value, or None when the data is empty."""
    iterator = iter(data)
    try:
        largest = next(iterator)
    except StopIteration:
        return None
    for x in iterator:
        if x > largest:
            largest = x
    return largest


def data_range(data: Iterable[N]) -> N | None:
    """Return the maximum minus the minimum, or None when the data is empty."""
    values = list(data)
    if not values:
        return None
    return maximum(values) - minimum(values)


def variance(data: Iterable[Real]) -> float:
    """Return the sample variance (Bessel-corrected), or 0.0 for fewer than 2 values."""
    values = list(data)
    if len(values) < 2:
        return 0.0
    centre = float(mu(values))
    dev_sum = sum((float(x) - centre) ** 2 for x in values)
    return dev_sum / (len(values) - 1.0)


def stdev(data: Iterable[Real]) -> float:
    """Return the sample standard deviation (Bessel-corrected)."""
    return math.sqrt(variance(data))