"""Element-wise transformations of numeric data series."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Iterable, Iterator

__all__ = [
    "TransformType",
    "apply_transform",
    "sqrt_transform",
    "log_transform",
    "tanh_transform",
]


class TransformType(enum.Enum):
    """The transformations that can be applied to numeric data."""

    #: Compresses large values more than small ones; mild tail dampening.
    SQRT = "sqrt"
    #: Natural logarithm; strong tail compression, skips non-positive values.
    LOG = "log"
    #: Hyperbolic tangent; squashes values into (-1, 1).
    TANH = "tanh"


def _as_floats(data: Iterable[float]) -> Iterator[float]:
    """Yield each value as a float, skipping those a float cannot hold."""
    for x in data:
        try:
            yield float(x)
        except OverflowError:
            continue


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0.0 or math.isnan(x) else math.nan


def sqrt_transform(data: Iterable[float]) -> list[float]:
    """Return the square root of every value; negative values give NaN."""
    return [_sqrt(x) for x in _as_floats(data)]


def log_transform(data: Iterable[float]) -> list[float]:
    """Return the natural log of every positive value; others are skipped."""
    return [math.log(x) for x in _as_floats(data) if x > 0.0]


def tanh_transform(data: Iterable[float]) -> list[float]:
    """Return the hyperbolic tangent of every value."""
    return [math.tanh(x) for x in _as_floats(data)]


_TRANSFORMS: dict[TransformType, Callable[[Iterable[float]], list[float]]] = {
    TransformType.SQRT: sqrt_transform,
    TransformType.LOG: log_transform,
    TransformType.TANH: tanh_transform,
}


def apply_transform(
    data: Iterable[float], transform_type: TransformType | str
) -> list[float]:
    """Apply the given transformation to a numeric data series."""
    return _TRANSFORMS[TransformType(transform_type)](data)