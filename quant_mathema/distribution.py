"""Measures of spread, standardisation and information content of data series."""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real

from quant_mathema.stats import maximum, minimum, mu, stdev

__all__ = [
    "quartiles",
    "interquartile_range",
    "z_score",
    "z_scores",
    "normalized_entropy",
]

_MAX_BINS = 255


def _is_nan(value: object) -> bool:
    return value != value


def _divide(numerator: float, denominator: float) -> float:
    """Divide as IEEE floats do: a zero divisor gives an infinity or NaN."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def quartiles(data: Iterable[Real]) -> tuple[Real, Real, Real] | None:
    """Return the 25th, 50th and 75th percentiles by linear interpolation.

    The position of percentile ``p`` is ``p * (n - 1)`` in the sorted data.
    Integer data gives integer quartiles, truncated toward zero.
    Returns None when the data is empty or holds a NaN.
    """
    values = list(data)
    if not values or any(_is_nan(x) for x in values):
        return None

    ordered = sorted(values)
    integral = all(isinstance(x, int) for x in ordered)
    last = len(ordered) - 1

    def quantile(p: float) -> Real:
        position = p * last
        below = math.floor(position)
        weight = position - below
        lower = float(ordered[below])
        upper = float(ordered[math.ceil(position)])
        interpolated = lower + weight * (upper - lower)
        return int(interpolated) if integral else interpolated

    return quantile(0.25), quantile(0.50), quantile(0.75)


def interquartile_range(data: Iterable[Real]) -> Real | None:
    """Return the third quartile minus the first, or None as :func:`quartiles` does."""
    result = quartiles(data)
    if result is None:
        return None
    q1, _, q3 = result
    return q3 - q1


def z_score(datapoint: Real, mu: Real, sigma: Real) -> float:
    """Return how many standard deviations ``datapoint`` lies from ``mu``.

    A zero ``sigma`` gives an infinity (or NaN when the point equals ``mu``).
    """
    return _divide(float(datapoint) - float(mu), float(sigma))


def z_scores(data: Iterable[Real]) -> list[float] | None:
    """Return the z-score of every value against the data's mean and sample stdev.

    Returns None when the data is empty.
    """
    values = list(data)
    if not values:
        return None
    centre = float(mu(values))
    sigma = stdev(values)
    return [z_score(x, centre, sigma) for x in values]


def normalized_entropy(data: Iterable[Real], n_bins: int) -> float | None:
    """Return the Shannon entropy of a histogram of the data, scaled to [0, 1].

    The data's span is cut into ``n_bins`` equal bins; 0 means every value
    fell in one bin, 1 means the bins are evenly filled. Returns None when the
    data is empty. ``n_bins`` must lie between 1 and 255; a single bin has no
    scale and gives NaN.
    """
    if not 1 <= n_bins <= _MAX_BINS:
        raise ValueError(f"n_bins must be between 1 and {_MAX_BINS}, got {n_bins}")

    values = [float(x) for x in data]
    if not values:
        return None

    x_min = minimum(values)
    x_max = maximum(values)

    # The small epsilons keep the top value inside the last bin and the
    # divisor away from zero when every value is the same.
    factor = (n_bins - 1e-11) / ((x_max - x_min) + 1e-60)
    counts = [0] * n_bins
    for x in values:
        k = min(max(int(factor * (x - x_min)), 0), n_bins - 1)
        counts[k] += 1

    total = len(values)
    entropy_sum = 0.0
    for count in counts:
        if count:
            probability = count / total
            entropy_sum -= probability * math.log(probability)

    return _divide(entropy_sum, math.log(n_bins))