# quant-mathema

Small helpers for numeric data series with no dependencies. They cover
descriptive statistics, distribution measures, moving averages and
variance-stabilising transforms. Every function takes any iterable of
Python numbers, such as a list, tuple or generator.

## Installation

```
pip install quant-mathema
```

## Modules

- `quant_mathema.stats`: `mu`, `mean`, `median` (for input that is
  already sorted), `median_unsorted`, `minimum`, `maximum`, `data_range`,
  `variance` and `stdev`. The last two are sample statistics with
  Bessel's correction.
- `quant_mathema.distribution`: `quartiles` (by linear interpolation at
  `p * (n - 1)`), `interquartile_range`, `z_score`, `z_scores` and
  `normalized_entropy`.
- `quant_mathema.smoothing`: simple and exponential moving averages,
  `sma` / `sma_series` and `ema` / `ema_series`.
- `quant_mathema.weighted`: volume-weighted and least-squares moving
  averages, `vwma` / `vwma_series` and `lsma` / `lsma_series`.
- `quant_mathema.transforms`: `sqrt_transform`, `log_transform`,
  `tanh_transform`, and `apply_transform`. `apply_transform` takes a
  `TransformType` (`SQRT`, `LOG`, `TANH`) or its value (`"sqrt"`,
  `"log"`, `"tanh"`).
- `quant_mathema.errors`: `QuantMathemaError`, the base class, and
  `InvalidCastError`, which is also a `ValueError`.

Most moving averages come in two forms. The single-window form (`sma`,
`ema`, `vwma`, `lsma`) suits streaming use, where only the latest
window matters. The `_series` form suits batch analysis and plotting:
`sma_series`, `vwma_series` and `lsma_series` compute one value per
sliding window of `window_len`. `ema_series` is different. It runs a
single exponential average over the whole series with smoothing factor
`2 / (window_len + 1)` and yields one value per input value.

## Examples

```python
from quant_mathema.stats import mean, stdev, median_unsorted
from quant_mathema.distribution import quartiles, normalized_entropy
from quant_mathema.smoothing import sma_series, ema, ema_series
from quant_mathema.weighted import vwma, lsma
from quant_mathema.transforms import apply_transform, TransformType

mean([1.0, 2.0, 3.0, 4.0])           # 2.5
mean([1, 2, 3, 4])                   # 2  (integer input, truncated)
stdev([1, 2, 3, 4, 5])               # about 1.5811
median_unsorted([2, 4, 3, 5, 1])     # 3
quartiles([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])   # (2.25, 3.5, 4.75)
normalized_entropy([0.0, 1.0, 2.0, 3.0], 4) # about 1.0

sma_series([1.0, 2.0, 3.0, 4.0], 2)  # [1.5, 2.5, 3.5]
ema([2.0, 4.0, 6.0, 8.0])            # about 5.648
ema_series([1.0, 2.0, 3.0, 4.0, 5.0], 3)    # [1.0, 1.5, 2.25, 3.125, 4.0625]
vwma([100.0, 101.0, 102.0], [10, 20, 30])   # about 101.3333
lsma([3, 5, 7, 9, 11])               # about 11.0

apply_transform([0.0, 1.0, 4.0, 9.0], TransformType.SQRT)  # [0.0, 1.0, 2.0, 3.0]
```

## Edge cases

- Integer input keeps integer results where the arithmetic allows it.
  `mu`, `mean`, `sma`, `median` and `median_unsorted` truncate toward
  zero, and `quartiles` and `interquartile_range` do the same for
  all-integer data.
- Empty input gives a neutral result and does not raise:
  - `mu`, `median`, `median_unsorted` and `sma` return `0`.
  - `variance`, `stdev`, `ema` and `vwma` return `0.0`.
  - `minimum`, `maximum`, `data_range`, `quartiles`,
    `interquartile_range`, `z_scores` and `normalized_entropy` return
    `None`.
  - The `_series` functions and the transforms return `[]`.
  - `lsma` returns NaN.
- Other neutral results:
  - `quartiles` also returns `None` when the data holds a NaN.
  - `vwma` returns `0.0` when its two windows differ in length. It
    returns the last price when the volumes sum to zero or less.
  - `vwma_series` returns `[]` when the series differ in length.
  - `sma_series`, `ema_series` and `lsma_series` return `[]` when
    `window_len` is 0 or longer than the data.
- Transforms:
  - `log_transform` skips values that are zero or negative.
  - `sqrt_transform` gives NaN for negative values.
  - A value too large for a float is skipped.
- Division by zero follows floating-point rules. `z_score` with a
  `sigma` of zero gives an infinity, or NaN when the point equals the
  mean.
- Errors:
  - `median_unsorted` raises `ValueError` when the data holds a NaN.
  - `sma_series`, `ema_series` and `lsma_series` raise `ValueError`
    for a negative `window_len`.
  - `vwma_series` raises `ValueError` for a `window_len` that is not
    positive, when the series are non-empty and of equal length.
  - `normalized_entropy` raises `ValueError` unless `n_bins` is between
    1 and 255. A single bin gives NaN.
  - `lsma` and `lsma_series` raise `InvalidCastError` for a value too
    large to be held by a float.

## What it does not do

This is a library of functions only. It has no command-line tool, and
it does not read or store data files. It does not work on NumPy arrays
in a vectorised way; arrays are iterated like any other sequence.

## Running the tests

```
pip install -e ".[test]"
pytest
```