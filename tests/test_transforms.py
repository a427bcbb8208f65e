import math

import pytest

from quant_mathema.transforms import (
    TransformType,
    apply_transform,
    log_transform,
    sqrt_transform,
    tanh_transform,
)


def test_sqrt_transform_with_floats():
    data = [0.0, 1.0, 4.0, 9.0, 16.0]
    assert sqrt_transform(data) == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0], abs=1e-6)


def test_sqrt_transform_with_ints():
    data = [0, 1, 4, 9, 16, 25]
    assert sqrt_transform(data) == pytest.approx(
        [0.0, 1.0, 2.0, 3.0, 4.0, 5.0], abs=1e-6
    )


def test_sqrt_transform_with_empty_input():
    assert sqrt_transform([]) == []


def test_sqrt_transform_keeps_small_ints():
    assert len(sqrt_transform([1, 4, 9])) == 3


def test_sqrt_transform_negative_gives_nan():
    result = sqrt_transform([-4.0, 4.0])
    assert math.isnan(result[0])
    assert result[1] == 2.0


def test_log_transform_with_floats():
    data = [1.0, math.e, 10.0, 100.0]
    expected = [0.0, 1.0, math.log(10.0), math.log(100.0)]
    assert log_transform(data) == pytest.approx(expected, abs=1e-10)


def test_log_transform_with_ints():
    data = [1, 2, 10, 100]
    expected = [math.log(v) for v in (1.0, 2.0, 10.0, 100.0)]
    assert log_transform(data) == pytest.approx(expected, abs=1e-10)


def test_log_transform_skips_zeros_and_negatives():
    result = log_transform([0.0, -1.0, -100.0, 1.0])
    assert len(result) == 1
    assert result[0] == pytest.approx(0.0, abs=1e-10)


def test_log_transform_skips_nan():
    assert log_transform([math.nan, 1.0]) == [0.0]


def test_log_transform_empty_input():
    assert log_transform([]) == []


def test_tanh_transform_with_floats():
    data = [0.0, 1.0, -1.0, 10.0, -10.0]
    expected = [math.tanh(x) for x in data]
    assert tanh_transform(data) == pytest.approx(expected, abs=1e-6)


def test_tanh_transform_with_ints():
    data = [-3, -1, 0, 1, 3]
    expected = [math.tanh(float(x)) for x in data]
    assert tanh_transform(data) == pytest.approx(expected, abs=1e-6)


def test_tanh_transform_extremes():
    result = tanh_transform([1000.0, -1000.0])
    assert result[0] == pytest.approx(1.0, abs=1e-6)
    assert result[1] == pytest.approx(-1.0, abs=1e-6)


def test_tanh_transform_empty_input():
    assert tanh_transform([]) == []


def test_tanh_transform_is_odd_and_bounded():
    data = [0.5, 2.0, 7.0]
    pos = tanh_transform(data)
    neg = tanh_transform([-x for x in data])
    assert pos == [-v for v in neg]
    assert all(-1.0 <= v <= 1.0 for v in pos)


def test_unconvertible_huge_int_is_skipped():
    assert tanh_transform([10**400, 0]) == [0.0]


def test_accepts_generators():
    assert sqrt_transform(x * x for x in range(4)) == [0.0, 1.0, 2.0, 3.0]


@pytest.mark.parametrize(
    "kind, func",
    [
        (TransformType.SQRT, sqrt_transform),
        (TransformType.LOG, log_transform),
        (TransformType.TANH, tanh_transform),
    ],
)
def test_apply_transform_dispatches(kind, func):
    data = [0.0, 1.0, 4.0, 9.0, 16.0]
    assert apply_transform(data, kind) == func(data)


def test_apply_transform_accepts_name():
    data = [1.0, 4.0]
    assert apply_transform(data, "sqrt") == [1.0, 2.0]


def test_apply_transform_rejects_unknown_kind():
    with pytest.raises(ValueError):
        apply_transform([1.0], "cube")


def test_apply_transform_log_skips_zero():
    assert apply_transform([0.0, 1.0], TransformType.LOG) == [0.0]