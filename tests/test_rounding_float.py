import math

import numpy as np
import pytest

from decimals import INT64_MAX, INT64_MIN, round_float


@pytest.mark.parametrize(
    "x,precision,expected",
    [
        (55.555, 2, 55.56),
        (55.555, 0, 56.0),
        (55.555, -2, 100.0),
        (-55.555, 2, -55.56),
        (2.5, 0, 3.0),  # 偶数丸めではない
        (-2.5, 0, -3.0),
        (0.125, 2, 0.13),
        (1.005, 2, 1.01),  # repr の 10 進表現で判定
        (123.456, 5, 123.456),
        (0.1, 20, 0.1),
        (1e16, 2, 1e16),
    ],
)
def test_round_float_basic(x, precision, expected):
    assert round_float(x, precision) == expected


def test_round_float_negative_precision_truncates_fraction_first():
    # 小数部は四捨五入されずに捨てられる
    assert round_float(-0.6, -1) == 0.0
    assert round_float(1234.9, -1) == 1230.0
    assert round_float(-1235.2, -1) == -1240.0


def test_round_float_keeps_sign_of_zero():
    out = round_float(-0.001, 2)
    assert out == 0.0
    assert math.copysign(1.0, out) == -1.0


def test_round_float_non_finite_passthrough():
    assert math.isnan(round_float(float("nan"), 2))
    assert round_float(float("inf"), 2) == float("inf")
    assert round_float(float("-inf"), -2) == float("-inf")


def test_round_float_accepts_numpy_scalars():
    out = round_float(np.float64(55.555), np.int64(2))
    assert out == 55.56
    assert type(out) is float


def test_round_float_idempotent():
    for x in (55.555, -0.045, 1234.5678, 0.5):
        for precision in (-2, 0, 1, 2, 3):
            once = round_float(x, precision)
            assert round_float(once, precision) == once


@pytest.mark.parametrize("x,precision", [("1.0", 2), (True, 2), (1.0, 2.0)])
def test_round_float_rejects_bad_types(x, precision):
    with pytest.raises(TypeError):
        round_float(x, precision)


def test_round_float_negative_precision_saturates_large_values(caplog):
    with caplog.at_level("WARNING", logger="decimals"):
        assert round_float(1e20, -1) == float(INT64_MAX)
        assert round_float(-1e19, -2) == float(-9223372036854775800)
    assert "round_float" in caplog.text
    assert str(INT64_MIN) in caplog.text


def test_round_float_rejects_int_beyond_float_range():
    with pytest.raises(ValueError):
        round_float(10**400, 2)
