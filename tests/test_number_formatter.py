"""
Tests for result formatting.
"""

import pytest

from NumberFormatter import format_conversion

SAMPLES = [
    0.0, 1.0, 10.0, 5.5, 5.123456, 32.8084, 1 / 3, 2 / 3, 123456789.0,
    0.000123456789, 1.5e10, 1e-5, 6.242e18, -42.125, 999999.95, 0.1 + 0.2,
]


def significant_digits(text):
    mantissa = text.partition("e")[0].lstrip("-").replace(".", "")
    return len(mantissa.lstrip("0")) or 1


def test_trims_trailing_zeros():
    assert format_conversion(5.5) == "5.5"
    assert format_conversion(0.25) == "0.25"


def test_integral_values_drop_decimal_point():
    assert format_conversion(10.0) == "10"
    assert format_conversion(0.0) == "0"
    assert format_conversion(100.0) == "100"


def test_full_precision_returned_unmodified():
    assert format_conversion(5.123456) == "5.123456"


def test_rounds_to_seven_significant_digits():
    assert format_conversion(1 / 3) == "0.3333333"
    assert format_conversion(0.1 + 0.2) == "0.3"


def test_exponent_is_not_trimmed():
    assert format_conversion(1.5e10) == "1.5e+10"
    assert format_conversion(1e20) == "1e+20"


def test_small_values_stay_fixed_down_to_micro():
    # 10 Gram -> Metric Ton
    assert format_conversion(0.00001) == "0.00001"
    assert format_conversion(0.000001) == "0.000001"
    assert format_conversion(0.0001234567) == "0.0001234567"


def test_exponent_form_outside_fixed_range():
    assert format_conversion(12345678.0) == "1.234568e+7"
    assert format_conversion(1234567.0) == "1234567"
    assert format_conversion(1e-7) == "1e-7"
    assert format_conversion(-2.5e-9) == "-2.5e-9"


def test_rounding_carry_moves_exponent():
    assert format_conversion(9999999.9) == "1e+7"
    assert format_conversion(9.99999996e-7) == "0.000001"


@pytest.mark.parametrize("value", SAMPLES)
def test_idempotent(value):
    once = format_conversion(value)
    assert format_conversion(float(once)) == once


@pytest.mark.parametrize("value", SAMPLES)
def test_shape(value):
    output = format_conversion(value)
    assert not output.endswith(".")
    assert significant_digits(output) <= 7
