from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.common.validators import (
    is_valid_date,
    is_valid_decimal,
    is_valid_department_code,
    is_valid_gender,
    is_valid_integer,
    is_valid_month,
    is_valid_phone,
    is_valid_string,
    to_int,
)


@pytest.mark.parametrize(
    "value,min_len,max_len,expected",
    [
        ("Hello", 1, 255, True),
        ("", 1, 255, False),
        ("   ", 1, 255, False),
        ("a", 2, 255, False),
        ("  ab  ", 2, 2, True),
        ("a" * 300, 1, 255, False),
        (123, 1, 255, False),
        (None, 0, 10, False),
    ],
)
def test_string(value, min_len, max_len, expected):
    assert is_valid_string(value, min_len, max_len) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("50000.00", True),
        ("50000.5", True),
        (50000, True),
        (Decimal("12.34"), True),
        (0.1, True),
        ("12.345", False),
        (12.345, False),
        ("1.500", True),
        ("-1", False),
        ("abc", False),
        ("", False),
        ("NaN", False),
        ("Infinity", False),
        (None, False),
        (True, False),
        ("1000000.01", False),
        ("1000000", True),
    ],
)
def test_decimal_money(value, expected):
    assert is_valid_decimal(value, 0, 1_000_000, 2) is expected


def test_decimal_bounds_are_inclusive_and_optional():
    assert is_valid_decimal("0", 0, 10, 2)
    assert is_valid_decimal("10", 0, 10, 2)
    assert not is_valid_decimal("10.01", 0, 10, 2)
    assert is_valid_decimal("99999999", 0, None, 2)


@pytest.mark.parametrize(
    "value,expected",
    [(5, True), ("5", True), ("5.0", True), ("5.5", False), ("x", False), (None, False), (False, False)],
)
def test_integer(value, expected):
    assert is_valid_integer(value, 1, 10) is expected


def test_integer_bounds():
    assert not is_valid_integer(0, 1)
    assert not is_valid_integer(11, None, 10)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2023-01-31", True),
        ("2024-02-29", True),
        ("2023-02-29", False),
        ("2023-02-30", False),
        ("2023-02-31", False),
        ("2023-13-01", False),
        ("01/01/2023", False),
        ("2023-1-01", False),
        ("2023-01-01\n", False),
        ("", False),
        (None, False),
    ],
)
def test_date(value, expected):
    assert is_valid_date(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2023-01", True),
        ("2025-12", True),
        ("1900-01", True),
        ("2100-12", True),
        ("2023-13", False),
        ("2023-00", False),
        ("23-01", False),
        ("1899-12", False),
        ("2101-01", False),
        ("01/2023", False),
        ("2023-01-01", False),
        (None, False),
    ],
)
def test_month(value, expected):
    assert is_valid_month(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("IT", True),
        ("HR_01", True),
        ("ABCDEFGHIJ", True),
        ("I", False),
        ("IT_DEPARTMENT_LONG", False),
        ("IT-1", False),
        ("I T", False),
        (None, False),
    ],
)
def test_department_code(value, expected):
    assert is_valid_department_code(value) is expected


def test_gender():
    assert is_valid_gender("Male")
    assert is_valid_gender("Female")
    assert is_valid_gender("Other")
    assert not is_valid_gender("male")
    assert not is_valid_gender("")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1234567890", True),
        ("+1 (123) 456-7890", True),
        ("123abc", False),
        ("12345", False),
        ("", False),
    ],
)
def test_phone(value, expected):
    assert is_valid_phone(value) is expected


@pytest.mark.parametrize("value", ["-1e999999999", "1e-999999999"])
def test_decimal_with_extreme_exponent_is_rejected_without_raising(value):
    assert not is_valid_decimal(value, 0, None, 2)
    assert not is_valid_decimal(value, 0, 1_000_000, 2)


def test_decimal_with_huge_exponent_and_no_upper_bound_is_integral():
    assert is_valid_decimal("1e999999999", 0, None, 2)
    assert is_valid_integer("1e999999999")


def test_long_fraction_is_not_rounded_away():
    value = "50000.0000000000000000000000000001"
    assert not is_valid_decimal(value, 0, 1_000_000, 2)
    assert not is_valid_integer(value)


@pytest.mark.parametrize("value,expected", [("1.50", True), ("1.500000000000000000000000000000", True), ("1.005", False)])
def test_trailing_zeros_do_not_count_as_decimals(value, expected):
    assert is_valid_decimal(value, 0, None, 2) is expected


@pytest.mark.parametrize("value", ["1e50000000", "2147483648", "-1e400"])
def test_to_int_rejects_out_of_range_values(value):
    assert to_int(value) is None


def test_to_int_bounds():
    assert to_int("2147483647") == 2147483647
    assert to_int("0", min_value=1) is None
    assert to_int("7.0") == 7
