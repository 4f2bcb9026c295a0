"""Tests for Decimal helpers."""

from decimal import Decimal

import pytest

from src.utils.decimal_utils import coerce_decimal, round_money


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "0"),
        (True, "0"),
        ("", "0"),
        ("abc", "0"),
        ("-", "0"),
        (12, "12"),
        (0.1, "0.1"),
        (float("nan"), "0"),
        (float("inf"), "0"),
        (Decimal("NaN"), "0"),
        (Decimal("12.30"), "12.30"),
        ("1,234.56", "1234.56"),
        ("1.234,56", "1234.56"),
        ("€ 99,5", "99.5"),
        ("1,234", "1234"),
        ("-45.10 EUR", "-45.10"),
        ([1, 2], "0"),
        ("1e3", "1000"),
        ("2.5E2", "250"),
        (" 42 ", "42"),
        ("Infinity", "0"),
    ],
)
def test_coerce_decimal(raw, expected) -> None:
    """coerce_decimal should read numbers leniently and never raise."""
    assert coerce_decimal(raw) == Decimal(expected)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0.005", "0.01"),
        ("0.004", "0.00"),
        ("-0.005", "-0.01"),
        ("300", "300.00"),
    ],
)
def test_round_money_half_up(raw, expected) -> None:
    """round_money should round to cents, halves away from zero."""
    assert str(round_money(Decimal(raw))) == expected
