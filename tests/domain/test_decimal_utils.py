"""Tests for Decimal parsing and cents conversion helpers."""

from decimal import Decimal

import pytest

from src.utils.decimal_utils import (
    coerce_decimal,
    format_amount,
    from_cents,
    parse_amount,
    to_cents,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (100, Decimal("100.00")),
        ("40.5", Decimal("40.50")),
        (" 0.10 ", Decimal("0.10")),
        (Decimal("12.34"), Decimal("12.34")),
        (19.99, Decimal("19.99")),
    ],
)
def test_parse_amount_accepts_numbers_and_strings(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", "NaN", "Infinity", "1.005", True, "1e999999"],
)
def test_parse_amount_rejects_invalid_values(raw):
    with pytest.raises(ValueError):
        parse_amount(raw)


def test_cents_conversion_is_exact():
    assert to_cents(Decimal("0.10")) + to_cents(Decimal("0.20")) == 30
    assert from_cents(30) == Decimal("0.30")


def test_from_cents_treats_missing_sum_as_zero():
    assert from_cents(None) == Decimal("0.00")
    assert str(from_cents(None)) == "0.00"


def test_coerce_decimal_normalizes_inputs():
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(3) == Decimal("3")
    assert coerce_decimal("2.5") == Decimal("2.5")


def test_format_amount_keeps_two_places():
    assert format_amount(Decimal("60")) == "60.00"
    assert format_amount(Decimal("-20.5")) == "-20.50"
    assert format_amount(Decimal("0")) == "0.00"
