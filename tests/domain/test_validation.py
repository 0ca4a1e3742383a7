"""Tests for entity field validators."""

from decimal import Decimal

import pytest

from src.domain.constants import CategoryPurpose, TransactionType
from src.domain.models import TransactionDraft
from src.domain.services.validation import (
    validate_category_fields,
    validate_person_fields,
    validate_transaction_fields,
)


def _draft(**overrides) -> TransactionDraft:
    fields = {
        "description": "Groceries",
        "amount": "12.30",
        "type": 2,
        "category_id": 1,
        "person_id": 1,
    }
    fields.update(overrides)
    return TransactionDraft(**fields)


def test_validate_person_trims_name():
    assert validate_person_fields("  Ana ", 30) == ("Ana", 30)


@pytest.mark.parametrize(
    ("name", "age"),
    [
        ("", 30),
        ("   ", 30),
        (None, 30),
        ("x" * 201, 30),
        ("Ana", -1),
        ("Ana", None),
        ("Ana", True),
        ("Ana", "30"),
    ],
)
def test_validate_person_rejects_bad_fields(name, age):
    with pytest.raises(ValueError):
        validate_person_fields(name, age)


def test_validate_person_accepts_name_at_max_length():
    name, _ = validate_person_fields("x" * 200, 0)
    assert len(name) == 200


def test_validate_category_parses_purpose():
    assert validate_category_fields("Food", 2) == (
        "Food",
        CategoryPurpose.EXPENSE,
    )
    assert validate_category_fields("Misc", 3)[1] is CategoryPurpose.BOTH


@pytest.mark.parametrize("purpose", [0, 4, None, "abc", True])
def test_validate_category_rejects_unknown_purpose(purpose):
    with pytest.raises(ValueError):
        validate_category_fields("Food", purpose)


def test_validate_transaction_returns_clean_values():
    description, amount, transaction_type = validate_transaction_fields(
        _draft(description=" Rent ", amount=100, type=1)
    )

    assert description == "Rent"
    assert amount == Decimal("100.00")
    assert transaction_type is TransactionType.INCOME


def test_validate_transaction_accepts_zero_amount():
    _, amount, _ = validate_transaction_fields(_draft(amount="0"))
    assert amount == Decimal("0.00")


def test_validate_transaction_accepts_largest_amount():
    _, amount, _ = validate_transaction_fields(
        _draft(amount="9999999999999999.99")
    )
    assert amount == Decimal("9999999999999999.99")


@pytest.mark.parametrize(
    "overrides",
    [
        {"description": ""},
        {"description": "x" * 251},
        {"amount": "-1"},
        {"amount": "1.234"},
        {"amount": "10000000000000000.00"},
        {"amount": None},
        {"type": 3},
        {"type": None},
        {"category_id": 0},
        {"person_id": -5},
    ],
)
def test_validate_transaction_rejects_bad_fields(overrides):
    with pytest.raises(ValueError):
        validate_transaction_fields(_draft(**overrides))
