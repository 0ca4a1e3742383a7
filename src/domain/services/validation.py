"""Domain validation helpers for entity write paths.

Each validator returns the cleaned field values or raises ``ValueError``
with a message suitable for an API client.
"""

from decimal import Decimal

from src.domain.constants import (
    CATEGORY_DESCRIPTION_MAX_LENGTH,
    PERSON_NAME_MAX_LENGTH,
    TRANSACTION_AMOUNT_MAX,
    TRANSACTION_DESCRIPTION_MAX_LENGTH,
    CategoryPurpose,
    TransactionType,
)
from src.domain.models import TransactionDraft
from src.utils.decimal_utils import parse_amount


def _require_text(value, field_name: str, max_length: int) -> str:
    cleaned = value.strip() if isinstance(value, str) else ""
    if not cleaned:
        raise ValueError(f"{field_name} is required.")
    if len(cleaned) > max_length:
        raise ValueError(
            f"{field_name} must be at most {max_length} characters."
        )
    return cleaned


def _parse_enum(value, enum_cls, field_name: str):
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field_name}: {value!r}")
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid {field_name}: {value!r}") from exc


def validate_person_fields(name, age) -> tuple[str, int]:
    """Validate and clean person fields.

    Args:
        name: Raw person name.
        age: Raw age.

    Returns:
        tuple[str, int]: Trimmed name and age.
    """
    cleaned_name = _require_text(name, "Name", PERSON_NAME_MAX_LENGTH)
    if isinstance(age, bool) or not isinstance(age, int) or age < 0:
        raise ValueError("Age must be a non-negative integer.")
    return cleaned_name, age


def validate_category_fields(
    description,
    purpose,
) -> tuple[str, CategoryPurpose]:
    """Validate and clean category fields."""
    cleaned = _require_text(
        description,
        "Description",
        CATEGORY_DESCRIPTION_MAX_LENGTH,
    )
    return cleaned, _parse_enum(purpose, CategoryPurpose, "purpose")


def validate_transaction_fields(
    draft: TransactionDraft,
) -> tuple[str, Decimal, TransactionType]:
    """Validate the scalar fields of a transaction draft.

    Foreign keys are only checked for being positive here; their existence
    is the use case's concern.

    Args:
        draft: Raw transaction fields.

    Returns:
        tuple[str, Decimal, TransactionType]: Trimmed description, parsed
        amount and transaction type.
    """
    description = _require_text(
        draft.description,
        "Description",
        TRANSACTION_DESCRIPTION_MAX_LENGTH,
    )
    amount = parse_amount(draft.amount)
    if amount < 0:
        raise ValueError("Amount must not be negative.")
    if amount > TRANSACTION_AMOUNT_MAX:
        raise ValueError(f"Amount must not exceed {TRANSACTION_AMOUNT_MAX}.")
    transaction_type = _parse_enum(draft.type, TransactionType, "type")
    if draft.category_id is None or draft.category_id <= 0:
        raise ValueError("Invalid category id.")
    if draft.person_id is None or draft.person_id <= 0:
        raise ValueError("Invalid person id.")
    return description, amount, transaction_type


__all__ = [
    "validate_person_fields",
    "validate_category_fields",
    "validate_transaction_fields",
]
