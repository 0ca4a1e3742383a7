"""Domain models for transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.constants import TransactionType


@dataclass(frozen=True)
class Transaction:
    """A stored income or expense.

    Attributes:
        id: Store-generated identifier.
        description: Free-text description.
        amount: Non-negative amount with two decimal places.
        type: Income or expense.
        category_id: Identifier of the owning category.
        person_id: Identifier of the owning person.
        created_at: UTC timestamp set once at creation.
    """

    id: int
    description: str
    amount: Decimal
    type: TransactionType
    category_id: int
    person_id: int
    created_at: datetime


@dataclass(frozen=True)
class TransactionDraft:
    """Unvalidated transaction fields as received from a caller.

    ``amount`` and ``type`` keep their raw wire values until validation
    turns them into ``Decimal`` and ``TransactionType``.
    """

    description: str
    amount: object
    type: object
    category_id: int
    person_id: int


__all__ = ["Transaction", "TransactionDraft"]
