"""Domain constants and enumerations for the finance tracker."""

from decimal import Decimal
from enum import IntEnum


class TransactionType(IntEnum):
    """Direction of a transaction; values are the wire codes."""

    INCOME = 1
    EXPENSE = 2


class CategoryPurpose(IntEnum):
    """Which transaction types a category accepts."""

    INCOME = 1
    EXPENSE = 2
    BOTH = 3


ADULT_AGE = 18

PERSON_NAME_MAX_LENGTH = 200
CATEGORY_DESCRIPTION_MAX_LENGTH = 200
TRANSACTION_DESCRIPTION_MAX_LENGTH = 250

# decimal(18, 2): sixteen integer digits and two decimal places.
TRANSACTION_AMOUNT_MAX = Decimal("9999999999999999.99")


__all__ = [
    "TransactionType",
    "CategoryPurpose",
    "ADULT_AGE",
    "PERSON_NAME_MAX_LENGTH",
    "CATEGORY_DESCRIPTION_MAX_LENGTH",
    "TRANSACTION_DESCRIPTION_MAX_LENGTH",
    "TRANSACTION_AMOUNT_MAX",
]
