"""Business rules deciding which transactions are allowed."""

from src.domain.constants import ADULT_AGE, CategoryPurpose, TransactionType


def category_allows_type(
    purpose: CategoryPurpose,
    transaction_type: TransactionType,
) -> bool:
    """Return True when a category with this purpose accepts the type."""
    if purpose == CategoryPurpose.BOTH:
        return True
    if transaction_type == TransactionType.INCOME:
        return purpose == CategoryPurpose.INCOME
    return purpose == CategoryPurpose.EXPENSE


def person_may_record(age: int, transaction_type: TransactionType) -> bool:
    """Return True when a person of this age may record the type.

    People younger than ``ADULT_AGE`` may only record expenses.
    """
    if age < ADULT_AGE:
        return transaction_type == TransactionType.EXPENSE
    return True


__all__ = ["category_allows_type", "person_may_record"]
