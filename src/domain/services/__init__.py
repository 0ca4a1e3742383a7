"""Domain services package."""

from .dashboard import (
    compute_balance,
    compute_grand_total,
    sort_category_totals,
    sum_amounts,
)
from .validation import (
    validate_category_fields,
    validate_person_fields,
    validate_transaction_fields,
)

__all__ = [
    "compute_balance",
    "compute_grand_total",
    "sort_category_totals",
    "sum_amounts",
    "validate_category_fields",
    "validate_person_fields",
    "validate_transaction_fields",
]
