"""Domain package for business rules and core models."""

from .constants import ADULT_AGE, CategoryPurpose, TransactionType
from .models import (
    Category,
    CategoryTotals,
    GrandTotal,
    Person,
    PersonTotals,
    TotalsByCategory,
    TotalsByPerson,
    Transaction,
    TransactionDraft,
)
from .policies import category_allows_type, person_may_record
from .services import (
    compute_balance,
    compute_grand_total,
    sort_category_totals,
    sum_amounts,
    validate_category_fields,
    validate_person_fields,
    validate_transaction_fields,
)

__all__ = [
    "ADULT_AGE",
    "CategoryPurpose",
    "TransactionType",
    "Category",
    "CategoryTotals",
    "GrandTotal",
    "Person",
    "PersonTotals",
    "TotalsByCategory",
    "TotalsByPerson",
    "Transaction",
    "TransactionDraft",
    "category_allows_type",
    "person_may_record",
    "compute_balance",
    "compute_grand_total",
    "sort_category_totals",
    "sum_amounts",
    "validate_category_fields",
    "validate_person_fields",
    "validate_transaction_fields",
]
