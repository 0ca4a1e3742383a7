"""Domain models package."""

from .categories import Category
from .dashboard import (
    CategoryTotals,
    GrandTotal,
    PersonTotals,
    TotalsByCategory,
    TotalsByPerson,
)
from .people import Person
from .transactions import Transaction, TransactionDraft

__all__ = [
    "Category",
    "CategoryTotals",
    "GrandTotal",
    "Person",
    "PersonTotals",
    "TotalsByCategory",
    "TotalsByPerson",
    "Transaction",
    "TransactionDraft",
]
