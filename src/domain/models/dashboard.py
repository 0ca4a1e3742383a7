"""Domain models for dashboard aggregates."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GrandTotal:
    """Consolidated totals across every group of a report.

    Attributes:
        total_income: Sum of income over all groups.
        total_expense: Sum of expenses over all groups.
        balance: Income minus expenses.
    """

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class PersonTotals:
    """Income and expense totals for a single person."""

    person_id: int
    person_name: str
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryTotals:
    """Income and expense totals for a single category."""

    category_id: int
    category_description: str
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class TotalsByPerson:
    """Per-person rows plus the grand total computed from them."""

    items: list[PersonTotals]
    grand_total: GrandTotal


@dataclass(frozen=True)
class TotalsByCategory:
    """Per-category rows plus the grand total computed from them."""

    items: list[CategoryTotals]
    grand_total: GrandTotal


__all__ = [
    "GrandTotal",
    "PersonTotals",
    "CategoryTotals",
    "TotalsByPerson",
    "TotalsByCategory",
]
