"""Domain services for dashboard aggregates."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import CategoryTotals, GrandTotal, PersonTotals
from src.utils.decimal_utils import ZERO_AMOUNT, coerce_decimal


def sum_amounts(values: Iterable[Decimal]) -> Decimal:
    """Fold amounts starting from zero, so an empty input sums to 0.00."""
    total = ZERO_AMOUNT
    for value in values:
        total += coerce_decimal(value)
    return total


def compute_balance(total_income: Decimal, total_expense: Decimal) -> Decimal:
    """Return income minus expenses."""
    return total_income - total_expense


def compute_grand_total(
    items: Iterable[PersonTotals | CategoryTotals],
) -> GrandTotal:
    """Consolidate group rows into a single grand total.

    Args:
        items: Per-person or per-category rows from one repository read.

    Returns:
        GrandTotal: Summed income and expenses with the derived balance.
    """
    rows = list(items)
    total_income = sum_amounts(row.total_income for row in rows)
    total_expense = sum_amounts(row.total_expense for row in rows)
    return GrandTotal(
        total_income=total_income,
        total_expense=total_expense,
        balance=compute_balance(total_income, total_expense),
    )


def sort_category_totals(
    items: Iterable[CategoryTotals],
) -> list[CategoryTotals]:
    """Order category rows by description (case-sensitive, stable)."""
    return sorted(items, key=lambda row: row.category_description)


__all__ = [
    "sum_amounts",
    "compute_balance",
    "compute_grand_total",
    "sort_category_totals",
]
