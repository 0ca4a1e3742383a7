"""Application use cases package."""

from .get_totals_by_category import (
    GetTotalsByCategoryUseCase,
    TotalsByCategory,
)
from .get_totals_by_person import GetTotalsByPersonUseCase, TotalsByPerson
from .manage_categories import ManageCategoriesUseCase
from .manage_people import ManagePeopleUseCase
from .manage_transactions import ManageTransactionsUseCase

__all__ = [
    "GetTotalsByCategoryUseCase",
    "TotalsByCategory",
    "GetTotalsByPersonUseCase",
    "TotalsByPerson",
    "ManageCategoriesUseCase",
    "ManagePeopleUseCase",
    "ManageTransactionsUseCase",
]
