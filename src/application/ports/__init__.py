"""Application ports package."""

from .categories_repository import CategoriesRepositoryPort
from .dashboard_repository import DashboardRepositoryPort
from .database import DatabaseEnginePort
from .people_repository import PeopleRepositoryPort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "CategoriesRepositoryPort",
    "DashboardRepositoryPort",
    "DatabaseEnginePort",
    "PeopleRepositoryPort",
    "TransactionsRepositoryPort",
]
