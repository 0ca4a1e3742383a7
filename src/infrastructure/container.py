"""Composition root for wiring infrastructure adapters."""

from src.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from src.application.ports.dashboard_repository import DashboardRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.people_repository import PeopleRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.get_totals_by_category import (
    GetTotalsByCategoryUseCase,
)
from src.application.use_cases.get_totals_by_person import (
    GetTotalsByPersonUseCase,
)
from src.application.use_cases.manage_categories import (
    ManageCategoriesUseCase,
)
from src.application.use_cases.manage_people import ManagePeopleUseCase
from src.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from src.infrastructure.categories_repository import (
    SqlAlchemyCategoriesRepository,
)
from src.infrastructure.dashboard_repository import (
    SqlAlchemyDashboardRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.people_repository import SqlAlchemyPeopleRepository
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_dashboard_repository(
    db_port: DatabaseEnginePort | None = None,
) -> DashboardRepositoryPort:
    """Return the repository for grouped dashboard reads."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyDashboardRepository(resolved_db)


def build_people_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PeopleRepositoryPort:
    """Return the people repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPeopleRepository(resolved_db)


def build_categories_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoriesRepositoryPort:
    """Return the categories repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoriesRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_totals_by_person_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetTotalsByPersonUseCase:
    """Return the per-person dashboard use case."""
    return GetTotalsByPersonUseCase(
        build_dashboard_repository(db_port),
        logger=get_app_logger(),
    )


def build_totals_by_category_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetTotalsByCategoryUseCase:
    """Return the per-category dashboard use case."""
    return GetTotalsByCategoryUseCase(
        build_dashboard_repository(db_port),
        logger=get_app_logger(),
    )


def build_people_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ManagePeopleUseCase:
    """Return the people CRUD use case."""
    return ManagePeopleUseCase(
        build_people_repository(db_port),
        logger=get_app_logger(),
    )


def build_categories_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ManageCategoriesUseCase:
    """Return the categories CRUD use case."""
    return ManageCategoriesUseCase(
        build_categories_repository(db_port),
        logger=get_app_logger(),
    )


def build_transactions_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ManageTransactionsUseCase:
    """Return the transactions CRUD use case."""
    resolved_db = db_port or build_database_adapter()
    return ManageTransactionsUseCase(
        build_transactions_repository(resolved_db),
        build_categories_repository(resolved_db),
        build_people_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_dashboard_repository",
    "build_people_repository",
    "build_categories_repository",
    "build_transactions_repository",
    "build_totals_by_person_use_case",
    "build_totals_by_category_use_case",
    "build_people_use_case",
    "build_categories_use_case",
    "build_transactions_use_case",
]
