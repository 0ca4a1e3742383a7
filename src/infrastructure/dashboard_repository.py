"""SQLAlchemy-backed repository for dashboard aggregates."""

from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import OperationalError

from src.application.cancellation import (
    CancellationToken,
    OperationCancelledError,
)
from src.application.ports.dashboard_repository import DashboardRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import TransactionType
from src.domain.models import CategoryTotals, PersonTotals
from src.domain.services.dashboard import (
    compute_balance,
    sort_category_totals,
    sum_amounts,
)
from src.utils.decimal_utils import from_cents

# SQLite virtual-machine steps between cancellation checks.
PROGRESS_HANDLER_STEPS = 1000

PERSON_AMOUNTS_SQL = text(
    """
    SELECT
        p.id AS group_id,
        p.name AS group_label,
        t.type AS type,
        t.amount_cents AS amount_cents
    FROM people AS p
    LEFT OUTER JOIN transactions AS t ON t.person_id = p.id
    ORDER BY p.id, t.id
    """
)

CATEGORY_AMOUNTS_SQL = text(
    """
    SELECT
        c.id AS group_id,
        c.description AS group_label,
        t.type AS type,
        t.amount_cents AS amount_cents
    FROM categories AS c
    LEFT OUTER JOIN transactions AS t ON t.category_id = c.id
    ORDER BY c.id, t.id
    """
)


@contextmanager
def _cancellable(conn: Connection, cancellation: CancellationToken | None):
    """Abort the statements run inside the block once cancellation is set.

    On SQLite the driver progress handler interrupts the running statement;
    other drivers only get the checks before and after the block.
    """
    if cancellation is None:
        yield
        return
    cancellation.raise_if_cancelled()
    driver_connection = getattr(conn.connection, "driver_connection", None)
    set_handler = getattr(driver_connection, "set_progress_handler", None)
    if set_handler is not None:
        set_handler(
            lambda: 1 if cancellation.cancelled else 0,
            PROGRESS_HANDLER_STEPS,
        )
    try:
        yield
    except OperationalError as exc:
        if cancellation.cancelled:
            raise OperationCancelledError("Query was cancelled.") from exc
        raise
    finally:
        if set_handler is not None:
            set_handler(None, 0)
    cancellation.raise_if_cancelled()


def _group_amounts(rows) -> dict[int, tuple[str, list, list]]:
    """Bucket joined rows into (label, incomes, expenses) per group id.

    Groups without transactions come back from the outer join with a NULL
    type and keep two empty buckets.
    """
    groups: dict[int, tuple[str, list, list]] = {}
    for row in rows:
        _, incomes, expenses = groups.setdefault(
            row.group_id,
            (row.group_label, [], []),
        )
        if row.type == TransactionType.INCOME:
            incomes.append(from_cents(row.amount_cents))
        elif row.type == TransactionType.EXPENSE:
            expenses.append(from_cents(row.amount_cents))
    return groups


class SqlAlchemyDashboardRepository(DashboardRepositoryPort):
    """Repository computing grouped income/expense totals.

    A LEFT OUTER JOIN keeps people and categories without transactions.
    Amounts are read as integer cents and summed in Python ``Decimal``, so
    totals are exact and never overflow the store's 64-bit integers.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def _fetch_groups(self, statement, cancellation):
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            with _cancellable(conn, cancellation):
                rows = conn.execute(statement).all()
        groups = _group_amounts(rows)
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        return groups

    def fetch_totals_by_person(
        self,
        cancellation: CancellationToken | None = None,
    ) -> list[PersonTotals]:
        groups = self._fetch_groups(PERSON_AMOUNTS_SQL, cancellation)
        totals = []
        for person_id, (name, incomes, expenses) in groups.items():
            total_income = sum_amounts(incomes)
            total_expense = sum_amounts(expenses)
            totals.append(
                PersonTotals(
                    person_id=person_id,
                    person_name=name,
                    total_income=total_income,
                    total_expense=total_expense,
                    balance=compute_balance(total_income, total_expense),
                )
            )
        return totals

    def fetch_totals_by_category(
        self,
        cancellation: CancellationToken | None = None,
    ) -> list[CategoryTotals]:
        groups = self._fetch_groups(CATEGORY_AMOUNTS_SQL, cancellation)
        totals = []
        for category_id, (description, incomes, expenses) in groups.items():
            total_income = sum_amounts(incomes)
            total_expense = sum_amounts(expenses)
            totals.append(
                CategoryTotals(
                    category_id=category_id,
                    category_description=description,
                    total_income=total_income,
                    total_expense=total_expense,
                    balance=compute_balance(total_income, total_expense),
                )
            )
        return sort_category_totals(totals)


__all__ = [
    "SqlAlchemyDashboardRepository",
    "PERSON_AMOUNTS_SQL",
    "CATEGORY_AMOUNTS_SQL",
]
