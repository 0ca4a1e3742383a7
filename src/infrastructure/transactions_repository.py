"""SQLAlchemy-backed repository for transactions."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.constants import TransactionType
from src.domain.models import Transaction
from src.utils.decimal_utils import from_cents, to_cents

_COLUMNS = (
    "id, description, amount_cents, type, category_id, person_id, created_at"
)

SELECT_TRANSACTIONS_SQL = text(
    f"SELECT {_COLUMNS} FROM transactions ORDER BY id"
)

SELECT_TRANSACTION_SQL = text(
    f"SELECT {_COLUMNS} FROM transactions WHERE id = :id"
)

INSERT_TRANSACTION_SQL = text(
    """
    INSERT INTO transactions (
        description,
        amount_cents,
        type,
        category_id,
        person_id,
        created_at
    )
    VALUES (
        :description,
        :amount_cents,
        :type,
        :category_id,
        :person_id,
        :created_at
    )
    """
)

UPDATE_TRANSACTION_SQL = text(
    """
    UPDATE transactions
    SET description = :description,
        amount_cents = :amount_cents,
        type = :type,
        category_id = :category_id,
        person_id = :person_id
    WHERE id = :id
    """
)

DELETE_TRANSACTION_SQL = text("DELETE FROM transactions WHERE id = :id")


def _serialize_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _parse_timestamp(raw: str) -> datetime:
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _to_transaction(row) -> Transaction:
    return Transaction(
        id=row.id,
        description=row.description,
        amount=from_cents(row.amount_cents),
        type=TransactionType(row.type),
        category_id=row.category_id,
        person_id=row.person_id,
        created_at=_parse_timestamp(row.created_at),
    )


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for transactions.

    Amounts are stored as integer cents; ``created_at`` as an ISO 8601 UTC
    string that updates never touch.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_all(self) -> list[Transaction]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
        return [_to_transaction(row) for row in rows]

    def fetch_by_id(self, transaction_id: int) -> Transaction | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_TRANSACTION_SQL,
                {"id": transaction_id},
            ).first()
        return _to_transaction(row) if row else None

    def add(
        self,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        category_id: int,
        person_id: int,
        created_at: datetime,
    ) -> Transaction:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                INSERT_TRANSACTION_SQL,
                {
                    "description": description,
                    "amount_cents": to_cents(amount),
                    "type": int(transaction_type),
                    "category_id": category_id,
                    "person_id": person_id,
                    "created_at": _serialize_timestamp(created_at),
                },
            )
            new_id = result.lastrowid
        return Transaction(
            id=new_id,
            description=description,
            amount=amount,
            type=transaction_type,
            category_id=category_id,
            person_id=person_id,
            created_at=_parse_timestamp(_serialize_timestamp(created_at)),
        )

    def update(self, transaction: Transaction) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_TRANSACTION_SQL,
                {
                    "id": transaction.id,
                    "description": transaction.description,
                    "amount_cents": to_cents(transaction.amount),
                    "type": int(transaction.type),
                    "category_id": transaction.category_id,
                    "person_id": transaction.person_id,
                },
            )
            affected = result.rowcount
        return affected > 0

    def delete(self, transaction_id: int) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_TRANSACTION_SQL, {"id": transaction_id})
            affected = result.rowcount
        return affected > 0


__all__ = ["SqlAlchemyTransactionsRepository"]
