"""Port for transaction persistence."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from src.domain.constants import TransactionType
from src.domain.models import Transaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing CRUD access to transactions and FK lookups."""

    def fetch_all(self) -> list[Transaction]:
        """Return every transaction."""

    def fetch_by_id(self, transaction_id: int) -> Transaction | None:
        """Return a transaction, or None when missing."""

    def add(
        self,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        category_id: int,
        person_id: int,
        created_at: datetime,
    ) -> Transaction:
        """Insert a transaction and return it with its generated id."""

    def update(self, transaction: Transaction) -> bool:
        """Persist new values; return False when the row is missing."""

    def delete(self, transaction_id: int) -> bool:
        """Delete a transaction; return False when the row is missing."""


__all__ = ["TransactionsRepositoryPort"]
