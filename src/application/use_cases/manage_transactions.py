"""Use case for creating, reading, updating and deleting transactions."""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from src.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from src.application.ports.people_repository import PeopleRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.results import OperationResult
from src.domain.constants import ADULT_AGE, TransactionType
from src.domain.models import Transaction, TransactionDraft
from src.domain.policies import category_allows_type, person_may_record
from src.domain.services.validation import validate_transaction_fields
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ManageTransactionsUseCase:
    """CRUD operations on transactions.

    Writes are validated in three steps: scalar fields, existence of the
    referenced category and person, then the business rules tying the
    transaction type to the category purpose and the person's age.
    """

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        categories_repository: CategoriesRepositoryPort,
        people_repository: PeopleRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_repository: Port providing transaction persistence.
            categories_repository: Port used to resolve categories.
            people_repository: Port used to resolve people.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional UTC clock used to stamp new transactions.
        """
        self._transactions = transactions_repository
        self._categories = categories_repository
        self._people = people_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def list_all(self) -> list[Transaction]:
        """Return every transaction."""
        return self._transactions.fetch_all()

    def get(self, transaction_id: int) -> OperationResult[Transaction]:
        """Return a transaction or a NOT_FOUND result."""
        transaction = (
            self._transactions.fetch_by_id(transaction_id)
            if transaction_id > 0
            else None
        )
        if transaction is None:
            return OperationResult.not_found(
                f"Transaction {transaction_id} not found."
            )
        return OperationResult.ok(transaction)

    def create(self, draft: TransactionDraft) -> OperationResult[Transaction]:
        """Validate a draft and insert it, stamped with the current UTC time."""
        checked = self._check(draft)
        if not checked.is_ok:
            return checked
        description, amount, transaction_type = checked.value
        transaction = self._transactions.add(
            description=description,
            amount=amount,
            transaction_type=transaction_type,
            category_id=draft.category_id,
            person_id=draft.person_id,
            created_at=self._clock(),
        )
        self._logger.info(
            f"Created transaction id={transaction.id} "
            f"type={transaction_type.name} amount={amount}"
        )
        return OperationResult.ok(transaction)

    def update(
        self,
        transaction_id: int,
        draft: TransactionDraft,
    ) -> OperationResult[Transaction]:
        """Validate a draft and overwrite a transaction.

        The stored ``created_at`` is preserved.
        """
        if transaction_id <= 0:
            return OperationResult.not_found(
                f"Transaction {transaction_id} not found."
            )
        checked = self._check(draft)
        if not checked.is_ok:
            return checked
        description, amount, transaction_type = checked.value
        current = self._transactions.fetch_by_id(transaction_id)
        if current is None:
            return OperationResult.not_found(
                f"Transaction {transaction_id} not found."
            )
        updated = replace(
            current,
            description=description,
            amount=amount,
            type=transaction_type,
            category_id=draft.category_id,
            person_id=draft.person_id,
        )
        if not self._transactions.update(updated):
            return OperationResult.not_found(
                f"Transaction {transaction_id} not found."
            )
        self._logger.info(f"Updated transaction id={transaction_id}")
        return OperationResult.ok(updated)

    def delete(self, transaction_id: int) -> OperationResult[None]:
        """Delete a transaction."""
        if transaction_id <= 0 or not self._transactions.delete(
            transaction_id
        ):
            return OperationResult.not_found(
                f"Transaction {transaction_id} not found."
            )
        self._logger.info(f"Deleted transaction id={transaction_id}")
        return OperationResult.ok()

    def _check(
        self,
        draft: TransactionDraft,
    ) -> OperationResult[tuple[str, Decimal, TransactionType]]:
        try:
            description, amount, transaction_type = (
                validate_transaction_fields(draft)
            )
        except ValueError as exc:
            return OperationResult.validation_failed(str(exc))

        category = self._categories.fetch_by_id(draft.category_id)
        if category is None:
            return OperationResult.validation_failed(
                f"Category {draft.category_id} does not exist."
            )
        person = self._people.fetch_by_id(draft.person_id)
        if person is None:
            return OperationResult.validation_failed(
                f"Person {draft.person_id} does not exist."
            )

        if not category_allows_type(category.purpose, transaction_type):
            return OperationResult.validation_failed(
                f"Category '{category.description}' "
                f"({category.purpose.name}) does not accept "
                f"{transaction_type.name} transactions."
            )
        if not person_may_record(person.age, transaction_type):
            return OperationResult.validation_failed(
                f"People younger than {ADULT_AGE} may only record expenses."
            )
        return OperationResult.ok((description, amount, transaction_type))


__all__ = ["ManageTransactionsUseCase"]
