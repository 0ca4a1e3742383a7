"""Use case for creating, reading, updating and deleting categories."""

from dataclasses import replace

from sqlalchemy.exc import IntegrityError

from src.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from src.application.results import OperationResult
from src.domain.models import Category
from src.domain.services.validation import validate_category_fields
from src.infrastructure.logging.logger import get_app_logger


class ManageCategoriesUseCase:
    """CRUD operations on categories with field validation."""

    def __init__(
        self,
        categories_repository: CategoriesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            categories_repository: Port providing category persistence.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._categories = categories_repository
        self._logger = logger or get_app_logger()

    def list_all(self) -> list[Category]:
        """Return every category."""
        return self._categories.fetch_all()

    def get(self, category_id: int) -> OperationResult[Category]:
        """Return a category or a NOT_FOUND result."""
        category = (
            self._categories.fetch_by_id(category_id)
            if category_id > 0
            else None
        )
        if category is None:
            return OperationResult.not_found(
                f"Category {category_id} not found."
            )
        return OperationResult.ok(category)

    def create(self, description, purpose) -> OperationResult[Category]:
        """Validate and insert a category."""
        try:
            cleaned, cleaned_purpose = validate_category_fields(
                description,
                purpose,
            )
        except ValueError as exc:
            return OperationResult.validation_failed(str(exc))
        category = self._categories.add(cleaned, cleaned_purpose)
        self._logger.info(f"Created category id={category.id}")
        return OperationResult.ok(category)

    def update(
        self,
        category_id: int,
        description,
        purpose,
    ) -> OperationResult[Category]:
        """Validate and overwrite an existing category."""
        if category_id <= 0:
            return OperationResult.not_found(
                f"Category {category_id} not found."
            )
        try:
            cleaned, cleaned_purpose = validate_category_fields(
                description,
                purpose,
            )
        except ValueError as exc:
            return OperationResult.validation_failed(str(exc))
        current = self._categories.fetch_by_id(category_id)
        if current is None:
            return OperationResult.not_found(
                f"Category {category_id} not found."
            )
        updated = replace(
            current,
            description=cleaned,
            purpose=cleaned_purpose,
        )
        if not self._categories.update(updated):
            return OperationResult.not_found(
                f"Category {category_id} not found."
            )
        self._logger.info(f"Updated category id={category_id}")
        return OperationResult.ok(updated)

    def delete(self, category_id: int) -> OperationResult[None]:
        """Delete a category that no transaction references."""
        if category_id <= 0:
            return OperationResult.not_found(
                f"Category {category_id} not found."
            )
        try:
            deleted = self._categories.delete(category_id)
        except IntegrityError:
            self._logger.warning(
                f"Refused to delete category id={category_id}: "
                "transactions still reference it"
            )
            return OperationResult.conflict(
                f"Category {category_id} is used by transactions."
            )
        if not deleted:
            return OperationResult.not_found(
                f"Category {category_id} not found."
            )
        self._logger.info(f"Deleted category id={category_id}")
        return OperationResult.ok()


__all__ = ["ManageCategoriesUseCase"]
