"""Port for category persistence."""

from typing import Protocol

from src.domain.constants import CategoryPurpose
from src.domain.models import Category


class CategoriesRepositoryPort(Protocol):
    """Port exposing CRUD access to categories."""

    def fetch_all(self) -> list[Category]:
        """Return every category."""

    def fetch_by_id(self, category_id: int) -> Category | None:
        """Return a category, or None when missing."""

    def add(self, description: str, purpose: CategoryPurpose) -> Category:
        """Insert a category and return it with its generated id."""

    def update(self, category: Category) -> bool:
        """Persist new values; return False when the row is missing."""

    def delete(self, category_id: int) -> bool:
        """Delete a category.

        Raises:
            sqlalchemy.exc.IntegrityError: When transactions reference it.
        """


__all__ = ["CategoriesRepositoryPort"]
