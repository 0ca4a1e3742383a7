"""SQLAlchemy-backed repository for categories."""

from sqlalchemy import text

from src.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import CategoryPurpose
from src.domain.models import Category

SELECT_CATEGORIES_SQL = text(
    "SELECT id, description, purpose FROM categories ORDER BY id"
)

SELECT_CATEGORY_SQL = text(
    "SELECT id, description, purpose FROM categories WHERE id = :id"
)

INSERT_CATEGORY_SQL = text(
    "INSERT INTO categories (description, purpose) "
    "VALUES (:description, :purpose)"
)

UPDATE_CATEGORY_SQL = text(
    "UPDATE categories SET description = :description, purpose = :purpose "
    "WHERE id = :id"
)

DELETE_CATEGORY_SQL = text("DELETE FROM categories WHERE id = :id")


def _to_category(row) -> Category:
    return Category(
        id=row.id,
        description=row.description,
        purpose=CategoryPurpose(row.purpose),
    )


class SqlAlchemyCategoriesRepository(CategoriesRepositoryPort):
    """Repository backed by SQLAlchemy for categories."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_all(self) -> list[Category]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_CATEGORIES_SQL).all()
        return [_to_category(row) for row in rows]

    def fetch_by_id(self, category_id: int) -> Category | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_CATEGORY_SQL, {"id": category_id}).first()
        return _to_category(row) if row else None

    def add(self, description: str, purpose: CategoryPurpose) -> Category:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                INSERT_CATEGORY_SQL,
                {"description": description, "purpose": int(purpose)},
            )
            new_id = result.lastrowid
        return Category(
            id=new_id,
            description=description,
            purpose=purpose,
        )

    def update(self, category: Category) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_CATEGORY_SQL,
                {
                    "id": category.id,
                    "description": category.description,
                    "purpose": int(category.purpose),
                },
            )
            affected = result.rowcount
        return affected > 0

    def delete(self, category_id: int) -> bool:
        """Delete a category.

        Raises:
            IntegrityError: When transactions still reference the category.
        """
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_CATEGORY_SQL, {"id": category_id})
            affected = result.rowcount
        return affected > 0


__all__ = ["SqlAlchemyCategoriesRepository"]
