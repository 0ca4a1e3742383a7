"""SQLAlchemy-backed repository for people."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.people_repository import PeopleRepositoryPort
from src.domain.models import Person

SELECT_PEOPLE_SQL = text("SELECT id, name, age FROM people ORDER BY id")

SELECT_PERSON_SQL = text("SELECT id, name, age FROM people WHERE id = :id")

INSERT_PERSON_SQL = text(
    "INSERT INTO people (name, age) VALUES (:name, :age)"
)

UPDATE_PERSON_SQL = text(
    "UPDATE people SET name = :name, age = :age WHERE id = :id"
)

DELETE_PERSON_SQL = text("DELETE FROM people WHERE id = :id")


def _to_person(row) -> Person:
    return Person(id=row.id, name=row.name, age=row.age)


class SqlAlchemyPeopleRepository(PeopleRepositoryPort):
    """Repository backed by SQLAlchemy for people."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_all(self) -> list[Person]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_PEOPLE_SQL).all()
        return [_to_person(row) for row in rows]

    def fetch_by_id(self, person_id: int) -> Person | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_PERSON_SQL, {"id": person_id}).first()
        return _to_person(row) if row else None

    def add(self, name: str, age: int) -> Person:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(INSERT_PERSON_SQL, {"name": name, "age": age})
            new_id = result.lastrowid
        return Person(id=new_id, name=name, age=age)

    def update(self, person: Person) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_PERSON_SQL,
                {"id": person.id, "name": person.name, "age": person.age},
            )
            affected = result.rowcount
        return affected > 0

    def delete(self, person_id: int) -> bool:
        """Delete a person; the schema cascades to their transactions."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_PERSON_SQL, {"id": person_id})
            affected = result.rowcount
        return affected > 0


__all__ = ["SqlAlchemyPeopleRepository"]
