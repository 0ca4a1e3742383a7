"""Port for person persistence."""

from typing import Protocol

from src.domain.models import Person


class PeopleRepositoryPort(Protocol):
    """Port exposing CRUD access to people."""

    def fetch_all(self) -> list[Person]:
        """Return every person."""

    def fetch_by_id(self, person_id: int) -> Person | None:
        """Return a person, or None when missing."""

    def add(self, name: str, age: int) -> Person:
        """Insert a person and return it with its generated id."""

    def update(self, person: Person) -> bool:
        """Persist new values; return False when the row is missing."""

    def delete(self, person_id: int) -> bool:
        """Delete a person and, by cascade, their transactions."""


__all__ = ["PeopleRepositoryPort"]
