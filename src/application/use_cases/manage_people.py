"""Use case for creating, reading, updating and deleting people."""

from dataclasses import replace

from src.application.ports.people_repository import PeopleRepositoryPort
from src.application.results import OperationResult
from src.domain.models import Person
from src.domain.services.validation import validate_person_fields
from src.infrastructure.logging.logger import get_app_logger


class ManagePeopleUseCase:
    """CRUD operations on people with field validation."""

    def __init__(self, people_repository: PeopleRepositoryPort, logger=None):
        """Initialize the use case.

        Args:
            people_repository: Port providing person persistence.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._people = people_repository
        self._logger = logger or get_app_logger()

    def list_all(self) -> list[Person]:
        """Return every person."""
        return self._people.fetch_all()

    def get(self, person_id: int) -> OperationResult[Person]:
        """Return a person or a NOT_FOUND result."""
        person = self._people.fetch_by_id(person_id) if person_id > 0 else None
        if person is None:
            return OperationResult.not_found(f"Person {person_id} not found.")
        return OperationResult.ok(person)

    def create(self, name, age) -> OperationResult[Person]:
        """Validate and insert a person."""
        try:
            cleaned_name, cleaned_age = validate_person_fields(name, age)
        except ValueError as exc:
            return OperationResult.validation_failed(str(exc))
        person = self._people.add(cleaned_name, cleaned_age)
        self._logger.info(f"Created person id={person.id}")
        return OperationResult.ok(person)

    def update(self, person_id: int, name, age) -> OperationResult[Person]:
        """Validate and overwrite an existing person."""
        if person_id <= 0:
            return OperationResult.not_found(f"Person {person_id} not found.")
        try:
            cleaned_name, cleaned_age = validate_person_fields(name, age)
        except ValueError as exc:
            return OperationResult.validation_failed(str(exc))
        current = self._people.fetch_by_id(person_id)
        if current is None:
            return OperationResult.not_found(f"Person {person_id} not found.")
        updated = replace(current, name=cleaned_name, age=cleaned_age)
        if not self._people.update(updated):
            return OperationResult.not_found(f"Person {person_id} not found.")
        self._logger.info(f"Updated person id={person_id}")
        return OperationResult.ok(updated)

    def delete(self, person_id: int) -> OperationResult[None]:
        """Delete a person together with their transactions."""
        if person_id <= 0 or not self._people.delete(person_id):
            return OperationResult.not_found(f"Person {person_id} not found.")
        self._logger.info(f"Deleted person id={person_id}")
        return OperationResult.ok()


__all__ = ["ManagePeopleUseCase"]
