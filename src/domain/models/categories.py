"""Domain model for transaction categories."""

from dataclasses import dataclass

from src.domain.constants import CategoryPurpose


@dataclass(frozen=True)
class Category:
    """A category transactions are filed under."""

    id: int
    description: str
    purpose: CategoryPurpose


__all__ = ["Category"]
