"""Domain model for people who own transactions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person whose incomes and expenses are tracked.

    Attributes:
        id: Store-generated identifier.
        name: Display name.
        age: Age in years, never negative.
    """

    id: int
    name: str
    age: int


__all__ = ["Person"]
