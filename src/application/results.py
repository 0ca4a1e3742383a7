"""Tagged result type returned by write and lookup use cases."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResultStatus(str, Enum):
    """Outcome categories that adapters map to transport codes."""

    OK = "ok"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a use case call.

    Attributes:
        status: Outcome category.
        value: Payload for successful calls, None otherwise.
        message: Human-readable detail for failed calls.
    """

    status: ResultStatus
    value: T | None = None
    message: str | None = None

    @property
    def is_ok(self) -> bool:
        """Return True for successful outcomes."""
        return self.status is ResultStatus.OK

    @classmethod
    def ok(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult[T]":
        return cls(ResultStatus.NOT_FOUND, message=message)

    @classmethod
    def validation_failed(cls, message: str) -> "OperationResult[T]":
        return cls(ResultStatus.VALIDATION_FAILED, message=message)

    @classmethod
    def conflict(cls, message: str) -> "OperationResult[T]":
        return cls(ResultStatus.CONFLICT, message=message)

    @classmethod
    def internal(cls, message: str) -> "OperationResult[T]":
        return cls(ResultStatus.INTERNAL, message=message)


__all__ = ["ResultStatus", "OperationResult"]
