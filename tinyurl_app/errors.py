"""
Error taxonomy shared by the service layer and the HTTP layer.

Services never raise for expected failures. They return a Result that
carries either a value or a ServiceError, and the routes translate the
error kind into a status code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from fastapi import HTTPException, status

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of failure a service operation can report"""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STORE = "store"


STATUS_CODES = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a service operation.

    Exactly one of value/error is meaningful: check `ok` first.
    """
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=ServiceError(kind=kind, message=message))


def unwrap(result: Result[T]) -> T:
    """Return the value of a successful result, or raise the matching HTTPException"""
    if not result.ok:
        raise HTTPException(status_code=result.error.status_code, detail=result.error.message)
    return result.value
