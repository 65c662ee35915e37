from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ResultStatus(str, Enum):
    OK = "Ok"
    NOT_FOUND = "NotFound"
    INVALID = "Invalid"
    ERROR = "Error"
    CRITICAL_ERROR = "CriticalError"


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of a repository call.

    Callers branch on ``status``; expected outcomes (not found, cancelled)
    are values, not exceptions.
    """

    status: ResultStatus
    value: T | None = None
    errors: tuple[str, ...] = ()

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(status=ResultStatus.OK, value=value)

    @classmethod
    def not_found(cls) -> Result[T]:
        return cls(status=ResultStatus.NOT_FOUND)

    @classmethod
    def invalid(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.INVALID, errors=(message,))

    @classmethod
    def error(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.ERROR, errors=(message,))

    @classmethod
    def critical_error(cls, message: str) -> Result[T]:
        return cls(status=ResultStatus.CRITICAL_ERROR, errors=(message,))

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def message(self) -> str | None:
        return self.errors[0] if self.errors else None
