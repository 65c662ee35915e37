from __future__ import annotations

from typing import Any


class PreconditionError(ValueError):
    """Raised for invalid caller input before any DynamoDB call is made.

    These are programming errors (blank keys, missing entity, bad range
    arguments). They are never turned into a ``Result`` and must not be retried.
    """

    def __init__(self, message: str, *, param: str | None = None):
        super().__init__(message)
        self.param = param


def require_text(value: Any, param: str) -> str:
    if value is None:
        raise PreconditionError(f"{param} is required", param=param)
    if not isinstance(value, str) or not value.strip():
        raise PreconditionError(f"{param} must be a non-blank string", param=param)
    return value


def require_present(value: Any, param: str) -> Any:
    if value is None:
        raise PreconditionError(f"{param} is required", param=param)
    return value
