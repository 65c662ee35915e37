"""Capability protocols an entity implements to be stored by a repository.

Nothing here is a base class; any model exposing these members qualifies.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable
from uuid import UUID

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class CompositeKeyable(Protocol):
    @property
    def pk(self) -> str: ...

    @property
    def sk(self) -> str: ...

    @property
    def gsi1pk(self) -> str: ...

    @property
    def gsi1sk(self) -> str: ...


@runtime_checkable
class Traceable(Protocol):
    @property
    def entity_id(self) -> UUID: ...

    @property
    def client_id(self) -> UUID: ...


class Defaultable(Protocol[T_co]):
    @classmethod
    def default(cls) -> T_co: ...


class Record(CompositeKeyable, Traceable, Protocol):
    """Keyable + traceable entity with a pydantic-style dump/validate pair."""

    def model_dump(self, **kwargs: Any) -> dict[str, Any]: ...

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> Any: ...
