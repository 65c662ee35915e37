"""
Generic repository over the single-table design.

One implementation serves every entity type that exposes composite keys
(pk/sk, gsi1pk/gsi1sk) and trace ids; see ``persistence.traits``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence, TypeVar

from ..db.dynamodb.classify import classify_exception
from ..db.dynamodb.errors import require_present, require_text
from ..db.dynamodb.operators import Operator, check_range_values
from ..db.dynamodb.store import OperationConfig, StoreClient
from ..observability.logging import get_logger
from .result import Result
from .traits import Record

T = TypeVar("T", bound=Record)

CANCELLED_MESSAGE = "Cancellation token was requested"


class CancelSignal(Protocol):
    """Anything with ``is_set()``: asyncio.Event, threading.Event, ..."""

    def is_set(self) -> bool: ...


def _cancelled(cancel: CancelSignal | None) -> bool:
    return cancel is not None and cancel.is_set()


class DataRepository(ABC):
    """Base repository interface."""

    @abstractmethod
    async def get(
        self,
        model: type[T],
        partition_key: str,
        sort_key: str,
        index_name: str | None = None,
        operator: Operator = Operator.EQUAL,
        cancel: CancelSignal | None = None,
    ) -> Result[T]:
        """Fetch one entity by primary key, or the first index match."""

    @abstractmethod
    async def get_many(
        self,
        model: type[T],
        partition_key: str,
        index_name: str | None = None,
        range_values: Sequence[Any] | None = None,
        operator: Operator | None = None,
        cancel: CancelSignal | None = None,
    ) -> Result[list[T]]:
        """Fetch every entity under a partition key, optionally range-filtered."""

    @abstractmethod
    async def upsert(self, entity: Record, cancel: CancelSignal | None = None) -> Result[None]:
        """Create or overwrite an entity."""

    @abstractmethod
    async def delete(self, partition_key: str, sort_key: str, cancel: CancelSignal | None = None) -> Result[None]:
        """Delete an entity by primary key; absent keys still succeed."""


class DynamoDbDataRepository(DataRepository):
    def __init__(self, *, store: StoreClient, table_name: str, log: Any = None):
        if not table_name or not str(table_name).strip():
            raise ValueError("table_name must be a non-blank string")

        self._store = store
        self._table_name = str(table_name).strip()
        self._log = log if log is not None else get_logger(__name__)

    @property
    def table_name(self) -> str:
        return self._table_name

    def _fail(self, exc: Exception) -> Result[Any]:
        return classify_exception(exc, component=type(self).__name__, log=self._log)

    async def get(
        self,
        model: type[T],
        partition_key: str,
        sort_key: str,
        index_name: str | None = None,
        operator: Operator = Operator.EQUAL,
        cancel: CancelSignal | None = None,
    ) -> Result[T]:
        require_text(partition_key, "partition_key")
        require_text(sort_key, "sort_key")
        if index_name is not None:
            check_range_values(operator, [sort_key])

        if _cancelled(cancel):
            return Result.error(CANCELLED_MESSAGE)

        config = OperationConfig(table_name=self._table_name, index_name=index_name)

        try:
            if index_name is not None:
                # First page only; callers wanting every match use get_many.
                cursor = self._store.query(partition_key, config, operator, [sort_key])
                items = await cursor.get_next_page()
                if not items:
                    return Result.not_found()
                return Result.success(model.model_validate(items[0]))

            item = await self._store.load(partition_key, sort_key, config)
            if item is None:
                return Result.not_found()
            return Result.success(model.model_validate(item))
        except Exception as exc:
            return self._fail(exc)

    async def get_many(
        self,
        model: type[T],
        partition_key: str,
        index_name: str | None = None,
        range_values: Sequence[Any] | None = None,
        operator: Operator | None = None,
        cancel: CancelSignal | None = None,
    ) -> Result[list[T]]:
        require_text(partition_key, "partition_key")
        ranged = range_values is not None and operator is not None
        if ranged:
            check_range_values(operator, range_values)

        if _cancelled(cancel):
            return Result.error(CANCELLED_MESSAGE)

        config = OperationConfig(table_name=self._table_name, index_name=index_name)

        try:
            if ranged:
                cursor = self._store.query(partition_key, config, operator, list(range_values))
            else:
                cursor = self._store.query(partition_key, config)

            results: list[T] = []
            while True:
                page = await cursor.get_next_page()
                results.extend(model.model_validate(item) for item in page)
                if cursor.is_done:
                    break

            if not results:
                return Result.not_found()
            return Result.success(results)
        except Exception as exc:
            return self._fail(exc)

    async def upsert(self, entity: Record, cancel: CancelSignal | None = None) -> Result[None]:
        require_present(entity, "entity")

        if _cancelled(cancel):
            return Result.error(CANCELLED_MESSAGE)

        config = OperationConfig(table_name=self._table_name)

        try:
            # Unconditional put: last writer wins.
            item = entity.model_dump(mode="json", by_alias=True)
            await self._store.save(item, config)
            return Result.success()
        except Exception as exc:
            return self._fail(exc)

    async def delete(self, partition_key: str, sort_key: str, cancel: CancelSignal | None = None) -> Result[None]:
        require_text(partition_key, "partition_key")
        require_text(sort_key, "sort_key")

        if _cancelled(cancel):
            return Result.error(CANCELLED_MESSAGE)

        config = OperationConfig(table_name=self._table_name)

        try:
            await self._store.delete(partition_key, sort_key, config)
            return Result.success()
        except Exception as exc:
            return self._fail(exc)
