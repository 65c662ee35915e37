from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import partial
from typing import Any, Mapping, Protocol, Sequence

import anyio

from .operators import Operator, key_condition

PRIMARY_HASH_KEY = "pk"
PRIMARY_RANGE_KEY = "sk"

# index name -> (hash attribute, range attribute)
IndexSchema = Mapping[str, tuple[str, str]]

DEFAULT_INDEXES: dict[str, tuple[str, str]] = {"GSI1": ("gsi1pk", "gsi1sk")}


@dataclass(frozen=True, slots=True)
class OperationConfig:
    table_name: str
    index_name: str | None = None


def to_dynamo(value: Any) -> Any:
    # DynamoDB does not accept float; Decimal(str(x)) keeps the printed precision.
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, list):
        return [to_dynamo(v) for v in value]
    if isinstance(value, dict):
        return {k: to_dynamo(v) for k, v in value.items()}
    return value


class QueryCursor:
    """
    One Query, consumed page by page.

    ``is_done`` only turns true once DynamoDB stops returning a
    LastEvaluatedKey; a short or empty page says nothing about completion.
    """

    def __init__(self, table, params: dict[str, Any]):
        self._table = table
        self._params = params
        self._last_evaluated_key: dict[str, Any] | None = None
        self.is_done = False

    async def get_next_page(self) -> list[dict[str, Any]]:
        if self.is_done:
            return []

        kwargs = dict(self._params)
        # Only pass ExclusiveStartKey when present.
        if self._last_evaluated_key:
            kwargs["ExclusiveStartKey"] = self._last_evaluated_key

        resp = await anyio.to_thread.run_sync(partial(self._table.query, **kwargs))
        self._last_evaluated_key = resp.get("LastEvaluatedKey") or None
        self.is_done = self._last_evaluated_key is None
        return list(resp.get("Items") or [])


class PageCursor(Protocol):
    is_done: bool

    async def get_next_page(self) -> list[dict[str, Any]]: ...


class StoreClient(Protocol):
    """What repositories need from the underlying store."""

    async def load(self, partition_key: str, sort_key: str, config: OperationConfig) -> dict[str, Any] | None: ...

    def query(
        self,
        partition_key: str,
        config: OperationConfig,
        operator: Operator | None = None,
        range_values: Sequence[Any] | None = None,
    ) -> PageCursor: ...

    async def save(self, item: Mapping[str, Any], config: OperationConfig) -> None: ...

    async def delete(self, partition_key: str, sort_key: str, config: OperationConfig) -> None: ...


class DynamoStoreClient:
    """
    Thin async adapter over a boto3 DynamoDB service resource.

    Every call names its table through ``OperationConfig`` so one client can
    serve any table. Blocking boto3 calls run on a worker thread.
    """

    def __init__(self, *, resource, indexes: IndexSchema | None = None):
        self._resource = resource
        self._indexes = dict(DEFAULT_INDEXES if indexes is None else indexes)

    def _table(self, config: OperationConfig):
        return self._resource.Table(config.table_name)

    def key_attributes(self, index_name: str | None) -> tuple[str, str]:
        if index_name is None:
            return PRIMARY_HASH_KEY, PRIMARY_RANGE_KEY
        try:
            return self._indexes[index_name]
        except KeyError:
            raise KeyError(f"Unknown index: {index_name}") from None

    async def load(self, partition_key: str, sort_key: str, config: OperationConfig) -> dict[str, Any] | None:
        table = self._table(config)
        key = {PRIMARY_HASH_KEY: partition_key, PRIMARY_RANGE_KEY: sort_key}
        resp = await anyio.to_thread.run_sync(partial(table.get_item, Key=key))
        return resp.get("Item")

    def query(
        self,
        partition_key: str,
        config: OperationConfig,
        operator: Operator | None = None,
        range_values: Sequence[Any] | None = None,
    ) -> QueryCursor:
        hash_attr, range_attr = self.key_attributes(config.index_name)
        params: dict[str, Any] = {
            "KeyConditionExpression": key_condition(
                hash_attr=hash_attr,
                hash_value=partition_key,
                range_attr=range_attr,
                operator=operator,
                range_values=range_values,
            ),
        }
        if config.index_name:
            params["IndexName"] = config.index_name
        return QueryCursor(self._table(config), params)

    async def save(self, item: Mapping[str, Any], config: OperationConfig) -> None:
        table = self._table(config)
        await anyio.to_thread.run_sync(partial(table.put_item, Item=to_dynamo(dict(item))))

    async def delete(self, partition_key: str, sort_key: str, config: OperationConfig) -> None:
        table = self._table(config)
        key = {PRIMARY_HASH_KEY: partition_key, PRIMARY_RANGE_KEY: sort_key}
        await anyio.to_thread.run_sync(partial(table.delete_item, Key=key))
