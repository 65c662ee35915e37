from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from boto3.dynamodb.conditions import ConditionBase, Key

from .errors import PreconditionError


class Operator(str, Enum):
    """Range-key comparison requested by callers."""

    EQUAL = "Equal"
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    BEGINS_WITH = "BeginsWith"
    BETWEEN = "Between"


class QueryOperator(str, Enum):
    """boto3 key-condition builders; values are ``Key`` method names."""

    EQ = "eq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    BEGINS_WITH = "begins_with"
    BETWEEN = "between"


OPERATORS: dict[Operator, QueryOperator] = {
    Operator.EQUAL: QueryOperator.EQ,
    Operator.LESS_THAN: QueryOperator.LT,
    Operator.LESS_THAN_OR_EQUAL: QueryOperator.LTE,
    Operator.GREATER_THAN: QueryOperator.GT,
    Operator.GREATER_THAN_OR_EQUAL: QueryOperator.GTE,
    Operator.BEGINS_WITH: QueryOperator.BEGINS_WITH,
    Operator.BETWEEN: QueryOperator.BETWEEN,
}


def to_query_operator(operator: Operator) -> QueryOperator:
    return OPERATORS[operator]


def _arity(op: QueryOperator) -> int:
    return 2 if op is QueryOperator.BETWEEN else 1


def check_range_values(operator: Operator, values: Sequence[Any] | None) -> list[Any]:
    op = to_query_operator(operator)
    if isinstance(values, (str, bytes)):
        raise PreconditionError("range values must be a list of values, not a string", param="range_values")
    vals = list(values or [])
    if len(vals) != _arity(op):
        raise PreconditionError(
            f"{operator.value} expects {_arity(op)} range value(s), got {len(vals)}",
            param="range_values",
        )
    if any(v is None for v in vals):
        raise PreconditionError("range values must not be None", param="range_values")
    return vals


def range_condition(range_attr: str, operator: Operator, values: Sequence[Any]) -> ConditionBase:
    vals = check_range_values(operator, values)
    return getattr(Key(range_attr), to_query_operator(operator).value)(*vals)


def key_condition(
    *,
    hash_attr: str,
    hash_value: str,
    range_attr: str | None = None,
    operator: Operator | None = None,
    range_values: Sequence[Any] | None = None,
) -> ConditionBase:
    """Build a KeyConditionExpression; hash equality plus an optional range clause."""
    cond = Key(hash_attr).eq(hash_value)
    if operator is None or range_values is None:
        return cond
    if not range_attr:
        raise PreconditionError("range_attr is required for a range condition", param="range_attr")
    return cond & range_condition(range_attr, operator, range_values)
