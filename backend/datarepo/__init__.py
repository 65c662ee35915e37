"""Typed single-table DynamoDB repository.

Exposes the generic repository, its result type and the key/operator helpers.
"""
from .db.dynamodb.errors import PreconditionError
from .db.dynamodb.operators import Operator
from .persistence.repository import DataRepository, DynamoDbDataRepository
from .persistence.result import Result, ResultStatus

__all__ = [
    "DataRepository",
    "DynamoDbDataRepository",
    "Operator",
    "PreconditionError",
    "Result",
    "ResultStatus",
]
