from __future__ import annotations

from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from ...persistence.result import Result

STORE_EXCEPTIONS: tuple[type[Exception], ...] = (ClientError, BotoCoreError)

_RETRYABLE_CODES = {
    "ProvisionedThroughputExceededException",
    "ThrottlingException",
    "RequestLimitExceeded",
    "InternalServerError",
    "ServiceUnavailable",
    "TransactionConflictException",
}

_RETRYABLE_BOTOCORE = (
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)


def err_code_from_client_error(e: ClientError) -> str | None:
    try:
        return (e.response or {}).get("Error", {}).get("Code")
    except Exception:
        return None


def aws_request_id_from_client_error(e: ClientError) -> str | None:
    try:
        return (e.response or {}).get("ResponseMetadata", {}).get("RequestId")
    except Exception:
        return None


def is_store_exception(exc: BaseException) -> bool:
    return isinstance(exc, STORE_EXCEPTIONS)


def is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, ClientError):
        return (err_code_from_client_error(exc) or "") in _RETRYABLE_CODES
    return isinstance(exc, _RETRYABLE_BOTOCORE)


def describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


def classify_exception(exc: Exception, *, component: str, log: Any) -> Result[Any]:
    """
    Log a failed store call and turn it into a critical-error result.

    Retryable store failures go to their own log event so a retry policy can be
    added later; the result is the same either way.
    """
    fields: dict[str, Any] = {
        "exception_name": type(exc).__name__,
        "component": component,
        "message": str(exc),
    }
    if isinstance(exc, ClientError):
        fields["error_code"] = err_code_from_client_error(exc)
        fields["aws_request_id"] = aws_request_id_from_client_error(exc)

    # TODO: apply a retry policy to retryable store failures once one is chosen.
    if is_store_exception(exc) and is_retryable(exc):
        log.error("ddb_retryable_exception", exc_info=exc, **fields)
    else:
        log.error("ddb_generic_exception", exc_info=exc, **fields)

    return Result.critical_error(describe(exc))
