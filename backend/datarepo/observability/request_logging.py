from __future__ import annotations

import functools
import time
import uuid
from typing import Any, Awaitable, Callable, TypeVar

from .context import request_id_var
from .logging import get_logger

T = TypeVar("T")


def log_request(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Wrap an async request handler with start/end/duration logs.

    - Tags the call as "<HandlerName> [<uuid4>]" and exposes the uuid via the
      request-id contextvar so nested logs (eg repository errors) carry it.
    - Logs and re-raises anything the handler raises.
    """

    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", "handler")
    log = get_logger("request")

    @functools.wraps(fn)
    async def _wrapper(*args: Any, **kwargs: Any) -> T:
        request_id = str(uuid.uuid4())
        identified = f"{name} [{request_id}]"
        token = request_id_var.set(request_id)

        log.info("request_start", request=identified)
        start = time.perf_counter()
        try:
            return await fn(*args, **kwargs)
        except Exception as exc:
            log.error(
                "request_exception",
                request=identified,
                exception_name=type(exc).__name__,
                component=name,
                message=str(exc),
                exc_info=exc,
            )
            raise
        finally:
            dur_ms = (time.perf_counter() - start) * 1000.0
            log.info("request_end", request=identified, duration_ms=round(dur_ms, 2))
            request_id_var.reset(token)

    return _wrapper
