from __future__ import annotations

from datetime import date, datetime
from typing import Any
from uuid import UUID


def _render(value: Any) -> str:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def make_key(prefix: str, value: Any) -> str:
    """One composite-key component, eg ``PERSON#<uuid>`` or ``DOB#1961-06-06``."""
    return f"{prefix}#{_render(value)}"
