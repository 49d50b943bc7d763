"""Per-request correlation ID shared by the access log and log formatters."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """Return a fresh 32-character hex request ID."""
    return uuid.uuid4().hex


def current_request_id() -> str:
    return request_id_var.get()


@contextmanager
def bound_request_id(incoming: str = "") -> Iterator[str]:
    """Bind *incoming* (or a generated ID) for the duration of the block."""
    token = request_id_var.set(incoming or new_request_id())
    try:
        yield request_id_var.get()
    finally:
        request_id_var.reset(token)
