"""Case-insensitive access to rate-limit headers.

Callers hand us one of two shapes:

* a *lookup* object with its own ``get(name)`` (``http.client.HTTPMessage``,
  ``email.message.Message``, custom stores) which is queried once per field
  with the canonical header name, or
* a plain mapping, whose keys are compared case-insensitively here.

:func:`as_header_source` picks the adapter once, so the rest of the engine
only ever sees :class:`HeaderSource`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

LIMIT_HEADER = "X-RateLimit-Limit"
REMAINING_HEADER = "X-RateLimit-Remaining"
RESET_HEADER = "X-RateLimit-Reset"
RETRY_AFTER_HEADER = "Retry-After"


@runtime_checkable
class HeaderSource(Protocol):
    def get(self, name: str) -> str | None: ...


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


class LookupHeaderSource:
    """Delegates to the caller's own ``get``; casing is the caller's concern."""

    def __init__(self, lookup: Any) -> None:
        self._lookup = lookup

    def get(self, name: str) -> str | None:
        value = self._lookup.get(name)
        if value is None:
            return None
        return _as_text(value)


class MappingHeaderSource:
    """Scans a mapping's keys for a case-insensitive match."""

    def __init__(self, mapping: Mapping[str, Any] | None) -> None:
        self._mapping = mapping if mapping is not None else {}

    def get(self, name: str) -> str | None:
        wanted = name.lower()
        for key, value in self._mapping.items():
            if str(key).lower() == wanted:
                return _as_text(value)
        return None


def as_header_source(headers: Any) -> HeaderSource:
    """Wrap *headers* in the adapter matching its shape.

    ``None`` and mappings scan keys; any other object exposing a callable
    ``get`` is treated as a lookup. Anything else behaves as no headers.
    """
    if isinstance(headers, (LookupHeaderSource, MappingHeaderSource)):
        return headers
    if headers is None or isinstance(headers, Mapping):
        return MappingHeaderSource(headers)
    if callable(getattr(headers, "get", None)):
        return LookupHeaderSource(headers)
    return MappingHeaderSource(None)
