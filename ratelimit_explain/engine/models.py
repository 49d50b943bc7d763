"""Value objects passed into and returned from the explanation engine."""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

Audience = Literal["user", "developer"]
Style = Literal["short", "verbose"]
Severity = Literal["info", "warning", "error"]

DEFAULT_AUDIENCE: Audience = "user"
DEFAULT_STYLE: Style = "verbose"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# A day inside datetime's range on either side so float rounding can't overflow.
_MIN_MS = (datetime(1, 1, 2, tzinfo=timezone.utc) - _EPOCH) / timedelta(milliseconds=1)
_MAX_MS = (datetime(9999, 12, 30, tzinfo=timezone.utc) - _EPOCH) / timedelta(milliseconds=1)


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def instant_from_ms(ms: float) -> datetime:
    """UTC datetime for *ms* since the epoch, pinned to datetime's range."""
    return _EPOCH + timedelta(milliseconds=min(max(ms, _MIN_MS), _MAX_MS))


@dataclass(frozen=True)
class ExplainOptions:
    """Rendering options.

    ``audience`` and ``style`` are kept as given. Rendering only tests for
    ``"user"`` and ``"short"``, so anything else gets developer phrasing and
    verbose units.
    """

    now: float | None = None
    audience: str = DEFAULT_AUDIENCE
    style: str = DEFAULT_STYLE

    @classmethod
    def coerce(cls, options: ExplainOptions | Mapping[str, Any] | None) -> ExplainOptions:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        audience = options.get("audience")
        style = options.get("style")
        return cls(
            now=options.get("now"),
            audience=DEFAULT_AUDIENCE if audience is None else audience,
            style=DEFAULT_STYLE if style is None else style,
        )

    def now_ms(self) -> float:
        """Reference instant in ms; the wall clock unless ``now`` is usable."""
        if _is_finite_number(self.now):
            return self.now
        return time.time() * 1000


@dataclass(frozen=True)
class Explanation:
    """What the headers say, and a sentence saying it."""

    is_limited: bool
    severity: Severity
    message: str
    limit: int | float | None = None
    remaining: int | float | None = None
    resets_in_seconds: int | None = None
    resets_at: datetime | None = None
    retry_after_seconds: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "limit": self.limit,
            "remaining": self.remaining,
            "resets_in_seconds": self.resets_in_seconds,
            "resets_at": self.resets_at.isoformat() if self.resets_at else None,
            "retry_after_seconds": self.retry_after_seconds,
            "is_limited": self.is_limited,
            "severity": self.severity,
            "message": self.message,
        }
