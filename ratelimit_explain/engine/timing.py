"""Turn Retry-After / X-RateLimit-Reset values into a wait in seconds.

Reset headers don't say which unit they use, so the magnitude decides:

=====================  ===========================
value                  interpretation
=====================  ===========================
``>= 1e12``            epoch milliseconds
``1e9 <= v < 1e12``    epoch seconds (GitHub style)
``< 1e9``              seconds from now
=====================  ===========================

Every conversion rounds up: a caller is never told to retry early.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EPOCH_MS_THRESHOLD = 1e12
EPOCH_SECONDS_THRESHOLD = 1e9


@dataclass(frozen=True)
class ResetWindow:
    resets_in_seconds: int
    retry_after_seconds: int | None
    source: str


def clamp_seconds(value: float) -> int:
    """Round *value* up to whole seconds, never below zero."""
    if not math.isfinite(value):
        return 0
    return max(0, math.ceil(value))


def classify_reset(value: float) -> str:
    if value >= EPOCH_MS_THRESHOLD:
        return "epoch-ms"
    if value >= EPOCH_SECONDS_THRESHOLD:
        return "epoch-s"
    return "relative"


def resolve_reset_seconds(value: float, now_ms: float) -> int | None:
    """Seconds from *now_ms* until the reset described by *value*.

    Resets already in the past give ``0``; ``None`` when the arithmetic
    doesn't produce a finite number.
    """
    if not math.isfinite(value):
        return None

    now_seconds = now_ms / 1000
    kind = classify_reset(value)
    if kind == "epoch-ms":
        delta = value / 1000 - now_seconds
    elif kind == "epoch-s":
        delta = value - now_seconds
    else:
        delta = value

    if not math.isfinite(delta):
        return None
    return max(0, math.ceil(delta))


def resolve_window(
    retry_after: float | None,
    reset: float | None,
    now_ms: float,
) -> ResetWindow | None:
    """Pick the wait to report. Retry-After wins over the reset header."""
    if retry_after is not None:
        seconds = clamp_seconds(retry_after)
        return ResetWindow(seconds, seconds, "retry-after")

    if reset is not None:
        seconds = resolve_reset_seconds(reset, now_ms)
        if seconds is not None:
            return ResetWindow(seconds, None, classify_reset(reset))

    return None
