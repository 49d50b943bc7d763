"""Judge how close the caller is to the limit and say so in words."""

from __future__ import annotations

import math

from ratelimit_explain.engine.models import Severity

WARNING_RATIO = 0.10

_MINUTE = 60
_HOUR = 3600
_DAY = 86400


def pluralize(count: float, word: str) -> str:
    return word if count == 1 else f"{word}s"


def format_number(value: float) -> str:
    """``100`` not ``100.0``; fractional values keep their digits."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _round_half_up(seconds: float) -> int:
    return math.floor(seconds + 0.5)


def format_duration(seconds: float, style: str = "verbose") -> str:
    """Render a wait as ``"90s"``/``"2m"`` (short) or ``"2 minutes"``.

    Anything past a unit boundary is rounded *up* to the next whole unit,
    so 61 seconds reads as 2 minutes.
    """
    total = max(0, _round_half_up(seconds))

    if total < _MINUTE:
        amount, unit, suffix = total, "second", "s"
    elif total < _HOUR:
        amount, unit, suffix = math.ceil(total / _MINUTE), "minute", "m"
    elif total < _DAY:
        amount, unit, suffix = math.ceil(total / _HOUR), "hour", "h"
    else:
        amount, unit, suffix = math.ceil(total / _DAY), "day", "d"

    if style == "short":
        return f"{amount}{suffix}"
    return f"{amount} {pluralize(amount, unit)}"


def compute_is_limited(
    remaining: float | None, retry_after_seconds: int | None
) -> bool:
    if remaining is not None:
        return remaining <= 0
    if retry_after_seconds is not None:
        return retry_after_seconds > 0
    return False


def compute_severity(
    remaining: float | None, limit: float | None, is_limited: bool
) -> Severity:
    if remaining is not None:
        if remaining <= 0:
            return "error"
        if limit is not None and limit > 0 and remaining / limit <= WARNING_RATIO:
            return "warning"
        return "info"
    return "error" if is_limited else "info"


def _requests(count: float) -> str:
    return f"{format_number(count)} {pluralize(count, 'request')}"


def _limited_message(
    limit: float | None, wait: str | None, style: str, audience: str
) -> str:
    if audience == "user":
        if wait is not None:
            return f"Too many requests. Try again in {wait}."
        return "Too many requests. Please try again later."

    message = "Rate limit exceeded."
    if limit is not None:
        if style == "short":
            message += f" Limit {format_number(limit)}."
        else:
            message += f" Limit is {format_number(limit)} requests."
    if wait is not None:
        message += f" Resets in {wait}."
    return message


def build_message(
    *,
    limit: float | None,
    remaining: float | None,
    resets_in_seconds: int | None,
    is_limited: bool,
    style: str,
    audience: str,
) -> str:
    """Pick the most specific sentence the known fields support."""
    wait = (
        format_duration(resets_in_seconds, style)
        if resets_in_seconds is not None
        else None
    )
    reset_clause = f" Resets in {wait}." if wait is not None else ""

    if is_limited:
        return _limited_message(limit, wait, style, audience)

    if remaining is not None:
        if audience == "user":
            return f"{_requests(remaining)} left.{reset_clause}"
        of_limit = f" of {format_number(limit)}" if limit is not None else ""
        return f"{_requests(remaining)} remaining{of_limit}.{reset_clause}"

    if wait is not None:
        if audience == "user":
            return f"Limits reset in {wait}."
        return f"Rate limit resets in {wait}."

    if audience == "developer" and limit is not None:
        if style == "short":
            return f"Rate limit {format_number(limit)} requests."
        return f"Rate limit is {format_number(limit)} requests."

    if audience == "user":
        return "Request limits apply."
    return "Rate limit information unavailable."
