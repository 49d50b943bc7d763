"""Entry point: headers in, :class:`Explanation` out."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ratelimit_explain.engine.headers import (
    LIMIT_HEADER,
    REMAINING_HEADER,
    RESET_HEADER,
    RETRY_AFTER_HEADER,
    as_header_source,
)
from ratelimit_explain.engine.models import ExplainOptions, Explanation, instant_from_ms
from ratelimit_explain.engine.numbers import parse_number
from ratelimit_explain.engine.render import (
    build_message,
    compute_is_limited,
    compute_severity,
)
from ratelimit_explain.engine.timing import resolve_window

logger = logging.getLogger(__name__)


def _non_negative(value: int | float | None) -> int | float | None:
    if value is None:
        return None
    return max(0, value)


def explain_rate_limit(
    headers: Any,
    options: ExplainOptions | Mapping[str, Any] | None = None,
) -> Explanation:
    """Explain the rate-limit state described by *headers*.

    Never raises for bad header values: anything unusable is treated as
    missing and the message falls back to a less specific wording.
    """
    source = as_header_source(headers)
    opts = ExplainOptions.coerce(options)

    limit = _non_negative(parse_number(source.get(LIMIT_HEADER)))
    remaining = _non_negative(parse_number(source.get(REMAINING_HEADER)))
    reset_raw = parse_number(source.get(RESET_HEADER))
    retry_after_raw = parse_number(source.get(RETRY_AFTER_HEADER))

    now_ms = opts.now_ms()
    window = resolve_window(retry_after_raw, reset_raw, now_ms)

    resets_in_seconds = None
    resets_at = None
    retry_after_seconds = None
    if window is not None:
        resets_in_seconds = window.resets_in_seconds
        retry_after_seconds = window.retry_after_seconds
        resets_at = instant_from_ms(now_ms + resets_in_seconds * 1000.0)
        if reset_raw is not None and window.source == "retry-after":
            logger.debug("Retry-After present; ignoring %s=%s", RESET_HEADER, reset_raw)
        logger.debug(
            "Resolved wait of %ss from %s", resets_in_seconds, window.source
        )

    is_limited = compute_is_limited(remaining, retry_after_seconds)
    severity = compute_severity(remaining, limit, is_limited)
    message = build_message(
        limit=limit,
        remaining=remaining,
        resets_in_seconds=resets_in_seconds,
        is_limited=is_limited,
        style=opts.style,
        audience=opts.audience,
    )

    return Explanation(
        limit=limit,
        remaining=remaining,
        resets_in_seconds=resets_in_seconds,
        resets_at=resets_at,
        retry_after_seconds=retry_after_seconds,
        is_limited=is_limited,
        severity=severity,
        message=message,
    )
