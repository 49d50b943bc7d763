"""Explain the rate-limit headers on an ``httpx`` response."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ratelimit_explain.engine.explainer import explain_rate_limit
from ratelimit_explain.engine.headers import LookupHeaderSource
from ratelimit_explain.engine.models import ExplainOptions, Explanation


def explain_response(
    response: httpx.Response,
    options: ExplainOptions | Mapping[str, Any] | None = None,
) -> Explanation:
    # httpx.Headers.get is already case-insensitive and joins repeated
    # headers with ", "; the leading value is what gets parsed.
    return explain_rate_limit(LookupHeaderSource(response.headers), options)
