"""Rate-limit header interpretation: parse, resolve, and explain."""

from __future__ import annotations

from ratelimit_explain.engine.explainer import explain_rate_limit
from ratelimit_explain.engine.headers import (
    HeaderSource,
    LookupHeaderSource,
    MappingHeaderSource,
    as_header_source,
)
from ratelimit_explain.engine.models import ExplainOptions, Explanation
from ratelimit_explain.engine.render import format_duration
from ratelimit_explain.integrations import explain_response

__version__ = "0.1.0"

__all__ = [
    "explain_rate_limit",
    "explain_response",
    "format_duration",
    "ExplainOptions",
    "Explanation",
    "HeaderSource",
    "LookupHeaderSource",
    "MappingHeaderSource",
    "as_header_source",
]
