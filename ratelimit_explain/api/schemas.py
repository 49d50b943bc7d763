"""Pydantic request/response models for OpenAPI documentation."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Structured error returned by all non-2xx responses."""

    error: bool = Field(True, description="Always true for error responses")
    status_code: int = Field(..., description="HTTP status code")
    detail: str | list[dict[str, Any]] = Field(
        ..., description="Error message, or the list of validation errors for 422"
    )


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Liveness check."""

    status: str = Field(..., description="Always 'ok' when the process is serving")
    version: str = Field(..., description="Package version")
    uptime_seconds: float = Field(..., description="Seconds since the process started")


# ---------------------------------------------------------------------------
# /v1/explain
# ---------------------------------------------------------------------------


class ExplainRequest(BaseModel):
    """Headers to explain, plus rendering options."""

    headers: dict[str, StrictStr | StrictInt | StrictFloat] | None = Field(
        None,
        description="Response headers as a JSON object. Keys are matched "
        "case-insensitively.",
        examples=[{"X-RateLimit-Limit": "100", "X-RateLimit-Remaining": "3"}],
    )
    header_text: str | None = Field(
        None,
        description="Raw 'Key: Value' header lines, e.g. pasted from curl -i. "
        "Parsed lines override entries in `headers`.",
    )
    now: float | None = Field(
        None,
        description="Reference time in milliseconds since the epoch "
        "(default: server time)",
    )
    audience: Literal["user", "developer"] | None = Field(
        None, description="Phrase for end users or for developers"
    )
    style: Literal["short", "verbose"] | None = Field(
        None, description="Compact ('2m') or spelled-out ('2 minutes') durations"
    )


class ExplanationResponse(BaseModel):
    """Interpreted rate-limit state."""

    limit: int | float | None = Field(None, description="Requests allowed per window")
    remaining: int | float | None = Field(None, description="Requests left in the window")
    resets_in_seconds: int | None = Field(
        None, description="Seconds until the window resets or Retry-After elapses"
    )
    resets_at: datetime | None = Field(
        None, description="Absolute reset instant (UTC); set iff resets_in_seconds is"
    )
    retry_after_seconds: int | None = Field(
        None, description="Parsed Retry-After, rounded up to whole seconds"
    )
    is_limited: bool = Field(
        ..., description="True when another request should not be sent yet"
    )
    severity: Literal["info", "warning", "error"] = Field(
        ..., description="'warning' at or below 10% of the limit, 'error' when exhausted"
    )
    message: str = Field(..., description="Human-readable explanation")
