"""Explain endpoint: headers in, explanation out."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ratelimit_explain.api.schemas import (
    ErrorResponse,
    ExplainRequest,
    ExplanationResponse,
)
from ratelimit_explain.config import settings
from ratelimit_explain.engine.explainer import explain_rate_limit
from ratelimit_explain.engine.models import ExplainOptions
from ratelimit_explain.header_text import parse_header_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["explain"])


def _merge_headers(body: ExplainRequest) -> dict[str, str | int | float]:
    """``headers`` overlaid with ``header_text``, matching keys case-insensitively."""
    merged = dict(body.headers or {})
    if body.header_text:
        for key, value in parse_header_text(body.header_text).items():
            for existing in [k for k in merged if k.lower() == key.lower()]:
                del merged[existing]
            merged[key] = value
    return merged


@router.post(
    "/explain",
    summary="Explain rate-limit headers",
    description="Interpret `X-RateLimit-Limit`, `X-RateLimit-Remaining`, "
    "`X-RateLimit-Reset` and `Retry-After` and describe the result in words.",
    response_model=ExplanationResponse,
    responses={422: {"model": ErrorResponse, "description": "Invalid request body"}},
)
async def explain(body: ExplainRequest) -> ExplanationResponse:
    headers = _merge_headers(body)
    options = ExplainOptions(
        now=body.now,
        audience=body.audience or settings.default_audience,
        style=body.style or settings.default_style,
    )
    explanation = explain_rate_limit(headers, options)
    logger.info(
        "Explained %d header(s): severity=%s limited=%s",
        len(headers),
        explanation.severity,
        explanation.is_limited,
    )
    return ExplanationResponse.model_validate(explanation.to_dict())
