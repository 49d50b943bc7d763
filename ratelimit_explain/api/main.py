from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from ratelimit_explain import __version__
from ratelimit_explain.api.exception_handlers import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from ratelimit_explain.api.middleware import RequestLoggingMiddleware
from ratelimit_explain.api.routes.explain import router as explain_router
from ratelimit_explain.api.schemas import HealthResponse
from ratelimit_explain.config import settings
from ratelimit_explain.logging_config import setup_logging

logger = logging.getLogger("ratelimit_explain")

_STARTED = time.monotonic()

_DESCRIPTION = """\
Turn rate-limit response headers into plain-language explanations.

Send the headers you received from any API and get back the parsed
**limit**, **remaining** count, time until **reset**, whether you are
currently **limited**, a **severity**, and a **message** phrased for
end users or developers.

### Recognized headers

`X-RateLimit-Limit`, `X-RateLimit-Remaining`, `X-RateLimit-Reset`
(relative seconds, epoch seconds or epoch milliseconds) and
`Retry-After` (seconds; takes precedence over the reset header).
"""

_OPENAPI_TAGS = [
    {
        "name": "system",
        "description": "Health checks and operational endpoints.",
    },
    {
        "name": "explain",
        "description": "Interpret rate-limit headers.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Starting ratelimit-explain %s (audience=%s, style=%s)",
        __version__,
        settings.default_audience,
        settings.default_style,
    )
    yield


app = FastAPI(
    title="Rate Limit Explainer",
    version=__version__,
    summary="Plain-language explanations of rate-limit headers",
    description=_DESCRIPTION,
    openapi_tags=_OPENAPI_TAGS,
    lifespan=lifespan,
)

# Exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# CORS
origins = [o.strip() for o in settings.cors_origins.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging
app.add_middleware(RequestLoggingMiddleware)

app.include_router(explain_router)


@app.get(
    "/health",
    tags=["system"],
    summary="Health check",
    response_model=HealthResponse,
)
async def health():
    """Report that the service is up."""
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": round(time.monotonic() - _STARTED, 3),
    }
