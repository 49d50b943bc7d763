"""Request logging middleware (pure ASGI)."""

from __future__ import annotations

import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ratelimit_explain.services.request_context import bound_request_id

logger = logging.getLogger("ratelimit_explain.access")


def _incoming_request_id(scope: Scope) -> str:
    for name, value in scope.get("headers", []):
        if name == b"x-request-id":
            return value.decode("latin-1")
    return ""


class RequestLoggingMiddleware:
    """Access-log every request and stamp ``X-Request-ID`` and
    ``X-Response-Time-Ms`` on the response.

    Request bodies are not logged; they carry third-party response headers.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        with bound_request_id(_incoming_request_id(scope)) as rid:
            start = time.perf_counter()
            status_code = 500

            async def send_wrapper(message: Message) -> None:
                nonlocal status_code
                if message["type"] == "http.response.start":
                    status_code = message["status"]
                    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
                    headers = list(message.get("headers", []))
                    headers.append((b"x-response-time-ms", str(elapsed_ms).encode()))
                    headers.append((b"x-request-id", rid.encode("latin-1")))
                    message = {**message, "headers": headers}
                await send(message)

            try:
                await self.app(scope, receive, send_wrapper)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                logger.info(
                    "%s %s %s %.2fms",
                    scope.get("method", ""),
                    scope.get("path", ""),
                    status_code,
                    elapsed_ms,
                )
