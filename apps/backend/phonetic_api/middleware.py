from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from structlog import contextvars as structlog_contextvars

from .logging import logger

__all__ = [
    "AccessLogMiddleware",
    "RequestIDMiddleware",
]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assign a request ID to each incoming request and expose it in headers.

    - Sets `request.state.request_id`
    - Adds `X-Request-ID` to the response headers
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Emit one structured `request_complete` log line per request.

    なぜ: 失敗リクエストも含めて遅延・ステータス・例外型を残し、
    運用時のトラブルシュートをログだけで行えるようにする。
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        start = time.time()
        path = request.url.path
        method = request.method
        request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())
        request.state.request_id = request_id
        structlog_contextvars.bind_contextvars(request_id=request_id)
        is_error = False
        status_code: int | None = None
        error_type: str | None = None
        error_message: str | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        except Exception as exc:
            is_error = True
            status_code = 500
            error_type = exc.__class__.__name__
            raw_error_message = str(exc)
            # ログ膨張を防ぐため 200 文字で切り詰める
            error_message = (
                raw_error_message
                if len(raw_error_message) <= 200
                else f"{raw_error_message[:197]}..."
            )
            raise
        finally:
            latency_ms = (time.time() - start) * 1000
            log_method = logger.error if is_error else logger.info
            log_method(
                "request_complete",
                path=path,
                method=method,
                latency_ms=latency_ms,
                is_error=is_error,
                status_code=status_code,
                error_type=error_type,
                error_message=error_message,
                client_ip=request.client.host if request.client else "unknown",
            )
            structlog_contextvars.unbind_contextvars("request_id")
