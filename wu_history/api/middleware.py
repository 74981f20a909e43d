from __future__ import annotations

import time
import uuid

import structlog
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse, Response

from ..errors import HistoryError, UpstreamError

log = structlog.get_logger(__name__)

_ERROR_CODES = {
    400: "bad_request",
    500: "internal_error",
    502: "bad_gateway",
    503: "service_unavailable",
}


class RequestIDMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = uuid.uuid4().hex
        scope.setdefault("state", {})
        scope["state"]["request_id"] = request_id

        start = time.perf_counter()

        async def send_wrapper(message):
            if message.get("type") == "http.response.start":
                headers = message.setdefault("headers", [])
                headers.append((b"x-request-id", request_id.encode()))
            await send(message)

        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            dur_ms = int((time.perf_counter() - start) * 1000)
            log.info(
                "request_completed",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                duration_ms=dur_ms,
            )
            structlog.contextvars.unbind_contextvars("request_id")


def _error_body(request: Request, code: str, message: str) -> dict:
    req_id = getattr(getattr(request, "state", None), "request_id", None) or ""
    return {"error": {"code": code, "message": message, "request_id": req_id}}


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    code = _ERROR_CODES.get(exc.status_code, "http_error")
    # Header added by RequestIDMiddleware; avoid duplicates here
    return JSONResponse(status_code=exc.status_code, content=_error_body(request, code, str(exc.detail)))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("unhandled_error", error=str(exc))
    return JSONResponse(status_code=500, content=_error_body(request, "internal_error", str(exc)))


async def history_exception_handler(request: Request, exc: HistoryError) -> Response:
    if isinstance(exc, UpstreamError):
        # Provider errors are forwarded with their own status and body
        return Response(content=exc.body, status_code=exc.status_code, media_type=exc.content_type)
    log.warning("history_request_failed", status=exc.status_code, error=exc.message)
    code = _ERROR_CODES.get(exc.status_code, "http_error")
    return JSONResponse(status_code=exc.status_code, content=_error_body(request, code, exc.message))
