from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from cvexport.core.request_context import clear_context, set_context


logger = logging.getLogger("cvexport.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Accept upstream request id if present, else create one
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        set_context(request_id=rid)

        t0 = time.perf_counter()
        try:
            logger.info(
                "http.request",
                extra={"method": request.method, "path": request.url.path},
            )
            response: Response = await call_next(request)

            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "content_type": response.headers.get("content-type"),
                    "duration_ms": int((time.perf_counter() - t0) * 1000),
                },
            )

            response.headers["x-request-id"] = rid
            return response
        finally:
            clear_context()
