"""
exception_handlers.py
- Purpose: Turn AppError (and anything unexpected) into the export API's JSON error body.

The body carries the request_id so a failed download can be matched to the
export's log lines (cv_id, template_id, user_id come from the same context).
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from cvexport.core import AppError, ErrorCode, ErrorReason
from cvexport.core.request_context import get_context

logger = logging.getLogger("cvexport.exceptions")


def _with_request_id(payload: dict[str, Any]) -> dict[str, Any]:
    rid = get_context().get("request_id")
    if rid:
        payload["error"]["request_id"] = rid
    return payload


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "export.app_error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
            "code": getattr(exc.code, "value", exc.code),
            "reason": getattr(exc.reason, "value", exc.reason),
            "details": exc.details,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=_with_request_id(exc.to_dict()))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "export.unhandled_exception",
        extra={"path": request.url.path, "method": request.method, "error_type": type(exc).__name__},
    )
    payload = {"error": {"code": ErrorCode.INTERNAL_ERROR, "reason": ErrorReason.INTERNAL_ERROR}}
    return JSONResponse(status_code=500, content=_with_request_id(payload))
