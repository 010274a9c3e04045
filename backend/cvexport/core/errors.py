"""
errors.py
- Purpose: AppError used across services/routers for consistent errors.
- Pattern: raise AppError(...) in a service, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status

from cvexport.core.error_codes import ErrorCode
from cvexport.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


# Convenience constructors
def bad_request(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, details: dict | None = None) -> AppError:
    return AppError(code=code, reason=reason, status_code=http_status.HTTP_400_BAD_REQUEST, details=details)


def unauthorized(reason: str = ErrorReason.AUTH_REQUIRED, *, message: str | None = None) -> AppError:
    return AppError(code=ErrorCode.UNAUTHORIZED, reason=reason, status_code=http_status.HTTP_401_UNAUTHORIZED, message=message)


def internal_error(reason: str = ErrorReason.UNKNOWN, *, code: ErrorCode = ErrorCode.INTERNAL_ERROR, details: dict | None = None) -> AppError:
    return AppError(code=code, reason=reason, status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, details=details)
