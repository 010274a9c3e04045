"""
export_validators.py
- Purpose: Centralized validation for export requests.
- Design: Raise AppError with stable error codes for UI + logs.
"""

from cvexport.core import AppError, ErrorCode, ErrorReason

SUPPORTED_FORMATS = ("pdf",)


def validate_export_format(fmt: str) -> str:
    normalized = (fmt or "").strip().lower()
    if normalized not in SUPPORTED_FORMATS:
        raise AppError(
            code=ErrorCode.UNSUPPORTED_FORMAT,
            reason=ErrorReason.UNSUPPORTED_FORMAT,
            status_code=400,
            details={"format": fmt},
        )
    return normalized
