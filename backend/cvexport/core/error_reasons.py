"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; the export UI shows them next to the failed download.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    UNSUPPORTED_FORMAT = "Only PDF format is supported"
    RENDER_FAILED = "PDF rendering failed"
    MISSING_DEPENDENCY = "Missing dependency"
    INTERNAL_ERROR = "Internal server error"
    AUTH_REQUIRED = "Authentication required"
    AUTH_INVALID = "Invalid authentication"
