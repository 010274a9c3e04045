# cvexport/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Auth
    UNAUTHORIZED = "UNAUTHORIZED"

    # Export / PDF
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    RENDER_FAILED = "RENDER_FAILED"
    CONFIG_ERROR = "CONFIG_ERROR"
