# cvexport/core/__init__.py
from cvexport.core.errors import AppError
from cvexport.core.error_codes import ErrorCode
from cvexport.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
