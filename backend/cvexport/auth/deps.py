# cvexport/auth/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cvexport.auth.jwt import Identity, decode_access_token
from cvexport.core import AppError, ErrorCode, ErrorReason

bearer = HTTPBearer(auto_error=False)

def require_identity(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> Identity:
    if not creds or creds.scheme.lower() != "bearer" or not creds.credentials:
        raise AppError(
            code=ErrorCode.UNAUTHORIZED,
            reason=ErrorReason.AUTH_REQUIRED,
            message="Missing Authorization: Bearer token",
            status_code=401,
        )

    return decode_access_token(creds.credentials)
