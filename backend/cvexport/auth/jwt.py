# cvexport/auth/jwt.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from cvexport.core.config import settings
from cvexport.core import AppError, ErrorCode, ErrorReason


@dataclass(frozen=True)
class Identity:
    user_id: str
    email: str | None = None
    tier: str | None = None


def create_access_token(*, user_id: str, email: str | None = None, tier: str | None = None, expires_minutes: int = 60) -> str:
    """Tokens are normally issued by the main app; this mirrors its claims (handy for tests and local runs)."""
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user_id,
        "email": email,
        "tier": tier,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise AppError(
            code=ErrorCode.UNAUTHORIZED,
            reason=ErrorReason.AUTH_INVALID,
            message="Invalid or expired token",
            status_code=401,
        )

    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        raise AppError(
            code=ErrorCode.UNAUTHORIZED,
            reason=ErrorReason.AUTH_INVALID,
            message="Token has no user",
            status_code=401,
        )
    return Identity(user_id=str(user_id), email=payload.get("email"), tier=payload.get("tier"))
