from datetime import datetime, timedelta, timezone

from jose import jwt
from jose.exceptions import JOSEError

from app.core.config import Settings
from app.core.exceptions import InternalError, InvalidToken


def _require_secret(settings: Settings) -> str:
    if not settings.jwt_secret:
        raise InternalError("JWT_SECRET is not configured")
    return settings.jwt_secret


# -------- CREATE TOKEN --------
def create_access_token(data: dict, settings: Settings, expires_minutes: int | None = None):
    """Generate JWT token"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes if expires_minutes else settings.access_token_expire_minutes
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, _require_secret(settings), algorithm=settings.jwt_algorithm)


# -------- DECODE TOKEN --------
def decode_access_token(token: str, settings: Settings) -> dict:
    """Decode and verify a JWT, raising InvalidToken on any failure."""
    secret = _require_secret(settings)
    try:
        return jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except JOSEError as exc:
        raise InvalidToken() from exc
