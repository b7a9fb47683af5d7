from app.core.config import Settings
from app.core.exceptions import InvalidToken, Unauthorized
from app.core.jwt import decode_access_token


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized()

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise Unauthorized()

    return token


def decode_token(token: str, settings: Settings) -> dict:
    payload = decode_access_token(token, settings)

    caller_id = payload.get("id")
    if not isinstance(caller_id, int) or isinstance(caller_id, bool):
        raise InvalidToken()

    return payload


def decode_bearer(authorization: str | None, settings: Settings) -> dict:
    return decode_token(extract_bearer_token(authorization), settings)
