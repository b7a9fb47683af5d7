from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.core.auth_utils import decode_bearer
from app.core.config import Settings, get_settings
from app.core.exceptions import Forbidden, InvalidToken
from app.db.session import SessionLocal
from app.models.enums import UserRole
from app.models.user import User
from app.services.slots import SlotResolver


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_slot_resolver(settings: Settings = Depends(get_settings)) -> SlotResolver:
    return SlotResolver(settings.time_slots)


def get_current_admin(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    payload = decode_bearer(authorization, settings)

    if payload.get("role") != UserRole.ADMIN.value:
        raise Forbidden("Admins only")

    admin = db.get(User, payload["id"])
    if admin is None:
        raise InvalidToken()
    if admin.role != UserRole.ADMIN:
        raise Forbidden("Admins only")

    return admin
