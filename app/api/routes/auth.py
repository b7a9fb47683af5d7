from fastapi import APIRouter, Depends, Header
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.auth_utils import decode_bearer
from app.core.config import Settings, get_settings
from app.core.dependencies import get_db
from app.core.exceptions import Conflict, InvalidToken, Unauthorized, ValidationFailed
from app.core.jwt import create_access_token
from app.core.logging_config import get_logger
from app.core.security import hash_password, verify_password
from app.models.enums import UserRole
from app.models.user import User
from app.schemas.user import AuthResponse, UserCreate, UserLogin, UserOut

router = APIRouter(tags=["Authentication"])
logger = get_logger()


def issue_token(user: User, settings: Settings) -> str:
    return create_access_token(
        {"sub": user.email, "id": user.id, "name": user.name, "role": user.role.value},
        settings,
    )


def resolve_signup_role(authorization: str | None, requested: str | None, settings: Settings) -> UserRole:
    """
    Only an admin token may choose the new user's role. A missing or
    unverifiable token is not an error here: the user just becomes a customer.
    """
    if not requested:
        return UserRole.CUSTOMER

    try:
        payload = decode_bearer(authorization, settings)
    except (Unauthorized, InvalidToken):
        return UserRole.CUSTOMER

    if payload.get("role") != UserRole.ADMIN.value:
        return UserRole.CUSTOMER

    try:
        return UserRole(requested)
    except ValueError:
        raise ValidationFailed("Invalid role", field="role")


# =====================================================================
#                           USER SIGN UP
# =====================================================================
@router.post("/signUp", status_code=201, response_model=AuthResponse)
def sign_up(
    data: UserCreate,
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if db.query(User).filter(User.email == data.email).first():
        raise Conflict("User with this email already exists")

    role = resolve_signup_role(authorization, data.role, settings)

    user = User(
        name=data.name,
        email=data.email,
        phone=data.phone,
        password_hash=hash_password(data.password),
        role=role,
    )

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("User with this email already exists")
    db.refresh(user)

    logger.info(f"User Registered | ID={user.id} | Email={user.email} | Role={user.role.value}")

    return AuthResponse(user=UserOut.model_validate(user), token=issue_token(user, settings))


# =====================================================================
#                           USER LOGIN
# =====================================================================
@router.post("/login", response_model=AuthResponse)
def login(data: UserLogin, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    user = db.query(User).filter(User.email == data.email).first()

    if not user or not verify_password(data.password, user.password_hash):
        raise Unauthorized("Invalid credentials")

    return AuthResponse(user=UserOut.model_validate(user), token=issue_token(user, settings))
