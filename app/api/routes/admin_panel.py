from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_admin, get_db
from app.core.exceptions import Conflict, InternalError, NotFound
from app.core.logging_config import get_logger
from app.models.booking import Booking
from app.models.hall import Hall
from app.models.user import User
from app.schemas.admin import UserUpdate, UserUpdateResponse
from app.schemas.user import UserOut

router = APIRouter(prefix="/admin/users", tags=["Admin Panel"])
logger = get_logger().bind(log_type="admin")


def get_user_or_404(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found", user_id=user_id)
    return user


# ==================================================
# GET ALL USERS (ADMIN)
# ==================================================
@router.get("", response_model=list[UserOut])
def get_all_users(admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    return db.query(User).order_by(User.id).all()


# ==================================================
# UPDATE USER (ADMIN)
# ==================================================
@router.patch("/{user_id}", response_model=UserUpdateResponse)
def update_user(
    user_id: int,
    data: UserUpdate,
    admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    user = get_user_or_404(db, user_id)
    changes = data.model_dump(exclude_unset=True)

    if "email" in changes:
        taken = db.query(User.id).filter(User.email == changes["email"], User.id != user_id).first()
        if taken:
            raise Conflict("Email already in use")

    for field, value in changes.items():
        setattr(user, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Email already in use")
    db.refresh(user)

    logger.info(f"User Updated | ID={user.id} | Fields={sorted(changes)} | Admin={admin.email}")

    return UserUpdateResponse(data=UserOut.model_validate(user))


# ==================================================
# DELETE USER (ADMIN)
# ==================================================
@router.delete("/{user_id}")
def delete_user(user_id: int, admin: User = Depends(get_current_admin), db: Session = Depends(get_db)):
    user = get_user_or_404(db, user_id)

    if db.query(Hall.id).filter(Hall.owner_id == user_id).first():
        raise Conflict("User still owns halls", user_id=user_id)

    try:
        # Bookings go first, then the user, in one transaction
        removed = db.query(Booking).filter(Booking.user_id == user_id).delete(synchronize_session=False)
        db.delete(user)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise InternalError(user_id=user_id) from exc

    logger.info(f"User Deleted | ID={user_id} | Bookings={removed} | Admin={admin.email}")

    return {"success": True, "message": "User deleted successfully"}
