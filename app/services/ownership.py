from sqlalchemy.orm import Session

from app.core.auth_utils import decode_bearer
from app.core.config import Settings
from app.core.exceptions import Forbidden, NotFound
from app.models.hall import Hall


class HallOwnershipVerifier:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def verify(self, authorization: str | None, hall_id: int) -> int:
        """
        Prove the bearer of ``authorization`` owns hall ``hall_id``.

        Returns the caller id. Raises Unauthorized for a missing or malformed
        header, InvalidToken when the token does not verify, NotFound when the
        hall does not exist and Forbidden when someone else owns it.
        """
        payload = decode_bearer(authorization, self.settings)
        caller_id = payload["id"]

        owner_id = self.db.query(Hall.owner_id).filter(Hall.id == hall_id).scalar()
        if owner_id is None:
            raise NotFound("Hall not found", hall_id=hall_id)

        if owner_id != caller_id:
            raise Forbidden(hall_id=hall_id, caller_id=caller_id)

        return caller_id
