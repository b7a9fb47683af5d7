# tests/test_ownership.py
"""Bearer decoding and hall ownership checks."""

import pytest

from app.core.config import Settings
from app.core.exceptions import (
    ErrorKind,
    Forbidden,
    InternalError,
    InvalidToken,
    NotFound,
    Unauthorized,
)
from app.core.jwt import create_access_token
from app.services.ownership import HallOwnershipVerifier


@pytest.fixture
def verifier(db, settings):
    return HallOwnershipVerifier(db, settings)


class TestHallOwnershipVerifier:
    def test_owner_gets_their_id_back(self, verifier, hall, owner, token_for):
        assert verifier.verify(f"Bearer {token_for(owner)}", hall.id) == owner.id

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Token abc", "bearer abc"])
    def test_missing_or_malformed_header(self, verifier, hall, header):
        with pytest.raises(Unauthorized) as exc_info:
            verifier.verify(header, hall.id)

        assert exc_info.value.kind == ErrorKind.UNAUTHORIZED

    def test_garbage_token(self, verifier, hall):
        with pytest.raises(InvalidToken):
            verifier.verify("Bearer not.a.jwt", hall.id)

    def test_token_signed_with_another_secret(self, verifier, hall, owner):
        token = create_access_token({"id": owner.id}, Settings(jwt_secret="someone-else"))

        with pytest.raises(InvalidToken):
            verifier.verify(f"Bearer {token}", hall.id)

    def test_expired_token(self, verifier, hall, owner, settings):
        token = create_access_token({"id": owner.id}, settings, expires_minutes=-5)

        with pytest.raises(InvalidToken):
            verifier.verify(f"Bearer {token}", hall.id)

    @pytest.mark.parametrize("claims", [{"sub": "owner@example.com"}, {"id": "9"}, {"id": True}])
    def test_token_without_integer_id(self, verifier, hall, settings, claims):
        token = create_access_token(claims, settings)

        with pytest.raises(InvalidToken):
            verifier.verify(f"Bearer {token}", hall.id)

    def test_unknown_hall(self, verifier, owner, token_for):
        with pytest.raises(NotFound) as exc_info:
            verifier.verify(f"Bearer {token_for(owner)}", 999)

        assert exc_info.value.message == "Hall not found"

    def test_someone_else_owns_the_hall(self, verifier, hall, stranger, token_for):
        with pytest.raises(Forbidden):
            verifier.verify(f"Bearer {token_for(stranger)}", hall.id)

    def test_missing_secret_is_internal(self, db, hall, owner, token_for):
        verifier = HallOwnershipVerifier(db, Settings(jwt_secret=None))

        with pytest.raises(InternalError):
            verifier.verify(f"Bearer {token_for(owner)}", hall.id)
