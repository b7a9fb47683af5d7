# tests/conftest.py
"""
Shared fixtures: an in-memory SQLite database, a TestClient wired to it and
helpers for seeding users/halls and minting tokens.
"""

import os
import tempfile

# Must be set before any app import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="hall-booking-logs-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.core.dependencies import get_db
from app.core.jwt import create_access_token
from app.core.security import hash_password
from app.db.session import Base
from app.main import app
from app.models.booking import Booking
from app.models.enums import UserRole
from app.models.hall import Hall
from app.models.user import User

TEST_SETTINGS = Settings(database_url="sqlite://", jwt_secret="test-secret")


@pytest.fixture
def settings():
    return TEST_SETTINGS


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory, settings):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(user_id=None, role=UserRole.CUSTOMER, email=None, password="Password123!", name="Test User"):
        user = User(
            id=user_id,
            name=name,
            email=email or f"user{user_id or len(db.query(User).all()) + 1}@example.com",
            phone="+97699112233",
            password_hash=hash_password(password),
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_hall(db):
    def _make_hall(owner, hall_id=None, name="Grand Hall"):
        hall = Hall(id=hall_id, owner_id=owner.id, name=name, location="Ulaanbaatar")
        db.add(hall)
        db.commit()
        db.refresh(hall)
        return hall

    return _make_hall


@pytest.fixture
def owner(make_user):
    return make_user(user_id=9, role=UserRole.HALLOWNER, email="owner@example.com")


@pytest.fixture
def stranger(make_user):
    return make_user(user_id=2, role=UserRole.HALLOWNER, email="stranger@example.com")


@pytest.fixture
def admin(make_user):
    return make_user(user_id=1, role=UserRole.ADMIN, email="admin@example.com")


@pytest.fixture
def hall(make_hall, owner):
    return make_hall(owner, hall_id=5)


@pytest.fixture
def token_for(settings):
    def _token_for(user, **overrides):
        claims = {"sub": user.email, "id": user.id, "role": user.role.value}
        claims.update(overrides)
        return create_access_token(claims, settings)

    return _token_for


@pytest.fixture
def auth_header(token_for):
    def _auth_header(user, **overrides):
        return {"Authorization": f"Bearer {token_for(user, **overrides)}"}

    return _auth_header


@pytest.fixture
def booking_count(db):
    def _booking_count():
        db.expire_all()
        return db.query(Booking).count()

    return _booking_count
