"""
Shared fixtures: in-memory SQLite store, local photo storage under tmp_path,
and API clients with dependency overrides.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import wanderlog.models  # noqa: F401
from wanderlog.core.db import Base, get_db
from wanderlog.core.dependencies import get_photo_storage
from wanderlog.core.jwt import create_access_token
from wanderlog.core.security import hash_password
from wanderlog.main import app
from wanderlog.models.user import User
from wanderlog.services.photo_storage import LocalPhotoStorage

TEST_PASSWORD = "Passw0rd!"


@pytest.fixture(scope="function")
def engine():
    # In-memory SQLite shared by every session of one test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def photo_storage(tmp_path):
    return LocalPhotoStorage(root=tmp_path / "media", prefix="travel-photos", public_base_url="/media")


@pytest.fixture
def override_dependencies(session_factory, photo_storage):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_photo_storage] = lambda: photo_storage
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_dependencies):
    return TestClient(app)


@pytest_asyncio.fixture
async def async_client(override_dependencies):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def make_user(session, email: str, password: str = TEST_PASSWORD) -> User:
    user = User(email=email, hashed_password=hash_password(password), display_name=email.split("@")[0])
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def auth_headers_for(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


@pytest.fixture
def test_user(db_session):
    return make_user(db_session, "traveler@example.com")


@pytest.fixture
def other_user(db_session):
    return make_user(db_session, "someone.else@example.com")


@pytest.fixture
def authenticated_headers(test_user):
    return auth_headers_for(test_user)


@pytest.fixture
def other_headers(other_user):
    return auth_headers_for(other_user)
