import os

# Must be set before app modules read settings.
os.environ["ENV"] = "test"

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from jose import jwt  # noqa: E402

import app.models  # noqa: E402,F401
from app.auth.identity import CurrentUser, get_current_user  # noqa: E402
from app.config import get_settings  # noqa: E402
from app.db import Base, SessionLocal, engine, get_db  # noqa: E402
from app.main import create_app  # noqa: E402

pytest_plugins = [
    "tests.fixtures.user_fixtures",
    "tests.fixtures.messaging_fixtures",
    "tests.fixtures.location_fixtures",
]


@pytest.fixture(scope="session")
def db_engine():
    """Create the schema once per test session."""
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db(db_engine):
    """
    Session for one test. Commands commit, so isolation is done by emptying
    every table afterwards instead of rolling back.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


@pytest.fixture(scope="session")
def test_app():
    return create_app(testing=True)


@pytest.fixture(scope="function")
def as_user(test_app):
    """Return a function that makes subsequent requests act as the given user."""

    def _as_user(user):
        test_app.dependency_overrides[get_current_user] = lambda: CurrentUser(
            id=user.id, email=user.email
        )
        return user

    return _as_user


@pytest.fixture(scope="function")
def client(test_app, db, setup_user, as_user):
    """TestClient sharing the test session and authenticated as setup_user."""

    def _get_db():
        yield db

    test_app.dependency_overrides[get_db] = _get_db
    as_user(setup_user)
    with TestClient(test_app) as c:
        yield c
    test_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(test_app, db):
    """TestClient with the real bearer-token dependency in place."""

    def _get_db():
        yield db

    test_app.dependency_overrides[get_db] = _get_db
    with TestClient(test_app) as c:
        yield c
    test_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def make_token():
    """Mint a JWT the way the identity service does."""
    settings = get_settings()

    def _make_token(user, token_type="access", expires_in=timedelta(hours=1)):
        claims = {
            "userId": user.id,
            "email": user.email,
            "type": token_type,
            "exp": datetime.now(timezone.utc) + expires_in,
        }
        return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return _make_token
