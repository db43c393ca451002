# tests/conftest.py
import os

# must be set before the app (and its engine) is imported
os.environ["DB_TYPE"] = "sqlite"
os.environ["DB_NAME"] = ":memory:"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("DATABASE_URL", None)
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient

from ticket_system.auth.security import create_access_token
from ticket_system.core.database import Base, SessionLocal, engine
from ticket_system.core.metrics import PrometheusMetrics
from ticket_system.main import app
from ticket_system.user.models import UserRole
from ticket_system.user.services import UserService

TEST_SECRET = "test-secret"


@pytest.fixture(autouse=True)
def fresh_state():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.state.metrics = PrometheusMetrics()
    app.dependency_overrides.clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def metrics() -> PrometheusMetrics:
    return app.state.metrics


def bearer(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(str(user.id), TEST_SECRET)}"}


@pytest.fixture
def admin(db):
    return UserService(db).create_user("admin@example.com", "admin-pass", UserRole.ADMIN)


@pytest.fixture
def regular_user(db):
    return UserService(db).create_user("user@example.com", "user-pass", UserRole.USER)


@pytest.fixture
def admin_headers(admin) -> dict[str, str]:
    return bearer(admin)


@pytest.fixture
def user_headers(regular_user) -> dict[str, str]:
    return bearer(regular_user)
