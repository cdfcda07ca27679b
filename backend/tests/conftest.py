import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

import os
import sys

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
os.environ["DB_TYPE"] = "sqlite"
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_DATA"] = "false"
os.environ["DEBUG"] = "false"
os.environ["LOG_LEVEL"] = "warning"

# Import app after setting environment variables
from app.main import app
from app.database import Base, get_db
from app.services.user_service import seed_users
from app.token_store import TokenStore

# Import all models to ensure tables are created
from app.models.film import Film
from app.models.user import User


class FakeClock:
    """Manually advanced clock for token expiry tests"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def token_store(clock: FakeClock) -> TokenStore:
    return TokenStore(clock=clock)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test"""
    connection = app.state.engine.connect()
    transaction = connection.begin()

    # Create all tables
    Base.metadata.create_all(bind=connection)

    # Create a session bound to the connection
    TestingSessionLocal = sessionmaker(bind=connection)
    session = TestingSessionLocal()
    seed_users(session)

    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture(scope="function")
def make_client(db: Session, token_store: TokenStore) -> Generator[Callable[..., TestClient], None, None]:
    """Build test clients for any app, sharing the test database and token store"""
    opened = []

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def _make(application: FastAPI, **kwargs) -> TestClient:
        application.dependency_overrides[get_db] = override_get_db
        application.state.token_store = token_store
        test_client = TestClient(application, **kwargs)
        test_client.__enter__()
        opened.append(test_client)
        return test_client

    yield _make

    for test_client in reversed(opened):
        test_client.__exit__(None, None, None)
        test_client.app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(make_client: Callable[..., TestClient]) -> TestClient:
    """Test client for the application module's app"""
    return make_client(app)


@pytest.fixture
def auth_token(client: TestClient) -> str:
    """Get authentication token for testing"""
    response = client.post(
        "/api/login",
        json={"username": "admin", "password": "admin123"},
    )
    assert response.status_code == 200
    data = response.json()
    assert "token" in data
    return data["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    """Get headers with authentication token"""
    return {"Authorization": f"Bearer {auth_token}"}
