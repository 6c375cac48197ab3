"""
Shared pytest fixtures: every test gets a fresh app on in-memory SQLite.
"""
import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from database import create_db_and_tables
from main import create_app

ADMIN_TOKEN = "s3cret-token"


def build_client(**overrides) -> TestClient:
    values = {
        "DATABASE_URL": "sqlite://",
        "ADMIN_TOKEN": ADMIN_TOKEN,
        "ALLOWED_ORIGIN": None,
        "AUTO_CREATE_TABLES": False,
    }
    values.update(overrides)
    app = create_app(Settings(_env_file=None, **values))
    create_db_and_tables(app.state.engine)
    return TestClient(app)


@pytest.fixture
def client():
    return build_client()


@pytest.fixture
def make_client():
    """Factory for clients with non-default settings."""
    return build_client


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def submit(client):
    def _submit(**fields):
        payload = {"name": "Al", "email": "a@b.com", "message": "hi there"}
        payload.update(fields)
        return client.post("/api/messages", json=payload)
    return _submit


@pytest.fixture
def anyio_backend():
    return "asyncio"
