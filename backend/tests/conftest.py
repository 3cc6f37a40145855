import asyncio
import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

TEST_SECRET_KEY = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"

os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="wedding-uploads-"))

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.config import Settings
from app.database import create_db_engine, init_db
from app.main import create_app
from app.storage import DatabaseStorage, MemoryStorage


class RecordingBroadcaster:
    """Stands in for the connection registry and remembers every event."""

    def __init__(self):
        self.events = []

    async def broadcast(self, kind, payload):
        self.events.append({"type": kind, "payload": payload})
        return 1

    def kinds(self):
        return [event["type"] for event in self.events]


def run(coro):
    return asyncio.run(coro)


def build_storage(backend: str):
    if backend == "memory":
        return MemoryStorage()
    engine = create_db_engine("sqlite://")
    init_db(engine)
    return DatabaseStorage(engine)


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Each storage-dependent test runs against both backends."""
    backend = build_storage(request.param)
    yield backend
    backend.close()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        secret_key=TEST_SECRET_KEY,
        storage_backend="memory",
        upload_dir=tmp_path / "uploads",
        max_upload_bytes=1024,
        smtp_host=None,
    )


@pytest.fixture
def app(settings, storage):
    return create_app(settings=settings, storage=storage)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def broadcaster(app):
    """Replace the real registry with one that records events."""
    from app.api import deps

    recorder = RecordingBroadcaster()
    app.dependency_overrides[deps.get_broadcaster] = lambda: recorder
    yield recorder
    app.dependency_overrides.clear()


def register_and_auth(client: TestClient, username: str, email: str, password: str = "TestPass123!") -> dict:
    """Register a user, log in and return the Authorization header."""
    register_response = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert register_response.status_code == 201

    login_response = client.post(
        "/api/auth/login",
        json={"username": username, "password": password},
    )
    assert login_response.status_code == 200
    return {"Authorization": f"Bearer {login_response.json()['access_token']}"}


@pytest.fixture
def auth_header(client):
    return register_and_auth(client, "alice", "alice@example.com")


@pytest.fixture
def second_auth_header(client):
    return register_and_auth(client, "bob", "bob@example.com")
