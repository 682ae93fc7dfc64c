import os
import sys
from dataclasses import dataclass

import pytest

# Required settings must exist before konektz.config is imported
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["APP_ENV"] = "testing"

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from fastapi.testclient import TestClient

from konektz.config.settings import TestingConfig
from konektz.fastapi_app import create_fastapi_app
from jwt_generation import TEST_JWT_SECRET


@dataclass
class RegisteredUser:
    id: str
    username: str
    email: str
    password: str
    token: str

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


def make_config(database_url: str, **overrides):
    attributes = {
        "DATABASE_URL": database_url,
        "JWT_SECRET": TEST_JWT_SECRET,
        "DB_AUTO_CREATE": True,
        "LOG_PATH": None,
        **overrides,
    }
    return type("PerTestConfig", (TestingConfig,), attributes)


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'konektz.db'}"


@pytest.fixture()
def config(database_url):
    return make_config(database_url)


@pytest.fixture()
def app(config):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(config)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs the lifespan)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(client):
    """Register + log in a user, returning its id and bearer token."""

    def _make_user(username: str, password: str = "pw-secret") -> RegisteredUser:
        email = f"{username}@x.com"
        res = client.post(
            "/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        user_id = res.json()["data"]["user"]["id"]

        res = client.post("/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return RegisteredUser(
            id=user_id,
            username=username,
            email=email,
            password=password,
            token=res.json()["token"],
        )

    return _make_user


@pytest.fixture()
def alice(make_user):
    return make_user("alice", "pw1")


@pytest.fixture()
def bob(make_user):
    return make_user("bob", "pw2")


@pytest.fixture()
def carol(make_user):
    return make_user("carol", "pw3")


@pytest.fixture()
def conversation_id(client, alice, bob):
    res = client.post(
        "/conversations", headers=alice.headers, json={"participant_id": bob.id}
    )
    assert res.status_code == 201, res.text
    return res.json()["conversation"]["id"]
