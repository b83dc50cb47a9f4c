from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from finance_tracker.core.app import create_app

JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def app_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("APP_JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("APP_CREATE_TABLES", "true")
    monkeypatch.setenv("DB_DSN", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def client(app_env) -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def register_user(client: TestClient) -> Callable[..., dict]:
    def register(username: str = "nick", **overrides) -> dict:
        payload = {
            "username": username,
            "email": f"{username}@example.com",
            "name": "Nick Demo",
            "password": "nick123",
            **overrides,
        }
        response = client.post("/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return register


@pytest.fixture
def auth_headers(register_user) -> dict[str, str]:
    token = register_user()["accessToken"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(register_user) -> dict[str, str]:
    token = register_user("jane", name="Jane Doe")["accessToken"]
    return {"Authorization": f"Bearer {token}"}
