import jwt
from fastapi.testclient import TestClient

from finance_tracker.core.app import create_app
from finance_tracker.models.enums import WeekOverflowPolicy
from finance_tracker.settings.app import AppSettings


def add(client: TestClient, headers, amount, type_, date, name="tx") -> None:
    response = client.post(
        "/transactions",
        json={"name": name, "amount": amount, "type": type_, "date": date},
        headers=headers,
    )
    assert response.status_code == 201, response.text


def test_profile_without_transactions(client: TestClient, auth_headers):
    response = client.get("/profile", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "nick"
    assert body["name"] == "Nick Demo"
    assert body["joinDate"]
    assert body["profileImage"] is None
    assert body["stats"] == {
        "totalTransactions": 0,
        "totalIncome": 0,
        "totalExpenses": 0,
        "savingsRate": "0%",
    }


def test_profile_stats(client: TestClient, auth_headers, other_auth_headers):
    add(client, auth_headers, 5_000_000, "income", "2024-03-15")
    add(client, auth_headers, 1_500_000, "expense", "2024-03-16")
    add(client, other_auth_headers, 99, "expense", "2024-03-16")

    stats = client.get("/profile", headers=auth_headers).json()["stats"]

    assert stats == {
        "totalTransactions": 2,
        "totalIncome": 5_000_000,
        "totalExpenses": 1_500_000,
        "savingsRate": "70.0%",
    }


def test_update_profile(client: TestClient, auth_headers, register_user):
    response = client.put(
        "/profile",
        json={"name": "Nick", "profileImage": "https://example.com/nick.png"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Nick"
    assert body["profileImage"] == "https://example.com/nick.png"
    assert body["email"] == "nick@example.com"

    register_user("jane")
    taken = client.put("/profile", json={"email": "jane@example.com"}, headers=auth_headers)
    assert taken.status_code == 400


def test_chart_data_shape_and_values(client: TestClient, auth_headers):
    add(client, auth_headers, 5_000_000, "income", "2024-03-15")
    add(client, auth_headers, 1_500_000, "expense", "2024-03-16")
    add(client, auth_headers, 100, "income", "2023-03-30")

    response = client.get("/profile/chart-data", headers=auth_headers)

    assert response.status_code == 200
    chart = response.json()
    assert set(chart) == {"all", "monthly", "weekly"}
    assert chart["all"]["labels"][2] == "Mar"
    assert chart["all"]["income"][2] == 5_000_100
    assert chart["all"]["expenses"][2] == 1_500_000
    assert chart["monthly"]["labels"] == ["Week 1", "Week 2", "Week 3", "Week 4"]
    # 15th and 16th are in "Week 3", the 30th is clamped into "Week 4"
    assert chart["monthly"]["income"] == [0, 0, 5_000_000, 100]
    assert chart["monthly"]["expenses"] == [0, 0, 1_500_000, 0]
    # 2024-03-15 is a Friday, 2024-03-16 a Saturday, 2023-03-30 a Thursday
    assert chart["weekly"]["labels"][0] == "Mon"
    assert chart["weekly"]["income"] == [0, 0, 0, 100, 5_000_000, 0, 0]
    assert chart["weekly"]["expenses"] == [0, 0, 0, 0, 0, 1_500_000, 0]


def test_chart_data_with_drop_policy(app_env, monkeypatch):
    monkeypatch.setenv("APP_WEEK_OVERFLOW", "drop")

    with TestClient(create_app()) as client:
        response = client.post(
            "/auth/register",
            json={
                "username": "nick",
                "email": "nick@example.com",
                "name": "Nick Demo",
                "password": "nick123",
            },
        )
        headers = {"Authorization": f"Bearer {response.json()['accessToken']}"}
        add(client, headers, 100, "income", "2024-03-30")

        chart = client.get("/profile/chart-data", headers=headers).json()

    assert chart["monthly"]["income"] == [0, 0, 0, 0]
    assert chart["all"]["income"][2] == 100


def test_create_app_uses_given_settings(app_env, monkeypatch):
    monkeypatch.delenv("APP_JWT_SECRET")
    monkeypatch.delenv("APP_CREATE_TABLES")
    settings = AppSettings(
        jwt_secret="explicit-secret",
        week_overflow=WeekOverflowPolicy.DROP,
        create_tables=True,
    )

    with TestClient(create_app(settings)) as client:
        response = client.post(
            "/auth/register",
            json={
                "username": "nick",
                "email": "nick@example.com",
                "name": "Nick Demo",
                "password": "nick123",
            },
        )
        assert response.status_code == 201, response.text
        token = response.json()["accessToken"]
        headers = {"Authorization": f"Bearer {token}"}
        add(client, headers, 100, "income", "2024-03-30")

        chart = client.get("/profile/chart-data", headers=headers).json()

    assert jwt.decode(token, "explicit-secret", algorithms=["HS256"])
    assert chart["monthly"]["income"] == [0, 0, 0, 0]


def test_profile_requires_auth(client: TestClient):
    assert client.get("/profile").status_code == 401
    assert client.get("/profile/chart-data").status_code == 401
