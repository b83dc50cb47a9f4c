from fastapi.testclient import TestClient


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": True}


def test_register_returns_token_and_user(client: TestClient, register_user):
    body = register_user()

    assert body["accessToken"]
    assert body["token"] == body["accessToken"]
    assert body["tokenType"] == "bearer"
    assert body["user"]["username"] == "nick"
    assert body["user"]["email"] == "nick@example.com"
    assert body["user"]["joinDate"]
    assert "password" not in body["user"]


def test_register_rejects_taken_username_or_email(client: TestClient, register_user):
    register_user()

    same_username = client.post(
        "/auth/register",
        json={
            "username": "nick",
            "email": "other@example.com",
            "name": "Other",
            "password": "secret1",
        },
    )
    same_email = client.post(
        "/auth/register",
        json={
            "username": "other",
            "email": "nick@example.com",
            "name": "Other",
            "password": "secret1",
        },
    )

    assert same_username.status_code == 400
    assert same_email.status_code == 400
    assert same_email.json()["detail"] == "Username or email already registered"


def test_register_validates_payload(client: TestClient):
    response = client.post(
        "/auth/register",
        json={"username": "nick", "email": "not-an-email", "name": "N", "password": "nick123"},
    )

    assert response.status_code == 422


def test_login_by_username_or_email(client: TestClient, register_user):
    register_user()

    by_username = client.post("/auth/login", json={"username": "nick", "password": "nick123"})
    by_email = client.post(
        "/auth/login", json={"username": "nick@example.com", "password": "nick123"}
    )

    assert by_username.status_code == 200
    assert by_email.status_code == 200
    assert by_username.json()["user"]["username"] == "nick"
    assert by_email.json()["token"] == by_email.json()["accessToken"]


def test_login_with_wrong_credentials(client: TestClient, register_user):
    register_user()

    wrong_password = client.post("/auth/login", json={"username": "nick", "password": "nope"})
    unknown_user = client.post("/auth/login", json={"username": "ghost", "password": "nick123"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json()["detail"] == "Invalid username or password"


def test_me_requires_token(client: TestClient):
    assert client.get("/auth/me").status_code == 401
    assert (
        client.get("/auth/me", headers={"Authorization": "Bearer garbage"}).status_code
        == 401
    )


def test_me_returns_current_user(client: TestClient, auth_headers):
    response = client.get("/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["username"] == "nick"
