from datetime import timedelta

from jose import jwt

from app.api.auth import create_access_token, get_password_hash, verify_password
from conftest import TEST_SECRET_KEY, register_and_auth


def _register(client, username="alpha", email="alpha@example.com", password="TestPass123!"):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )


def test_password_hash_round_trip():
    hashed = get_password_hash("TestPass123!")

    assert hashed != "TestPass123!"
    assert verify_password("TestPass123!", hashed)
    assert not verify_password("WrongPass123!", hashed)


def test_register_returns_user_without_password(client):
    response = _register(client)

    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "alpha"
    assert data["email"] == "alpha@example.com"
    assert "password" not in data
    assert "password_hash" not in data


def test_register_rejects_duplicates(client):
    _register(client)

    same_username = _register(client, email="other@example.com")
    assert same_username.status_code == 400
    assert same_username.json()["detail"] == "Username already registered"

    same_email = _register(client, username="other")
    assert same_email.status_code == 400
    assert same_email.json()["detail"] == "Email already registered"


def test_register_validates_input(client):
    assert _register(client, email="not-an-email").status_code == 400
    assert _register(client, password="short").status_code == 400


def test_login_with_username_or_email(client):
    _register(client)

    by_username = client.post("/api/auth/login", json={"username": "alpha", "password": "TestPass123!"})
    by_email = client.post("/api/auth/login", json={"username": "alpha@example.com", "password": "TestPass123!"})

    assert by_username.status_code == 200
    assert by_username.json()["token_type"] == "bearer"
    assert by_email.status_code == 200


def test_login_rejects_bad_credentials(client):
    _register(client)

    wrong_password = client.post("/api/auth/login", json={"username": "alpha", "password": "WrongPass123!"})
    unknown_user = client.post("/api/auth/login", json={"username": "ghost", "password": "TestPass123!"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json()["detail"] == unknown_user.json()["detail"]


def test_me_returns_authenticated_user(client):
    headers = register_and_auth(client, "gamma", "gamma@example.com")

    response = client.get("/api/auth/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["username"] == "gamma"


def test_me_requires_token(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_expired_token_is_rejected(client, settings):
    user = _register(client).json()
    token = create_access_token({"sub": str(user["id"])}, settings, expires_delta=timedelta(minutes=-1))

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_non_access_token_is_rejected(client, settings):
    user = _register(client).json()
    token = jwt.encode({"sub": str(user["id"]), "type": "refresh"}, TEST_SECRET_KEY, algorithm=settings.algorithm)

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_unknown_user_is_rejected(client, settings):
    token = create_access_token({"sub": "9999"}, settings)

    response = client.get("/api/tasks", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
