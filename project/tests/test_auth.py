# tests/test_auth.py

from datetime import timedelta

from backoffice.utils.security import create_access_token, hash_password, verify_password


def test_password_hashing():
    hashed = hash_password("secret")
    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("wrong", hashed)


def test_admin_seeded_on_startup(client, admin_headers):
    response = client.get("/api/user", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["username"] == "admin"
    assert response.json()["role"] == "admin"
    assert "password" not in response.json()


def test_register_forces_vendor_role(client):
    response = client.post("/api/register", json={"username": "ana", "password": "secret"})
    assert response.status_code == 201
    assert response.json()["role"] == "vendor"
    assert "password" not in response.json()


def test_register_duplicate_username(client):
    assert client.post("/api/register", json={"username": "ana", "password": "a"}).status_code == 201
    assert client.post("/api/register", json={"username": "ana", "password": "b"}).status_code == 400


def test_login_wrong_password(client):
    response = client.post("/api/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401


def test_login_sets_cookie_and_logout_clears_it(client):
    response = client.post("/api/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    assert response.json()["tokenType"] == "bearer"
    assert "access_token" in client.cookies

    assert client.get("/api/user").status_code == 200

    client.post("/api/logout")
    assert "access_token" not in client.cookies
    assert client.get("/api/user").status_code == 401


def test_current_user_requires_token(client):
    assert client.get("/api/user").status_code == 401
    assert client.get("/api/user", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_expired_token_rejected(client):
    token = create_access_token({"sub": "admin"}, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_unknown_user_rejected(client):
    token = create_access_token({"sub": "ghost"})
    response = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_users_admin_only(client, admin_headers, vendor_headers):
    assert client.get("/api/users", headers=vendor_headers).status_code == 403

    users = client.get("/api/users", headers=admin_headers).json()
    assert {u["username"] for u in users} == {"admin", "ana"}


def test_admin_creates_admin(client, admin_headers):
    response = client.post(
        "/api/users", json={"username": "boss", "password": "x", "role": "admin"}, headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["role"] == "admin"

    duplicate = client.post("/api/users", json={"username": "boss", "password": "y"}, headers=admin_headers)
    assert duplicate.status_code == 409


def test_unknown_role_rejected(client, admin_headers):
    response = client.post(
        "/api/users", json={"username": "x", "password": "x", "role": "root"}, headers=admin_headers,
    )
    assert response.status_code == 422
