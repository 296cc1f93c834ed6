# tests/conftest.py

import os
import tempfile

# окружение до импорта приложения: настройки читаются при импорте
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="backoffice-log-"))
os.environ.setdefault("LOG_PRINT", "0")
os.environ.setdefault("ADMIN_LOGIN", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

import pytest
from fastapi.testclient import TestClient

from backoffice.main import app
from backoffice.services.storage import Store


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def client():
    # новый lifespan на каждый тест: чистое хранилище с одним админом
    with TestClient(app) as c:
        yield c


def auth_headers(client, username, password):
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    # cookie не нужна: тесты явно передают заголовок
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def admin_headers(client):
    return auth_headers(client, "admin", "admin")


@pytest.fixture
def vendor_headers(client):
    response = client.post("/api/register", json={"username": "ana", "password": "secret"})
    assert response.status_code == 201, response.text
    return auth_headers(client, "ana", "secret")
