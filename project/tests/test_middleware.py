# tests/test_middleware.py

import asyncio

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from backoffice.middleware.store_middleware import StoreMiddleware
from backoffice.services.storage import Store


def build_app(timeout):
    app = FastAPI()
    app.state.store = Store()
    app.add_middleware(StoreMiddleware, timeout=timeout)

    @app.get("/slow")
    async def slow():
        await asyncio.sleep(1)
        return {"ok": True}

    @app.get("/store")
    async def which_store(request: Request):
        return {"same": request.state.store is request.app.state.store}

    return app


def test_store_is_attached_to_request():
    with TestClient(build_app(timeout=5)) as client:
        assert client.get("/store").json() == {"same": True}


def test_slow_request_times_out():
    with TestClient(build_app(timeout=0.05)) as client:
        response = client.get("/slow")
    assert response.status_code == 504
