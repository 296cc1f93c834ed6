# backoffice/middleware/store_middleware.py

import asyncio
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from backoffice.config import settings


class StoreMiddleware:
    """
    Кладёт хранилище приложения в request.state.store и ограничивает
    время обработки запроса (REQUEST_TIMEOUT_SECONDS, 504 при превышении).
    Таймаут только здесь, на границе обработчика: само хранилище не ждёт.
    """

    def __init__(self, app: ASGIApp, timeout: float | None = None):
        self.app = app
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        # убедимся, что state есть
        state = scope.setdefault("state", {})
        state["store"] = scope["app"].state.store

        response_started = False

        async def send_wrapper(message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=self.timeout)
        except asyncio.TimeoutError:
            log = getattr(scope["app"].state, "log", None)
            if log:
                await log.log_error("request", "Превышено время обработки запроса", {"path": scope.get("path")})
            if response_started:
                raise
            response = JSONResponse(status_code=504, content={"detail": "Превышено время обработки запроса"})
            await response(scope, receive, send)
