# tonewise/api/middleware.py
"""
HTTP middleware: логирование запросов, заголовки безопасности, лимит размера тела
и ограничение частоты запросов к /api/*.
"""
import logging
import math
import time
from typing import Callable

from cachetools import TTLCache
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from tonewise.config import (
    MAX_BODY_SIZE,
    RATE_LIMIT_CACHE_SIZE,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS,
)

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Логирует метод и путь каждого входящего запроса"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Добавляет заголовки безопасности ко всем ответам"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Отклоняет запросы с Content-Length больше max_body_size"""

    def __init__(self, app, max_body_size: int = MAX_BODY_SIZE):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_size:
            logger.warning("[BodySizeLimitMiddleware] Rejected body of %s bytes from %s",
                           content_length, _client_key(request))
            return JSONResponse(status_code=413, content={"error": "Request body too large"})
        return await call_next(request)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Фиксированное окно на клиента (IP): не более max_requests запросов за window_seconds.

    Счетчики хранятся в TTLCache. Запись создается первым запросом окна и изменяется на месте,
    поэтому время жизни записи не продлевается и окно сбрасывается ровно через window_seconds.
    """

    def __init__(self, app, max_requests: int = RATE_LIMIT_MAX_REQUESTS,
                 window_seconds: int = RATE_LIMIT_WINDOW_SECONDS,
                 path_prefix: str = "/api/", timer: Callable[[], float] = time.monotonic):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.path_prefix = path_prefix
        self.timer = timer
        self.windows = TTLCache(maxsize=RATE_LIMIT_CACHE_SIZE, ttl=window_seconds, timer=timer)

    def _hit(self, key: str):
        """Учитывает запрос и возвращает (счетчик, секунд до сброса окна)"""
        now = self.timer()
        window = self.windows.get(key)
        if window is None:
            window = {"count": 0, "started": now}
            self.windows[key] = window
        window["count"] += 1
        reset_in = max(0, math.ceil(window["started"] + self.window_seconds - now))
        return window["count"], reset_in

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        key = _client_key(request)
        count, reset_in = self._hit(key)
        headers = {
            "RateLimit-Limit": str(self.max_requests),
            "RateLimit-Remaining": str(max(0, self.max_requests - count)),
            "RateLimit-Reset": str(reset_in),
        }

        if count > self.max_requests:
            logger.warning("[RateLimitMiddleware] Limit exceeded for %s: %d requests", key, count)
            headers["Retry-After"] = str(reset_in)
            return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE}, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response
