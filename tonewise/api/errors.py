# tonewise/api/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tonewise.api.middleware import SECURITY_HEADERS
from tonewise.config import ALLOWED_ORIGINS

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Endpoint not found"
INVALID_BODY_MESSAGE = "Request body must be a JSON object"
INTERNAL_ERROR_MESSAGE = "Internal server error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Неизвестный путь и неподдерживаемый метод на известном пути отдаются одинаково
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)},
                        headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("[request_validation_handler] %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


def _server_error_headers(request: Request) -> dict:
    """
    Ответ этого обработчика отправляет ServerErrorMiddleware, внешний по отношению к CORS
    и заголовкам безопасности, поэтому они добавляются здесь.
    """
    headers = dict(SECURITY_HEADERS)
    origin = request.headers.get("origin")
    if origin and ("*" in ALLOWED_ORIGINS or origin in ALLOWED_ORIGINS):
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
        headers["Vary"] = "Origin"
    return headers


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE},
                        headers=_server_error_headers(request))


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
