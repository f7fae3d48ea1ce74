# tonewise/main.py

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tonewise.api.errors import register_exception_handlers
from tonewise.api.middleware import (
    BodySizeLimitMiddleware,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from tonewise.api.routes import analyze, health
from tonewise.config import ALLOWED_ORIGINS, APP_VERSION, HOST, PORT
from tonewise.logging_config import setup_logging

setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="ToneWise",
    description="Анализ тона, намерения и подтекста сообщений с помощью LLM",
    version=APP_VERSION,
)

logger.info("Starting ToneWise backend")

# Добавленный последним middleware выполняется первым
app.add_middleware(RateLimitMiddleware)
app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
logger.info("CORS allowed origins: %s", ALLOWED_ORIGINS)

register_exception_handlers(app)

app.include_router(health.router)
logger.info("Health endpoint included")
app.include_router(analyze.router)
logger.info("Analyze endpoints included")


def run():
    logger.info("ToneWise backend running on port %d", PORT)
    logger.info("Health check: http://localhost:%d/health", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    run()
