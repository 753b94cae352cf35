import logging
from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import sentry_sdk
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from prometheus_client import start_http_server
from prometheus_fastapi_instrumentator import Instrumentator

from app.api.common.routes import router as base_router
from app.api.tokens.routes import router as tokens_router
from app.api.tokens.routes import setup_tokens_error_handler
from app.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

try:
    version = package_version("token-indexer")
except PackageNotFoundError:
    version = "0.0.0"

sentry_sdk.init(
    dsn=settings.SENTRY_DSN,
    environment=settings.ENVIRONMENT,
    release=f"token-indexer@{version}",
)


@asynccontextmanager
async def lifespan_metrics(app: FastAPI):
    if settings.METRICS_SERVER_ENABLED:
        start_http_server(port=settings.PROMETHEUS_PORT)
        logger.info(f"Prometheus metrics server listening on :{settings.PROMETHEUS_PORT}")
    yield


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with lifespan_metrics(app):
        yield


app = FastAPI(
    title="Token Indexer API",
    version=version,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)
Instrumentator().instrument(app).expose(app)

# API routers
app.include_router(base_router)
app.include_router(tokens_router)

# Register error handlers
setup_tokens_error_handler(app)
