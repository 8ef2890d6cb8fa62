"""
Commerce API
Layered CRUD backend for products, categories, suppliers, orders, deliveries,
inventory, payments and the request audit trail.
"""

from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from commerce_api.api.routes import routers
from commerce_api.application.services import RequestLogService
from commerce_api.core import (
    ExceptionHandlingMiddleware,
    RequestLoggingMiddleware,
    ServiceHealth,
    get_logger,
    setup_logging,
)
from commerce_api.core.middleware import http_exception_handler, validation_exception_handler
from commerce_api.core_settings import get_settings
from commerce_api.infrastructure.providers import InMemoryStoreProvider, SqlStoreProvider

StoreProvider = Union[SqlStoreProvider, InMemoryStoreProvider]

SERVICE_DESCRIPTION = "Commerce catalogue, ordering and fulfilment API"

settings = get_settings()

setup_logging(
    service_name=settings.SERVICE_NAME,
    level=settings.LOG_LEVEL,
    environment=settings.ENVIRONMENT,
    version=settings.SERVICE_VERSION,
)

logger = get_logger(__name__)


def request_log_recorder(store_provider: StoreProvider):
    """Persist one RequestLog row in its own unit of work."""

    def record(method: str, path: str, status_code: Optional[int], elapsed_ms: int) -> None:
        with store_provider() as stores:
            RequestLogService(stores.request_logs).log_request(method, path, status_code, elapsed_ms)

    return record


def create_app(store_provider: Optional[StoreProvider] = None) -> FastAPI:
    store_provider = store_provider or SqlStoreProvider()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.SERVICE_NAME} version {settings.SERVICE_VERSION}")
        try:
            store_provider.initialize(run_migrations=settings.RUN_MIGRATIONS)
            logger.info("Database models initialized")
        except Exception as e:
            logger.error(f"Failed to initialize storage: {e}")
            raise
        logger.info(f"{settings.SERVICE_NAME} started successfully")

        yield

        logger.info(f"Shutting down {settings.SERVICE_NAME}")

    app = FastAPI(
        title=settings.SERVICE_NAME,
        description=SERVICE_DESCRIPTION,
        version=settings.SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )
    app.state.store_provider = store_provider

    # Added innermost first: CORS -> request logging -> exception translation -> routes
    app.add_middleware(ExceptionHandlingMiddleware, expose_details=settings.EXPOSE_ERROR_DETAILS)
    app.add_middleware(RequestLoggingMiddleware, recorder=request_log_recorder(store_provider))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    health_service = ServiceHealth(settings.SERVICE_NAME, settings.SERVICE_VERSION, ping=store_provider.ping)
    app.include_router(health_service.create_health_router())

    for router in routers:
        app.include_router(router)

    @app.get("/")
    async def root():
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "status": "running",
            "docs": "/api/docs"
        }

    @app.get("/info")
    async def info():
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.SERVICE_VERSION,
            "description": SERVICE_DESCRIPTION,
            "environment": settings.ENVIRONMENT,
            "endpoints": {
                "health": "/health",
                "ready": "/health/ready",
                "live": "/health/live",
                "metrics": "/metrics",
                "docs": "/api/docs",
                "resources": [router.prefix for router in routers],
            }
        }

    return app


app = create_app()
