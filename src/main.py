"""FastAPI application entry point.

This module sets up the FastAPI application with all necessary middleware,
routers, and configuration.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import make_asgi_app
import structlog

from core.config import get_settings
from core.exceptions import ExternalServiceError, UpstreamStatusError
from core.logging import setup_logging
from core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    UnhandledExceptionMiddleware,
)
from core.monitoring import setup_monitoring, track_error
from models.common import HealthResponse
from plants.router import router as plants_router

# Initialize settings
settings = get_settings()

# Setup logging
setup_logging(settings)
logger = structlog.get_logger(__name__)

INTERNAL_ERROR = "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    logger.info(
        "Server is running",
        url=f"http://localhost:{settings.port}",
        version=settings.app_version,
        trefle_api_url=settings.trefle_api_url,
    )

    setup_monitoring(settings.app_name, settings.app_version)

    yield

    logger.info("Shutting down Plant API Proxy")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Proxy for the Trefle plant API with server-side token injection",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # Last added runs first: correlation ID, logging, CORS, then the catch-all
    app.add_middleware(UnhandledExceptionMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=settings.cors_allow_methods_list,
        allow_headers=settings.cors_allow_headers_list,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    app.include_router(plants_router, prefix="/api", tags=["plants"])

    add_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        """Plain-text liveness banner."""
        return "🌱 Plant API Server Running"

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=settings.app_version)

    if settings.metrics_enabled:
        app.mount("/metrics", make_asgi_app())

    return app


def add_exception_handlers(app: FastAPI) -> None:
    """Add global exception handlers to the FastAPI app.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(UpstreamStatusError)
    async def upstream_status_error_handler(
        request: Request, exc: UpstreamStatusError
    ) -> JSONResponse:
        """Proxy upstream error statuses to the caller."""
        logger.warning(
            "Upstream error status",
            service=exc.service,
            status_code=exc.status_code,
            reason=exc.reason,
            path=request.url.path,
        )
        track_error(type(exc).__name__, exc.service)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    @app.exception_handler(ExternalServiceError)
    async def external_service_error_handler(
        request: Request, exc: ExternalServiceError
    ) -> JSONResponse:
        """Handle unreachable or misbehaving upstream services."""
        logger.error(
            "External service error",
            error=str(exc),
            cause=repr(exc.cause) if exc.cause else None,
            path=request.url.path,
            service=exc.service,
        )
        track_error(type(exc).__name__, exc.service)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR},
        )


# Create the app instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=1 if settings.reload else settings.workers,
        log_level=settings.log_level.lower(),
    )
