"""
AdTracker API server.

Main entry point for the ad and revenue tracking API.
"""

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from adtracker.api.middleware.metrics import MetricsMiddleware, metrics_endpoint
from adtracker.api.routers import ads, health, revenue, stats
from adtracker.common.config import get_settings
from adtracker.common.exceptions import AdTrackerError
from adtracker.common.logger import clear_log_context, get_logger, log_context
from adtracker.common.storage import get_storage
from adtracker.common.utils import generate_request_id
from adtracker.core import Store
from adtracker.schemas.response import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()

    logger.info(
        "Starting AdTracker server",
        version=settings.app_version,
        env=settings.env,
    )

    # A store passed to create_app() wins over the configured data file
    if getattr(app.state, "store", None) is None:
        app.state.store = Store(get_storage())

    logger.info(
        "AdTracker server started successfully",
        data_file=str(app.state.store.storage.path),
    )

    yield

    logger.info("AdTracker server stopped")


def create_app(store: Store | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="AdTracker",
        description="Ad campaign and revenue tracking API",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.monitoring.enabled:
        app.add_middleware(MetricsMiddleware)
        app.add_api_route("/metrics", metrics_endpoint, methods=["GET"], tags=["monitoring"])

    # Request logging middleware
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next: Any) -> Any:
        """Log all requests with timing."""
        request_id = generate_request_id()
        log_context(request_id=request_id)

        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        clear_log_context()

        return response

    # Exception handlers
    @app.exception_handler(AdTrackerError)
    async def adtracker_error_handler(
        request: Request,
        exc: AdTrackerError,
    ) -> JSONResponse:
        """Map domain errors to their HTTP status."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "AdTracker error",
            error=exc.__class__.__name__,
            message=exc.message,
            details=exc.details,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.__class__.__name__,
                message=exc.message,
                details=exc.details,
            ).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed request bodies are client errors (400), like store validation."""
        logger.warning("Malformed request", path=request.url.path, errors=str(exc.errors()))

        return JSONResponse(
            status_code=400,
            content=ErrorResponse(
                error="ValidationError",
                message="Malformed request body",
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_error_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=exc.__class__.__name__,
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="InternalServerError",
                message="An unexpected error occurred",
            ).model_dump(),
        )

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(ads.router, prefix="/api/ads", tags=["ads"])
    app.include_router(revenue.router, prefix="/api/revenue", tags=["revenue"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    # Browser client, served last so API routes take precedence
    static_dir = Path(settings.server.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


# Create app instance
app = create_app()


def main() -> None:
    """Run the server using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "adtracker.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level="info" if not settings.debug else "debug",
    )


if __name__ == "__main__":
    main()
