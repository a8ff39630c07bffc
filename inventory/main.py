"""FastAPI application entry point.

Inventory API: CRUD over products plus a stock status aggregate, consumed
by a separate frontend origin.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory import __version__
from inventory.config import settings
from inventory.infra.database import (
    close_db_engine,
    get_db_session,
    init_db,
    verify_db_connection,
)
from inventory.infra.logging import get_logger, setup_logging
from inventory.infra.seed import seed_demo_products
from inventory.schemas.common import ErrorResponse

from inventory.api.routes.health import router as health_router
from inventory.api.routes.products import router as products_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Create missing tables (when enabled)
    - Seed demo products (when enabled)
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info(
        "Inventory API starting",
        environment=settings.environment,
        version=__version__,
        cors_origin=settings.cors_origin,
    )

    if settings.db_create_tables:
        try:
            await init_db()
        except Exception as e:
            logger.warning("Failed to create tables", error=str(e))

    if settings.seed_demo_data:
        try:
            async with get_db_session() as session:
                await seed_demo_products(session)
        except Exception as e:
            logger.warning("Failed to seed demo products", error=str(e))

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Inventory API shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


app = FastAPI(
    title="Inventory API",
    description="Product inventory with defective/available stock counts",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# The frontend is served from a separate origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its outcome and duration."""
    start_time = time.time()
    response = await call_next(request)
    duration_ms = int((time.time() - start_time) * 1000)

    logger.info(
        "Request handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions (datastore faults included) as a 500."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            error_type=type(exc).__name__,
        ).model_dump(),
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix="/products", tags=["Products"])


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Inventory API",
        "version": __version__,
        "environment": settings.environment,
    }
