"""Shop Assistant Backend - Main FastAPI Application

Voice shopping assistant: product similarity search by text or image,
tool endpoints for the realtime voice agent, and ephemeral token minting.

This module creates and configures the FastAPI application, including:
- API routers (search, tools, realtime, observability)
- Middleware (request ID correlation, CORS)
- Exception handlers mapping provider and lookup failures to HTTP errors
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .config import settings
from .database import engine
from .dependencies import get_ephemeral_token_client
from .domain.ai import ProviderFailure, ProviderTimeoutError
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router
from .search.ports import ImageNotFoundError, InvalidSearchQuery
from .search.router import router as search_router
from .tools.router import router as tools_router
from .voice.router import router as voice_router

configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup logs configuration; shutdown releases HTTP and database pools."""
    logger.info("Shop Assistant API starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Similarity gate enabled: {settings.SIMILARITY_GATE_ENABLED}")

    yield

    logger.info("Shop Assistant API shutting down...")
    await get_ephemeral_token_client().close()
    await engine.dispose()


_docs_enabled = settings.ENVIRONMENT != "production"

app = FastAPI(
    title="Shop Assistant API",
    description="Voice shopping assistant with text and image product search",
    version=__version__,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    openapi_url="/openapi.json" if _docs_enabled else None,
    lifespan=lifespan,
)


# =============================================================================
# MIDDLEWARE CONFIGURATION
# =============================================================================

# Request ID Middleware (must be first for proper correlation)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return field-level details for malformed request bodies."""
    logger.warning(
        f"Validation error on {request.method} {request.url.path}",
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


@app.exception_handler(InvalidSearchQuery)
async def invalid_query_handler(request: Request, exc: InvalidSearchQuery) -> JSONResponse:
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid_query", str(exc))


@app.exception_handler(ImageNotFoundError)
async def image_not_found_handler(request: Request, exc: ImageNotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, "not_found", str(exc))


@app.exception_handler(ProviderFailure)
async def provider_failure_handler(request: Request, exc: ProviderFailure) -> JSONResponse:
    """Search could not be attempted; distinct from an empty result."""
    logger.error(
        f"Provider failure on {request.method} {request.url.path}: {exc}",
        extra={"method": request.method, "path": request.url.path},
    )
    if isinstance(exc, ProviderTimeoutError):
        return _error(status.HTTP_504_GATEWAY_TIMEOUT, "provider_timeout", str(exc))
    return _error(status.HTTP_502_BAD_GATEWAY, "provider_failure", str(exc))


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Log the full error; return a generic message."""
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "database_error",
        "A database error occurred. Please try again later.",
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "An unexpected error occurred. Please try again later.",
    )


# =============================================================================
# ROUTER REGISTRATION
# =============================================================================

app.include_router(observability_router)
app.include_router(search_router)
app.include_router(tools_router)
app.include_router(voice_router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, Any]:
    """Root endpoint - API information."""
    return {
        "name": "Shop Assistant API",
        "version": __version__,
        "status": "running",
        "docs": "/docs" if _docs_enabled else None,
    }


def create_app() -> FastAPI:
    """Application factory for ASGI servers and tests."""
    return app
