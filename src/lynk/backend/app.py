"""FastAPI application factory and configuration"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .logging import setup_logging
from .exception import LynkException, PayloadTooLargeError, StoreUnavailableError
from .schema.response import ErrorResponse, HealthResponse
from .services import ChannelService
from .store import ChannelStore, create_store
from .api import channel_router

logger = logging.getLogger(__name__)


def _error_response(exc: LynkException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            message=exc.message,
            error={"code": exc.code}
        ).model_dump()
    )


def create_app(settings: Optional[Settings] = None, store: Optional[ChannelStore] = None) -> FastAPI:
    """Create and configure FastAPI application instance

    This is the application factory function that initializes logging,
    creates the store and channel service, configures middleware,
    registers exception handlers, and includes routers.

    Args:
        settings: Application settings (loaded from env/config when None)
        store: Channel store to use instead of the configured backend;
            a store passed in is not closed on shutdown

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or Settings()

    # Initialize logging first
    setup_logging(settings.log_dir, settings.log_level)

    owns_store = store is None
    if owns_store:
        store = create_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle management"""
        try:
            await store.ping()
            logger.info("Channel store reachable")
        except StoreUnavailableError as e:
            # Redis may come up later; requests fail with STORE_UNAVAILABLE until then
            logger.error(f"Channel store not reachable at startup: {e.message}")

        yield

        if owns_store:
            await store.close()
        logger.info("Application shutting down")

    # Create FastAPI application
    app = FastAPI(
        title=f"{settings.app_name} API",
        version=settings.app_version,
        description="Ephemeral text and file sharing channels",
        lifespan=lifespan,
    )

    # Store in app state for dependency injection
    app.state.settings = settings
    app.state.store = store
    app.state.channel_service = ChannelService(
        store,
        ttl_seconds=settings.channel_ttl_seconds,
        max_channel_bytes=settings.max_channel_bytes,
        password_protection=settings.password_protection,
    )

    # ==================== Middleware ====================

    # Middleware added last runs outermost; CORS goes last so rejections carry its headers
    @app.middleware("http")
    async def limit_request_body(request: Request, call_next):
        """Reject bodies larger than max_request_bytes before reading them"""
        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                too_large = int(content_length) > settings.max_request_bytes
            except ValueError:
                too_large = False
            if too_large:
                logger.warning(
                    f"Rejected {request.method} {request.url.path}: "
                    f"body of {content_length} bytes exceeds {settings.max_request_bytes}"
                )
                return _error_response(
                    PayloadTooLargeError("request body exceeds allowed size", status_code=413)
                )
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # ==================== Exception Handlers ====================

    @app.exception_handler(LynkException)
    async def lynk_exception_handler(request: Request, exc: LynkException) -> JSONResponse:
        """Handle all Lynk business exceptions

        Caller errors are logged as warnings, internal failures as errors.
        """
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code} ({exc.message})")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.code}")
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle Pydantic validation errors of request bodies and parameters"""
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                message="Invalid input format",
                error={
                    "code": "VALIDATION_ERROR",
                    "details": jsonable_errors(exc)
                }
            ).model_dump()
        )

    # ==================== Router Registration ====================

    app.include_router(channel_router, prefix="/api")

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Health check endpoint"""
        return HealthResponse(status="ok", version=settings.app_version)

    return app


def jsonable_errors(exc: RequestValidationError) -> list:
    """Validation error details without non-serializable context objects"""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
