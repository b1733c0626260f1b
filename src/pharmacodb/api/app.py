"""
PharmacoDB FastAPI Backend

Read-only REST API for pharmacogenomic experiment data:
- Cell lines, tissues, drugs and datasets
- Per-dataset statistics
- Paginated experiments with dose-response data
- Cell line / drug and cell line / dataset combinations
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from pharmacodb import __version__
from pharmacodb.api.models import ErrorResponse
from pharmacodb.config import PharmacoDBSettings
from pharmacodb.database import ConnectionPool
from pharmacodb.errors import (
    ErrorType,
    InternalError,
    PublicError,
    INTERNAL_ERROR_MESSAGE,
    log_private_error,
    log_public_error,
)
from pharmacodb.logging_config import configure_logging
from pharmacodb.monitoring import ErrorSink, build_error_sink

logger = logging.getLogger(__name__)

# Documents the error envelope in the OpenAPI schema of every router
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    404: {"model": ErrorResponse, "description": "Not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def _validation_message(exc: RequestValidationError) -> str:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part not in ("query", "path"))
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return "Invalid request: " + "; ".join(problems)


def install_exception_handlers(app: FastAPI) -> None:
    """Map every failure to the ``{"error": {"code", "message"}}`` envelope."""

    @app.exception_handler(PublicError)
    async def _handle_public_error(_request: Request, exc: PublicError):
        return log_public_error(ErrorType.PUBLIC, exc.code, exc.message)

    @app.exception_handler(InternalError)
    async def _handle_internal_error(request: Request, exc: InternalError):
        log_private_error(request.app.state.error_sink, ErrorType.PRIVATE, exc.cause)
        return log_public_error(ErrorType.PUBLIC, 500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(_request: Request, exc: RequestValidationError):
        return log_public_error(ErrorType.PUBLIC, 400, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_error(_request: Request, exc: StarletteHTTPException):
        return log_public_error(ErrorType.PUBLIC, exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception):
        log_private_error(request.app.state.error_sink, ErrorType.PRIVATE, exc)
        return log_public_error(ErrorType.PUBLIC, 500, INTERNAL_ERROR_MESSAGE)


def create_app(
    settings: Optional[PharmacoDBSettings] = None,
    pool: Optional[ConnectionPool] = None,
    error_sink: Optional[ErrorSink] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Configuration, loaded from the environment when omitted
        pool: Connection pool to use; when omitted one is opened at startup
            and closed at shutdown
        error_sink: Destination for private errors, built from settings when omitted
    """
    settings = settings or PharmacoDBSettings.load_from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_pool = app.state.pool is None
        if owns_pool:
            app.state.pool = ConnectionPool(settings.db_path, settings.pool_size, settings.read_only)
            logger.info(f"Opened connection pool for {settings.db_path} ({settings.pool_size} connections)")
        try:
            yield
        finally:
            if owns_pool:
                app.state.pool.close_all()
                app.state.pool = None
                logger.info("Closed connection pool")

    app = FastAPI(title="PharmacoDB API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.pool = pool
    app.state.error_sink = error_sink or build_error_sink(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    install_exception_handlers(app)

    @app.get("/")
    def root():
        """API health check"""
        return {"status": "ok", "service": "PharmacoDB API", "version": __version__}

    from .routes import cell_lines, tissues, drugs, datasets, experiments

    app.include_router(cell_lines.router, tags=["Cell Lines"], responses=ERROR_RESPONSES)
    app.include_router(tissues.router, tags=["Tissues"], responses=ERROR_RESPONSES)
    app.include_router(drugs.router, tags=["Drugs"], responses=ERROR_RESPONSES)
    app.include_router(datasets.router, tags=["Datasets"], responses=ERROR_RESPONSES)
    app.include_router(experiments.router, tags=["Experiments"], responses=ERROR_RESPONSES)

    logger.info("PharmacoDB API routes registered")
    return app
