"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from accounts.application.errors import UserErrorKind
from accounts.presentation import router as accounts_router
from infrastructure.database import (
    check_database_connection,
    close_database_connections,
)
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__

settings = get_settings()
configure_logging(debug=settings.debug)

logger = structlog.get_logger()


@asynccontextmanager
async def accounts_lifespan(app: FastAPI):
    """Application lifespan context.

    The engine and its pool are created lazily on the first request and
    disposed on shutdown.
    """
    yield

    await close_database_connections()


app = FastAPI(
    title=settings.app_name,
    description="User account management and password changes",
    version=__version__,
    lifespan=accounts_lifespan,
)

app.include_router(accounts_router, prefix=settings.api_prefix)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema failures in the same envelope as service errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": {
                "error": UserErrorKind.INVALID_INPUT.value,
                "message": "Invalid request",
                "errors": jsonable_encoder(exc.errors()),
            }
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the client."""
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": {
                "error": UserErrorKind.INTERNAL_ERROR.value,
                "message": "Internal server error",
            }
        },
    )


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/db")
async def health_db() -> dict:
    """Check database connection health."""
    is_healthy = await check_database_connection()
    return {
        "status": "ok" if is_healthy else "unhealthy",
        "connected": is_healthy,
    }
