"""
FastAPI application entry point.
"""
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hrms.core.config import settings
from hrms.core.exceptions import (
    AppException,
    app_exception_handler,
    error_body,
    validation_exception_handler,
)
from hrms.core.logging import bind_request_context, clear_request_context, configure_logging, get_logger
from hrms.api.auth import router as auth_router
from hrms.api.dashboard import router as dashboard_router
from hrms.api.diagnostics import router as diagnostics_router
from hrms.api.menu import router as menu_router
from hrms.database import check_db_connection, dispose_engine
from hrms.models import utcnow


configure_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("application_starting", version=settings.app_version, environment=settings.environment)
    if await check_db_connection():
        logger.info("database_connection_successful")
    else:
        logger.error("database_connection_failed")

    yield

    logger.info("application_shutting_down")
    await dispose_engine()
    logger.info("database_engine_disposed")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Session-authenticated HR management API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Authorization", "X-Session-Token", "X-Correlation-ID"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log all requests."""
    logger.info(
        "request_started",
        method=request.method,
        path=request.url.path,
        client=request.client.host if request.client else None
    )

    response = await call_next(request)

    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code
    )

    return response


# Registered last so it wraps the logging middleware and binds the id first
@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    """Add correlation ID to request and response headers."""
    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
    request.state.correlation_id = correlation_id

    bind_request_context(
        correlation_id=correlation_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    try:
        response = await call_next(request)
    finally:
        clear_request_context()

    response.headers["X-Correlation-ID"] = correlation_id
    return response


app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handle database errors."""
    logger.error("database_error", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("A database error occurred")
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.error("unexpected_error", error=str(exc), error_type=type(exc).__name__, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An unexpected error occurred")
    )


app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(dashboard_router, prefix=settings.api_prefix)
app.include_router(menu_router, prefix=settings.api_prefix)
app.include_router(diagnostics_router, prefix=settings.api_prefix)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "openapi": f"{settings.api_prefix}/openapi.json"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check with database status."""
    db_healthy = await check_db_connection()
    return {
        "status": "healthy" if db_healthy else "degraded",
        "timestamp": utcnow().isoformat(),
        "service": settings.app_name,
        "version": settings.app_version,
        "database": "connected" if db_healthy else "unavailable"
    }


@app.get(f"{settings.api_prefix}/info", tags=["Health"])
async def api_info():
    """Application metadata and the main endpoint groups."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "sessionTimeoutHours": settings.session_timeout_hours,
        "endpoints": {
            "auth": f"{settings.api_prefix}/auth",
            "dashboard": f"{settings.api_prefix}/dashboard",
            "menu": f"{settings.api_prefix}/menu",
            "diagnostics": f"{settings.api_prefix}/test",
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hrms.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower()
    )
