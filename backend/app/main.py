"""
Main Application Entry Point
============================

Responsibilities:
- Initialize FastAPI application
- Configure middleware stack
- Register the role catalog router
- Set up exception handlers
- Provide health check endpoints
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import ComplianceTrackerException
from app.core.logging import configure_logging, get_logger
from app.middleware.request_middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from app.models.role_enum import ALL_ROLES
from app.routes import role_routes

configure_logging(settings)

# Initialize logger
logger = get_logger(__name__)


# =====================================
# Application Lifespan Handler
# =====================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application start and shutdown."""
    logger.info(
        "application_starting",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        roles_loaded=len(ALL_ROLES),
    )
    try:
        yield
    finally:
        logger.info("application_shutdown_complete")


# =====================================
# FastAPI App Initialization
# =====================================

app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Compliance Tracker - Role Registry

    Read-only catalog of the roles recognized by the compliance tracker.

    Roles (display order only, no precedence):
    * `Admin`
    * `ISSM`
    * `ISSO`
    * `System Admin`
    * `Auditor`
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)


# =====================================
# Middleware
# =====================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=3600,
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestContextMiddleware)


# =====================================
# Exception Handlers
# =====================================

@app.exception_handler(ComplianceTrackerException)
async def compliance_tracker_exception_handler(request: Request, exc: ComplianceTrackerException):
    """Convert application exceptions to JSON error responses."""
    logger.warning(
        "application_exception",
        exception_type=type(exc).__name__,
        message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Provide field-level messages for invalid requests."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning("request_validation_error", path=request.url.path, errors=errors)

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "message": "Validation error",
            "details": {"errors": errors},
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and hide internals in production."""
    logger.error(
        "unhandled_exception",
        exception_type=type(exc).__name__,
        message=str(exc),
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )

    if settings.ENVIRONMENT == "production":
        content = {"message": "An unexpected error occurred", "details": {}}
    else:
        content = {"message": str(exc), "details": {"type": type(exc).__name__}}

    response = JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    # Runs outside the request middleware, so the ID is copied over here
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers["X-Request-ID"] = request_id

    return response


# =====================================
# Register Routers
# =====================================

app.include_router(role_routes.router, prefix=settings.API_PREFIX)


# =====================================
# Health Check Endpoints
# =====================================

@app.get(
    "/",
    tags=["Health"],
    summary="Basic Health Check",
)
def health_check():
    """Basic service status."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@app.get(
    "/health",
    tags=["Health"],
    summary="Detailed Health Check",
)
def detailed_health_check():
    """Service status including the size of the loaded role registry."""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "roles_loaded": len(ALL_ROLES),
    }
