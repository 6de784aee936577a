"""
FastAPI application factories.

Builds the two services of the system:

- the auth service (registration, login, profile),
- the hydration service (entries, statistics, daily goal).

Both share settings, error handling and the token format, and are
mounted under ``/api/v1``.
"""

from fastapi import APIRouter, FastAPI

from app.api.v1.router import auth_router, hydration_router
from app.core.app_logging import configure_logging
from app.core.config import settings
from app.core.errors import register_exception_handlers


def _create_app(title: str, description: str, service_name: str, api_router: APIRouter) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=title,
        version=settings.VERSION,
        description=description,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": title,
            "version": settings.VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": service_name,
            "version": settings.VERSION
        }

    return app


def create_auth_app() -> FastAPI:
    """Build the authentication service."""
    return _create_app(title=f"{settings.PROJECT_NAME} Auth Service",
                       description="Authentication and Authorization microservice.",
                       service_name="auth-service", api_router=auth_router)


def create_hydration_app() -> FastAPI:
    """Build the hydration tracking service."""
    return _create_app(title=f"{settings.PROJECT_NAME} Hydration Service",
                       description="Hydration tracking microservice.",
                       service_name="hydration-service", api_router=hydration_router)


# Module-level app instances for uvicorn
auth_app = create_auth_app()
hydration_app = create_hydration_app()
