"""
Main FastAPI application for Expense Tracker

This module initializes the FastAPI application, configures CORS,
creates the transaction service and registers routers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import logging

from expense_tracker import __version__
from expense_tracker.api.v1.endpoints import categories, reports, transactions
from expense_tracker.core.config import settings, get_cors_origins
from expense_tracker.services.transaction_service import create_transaction_service

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events

    The transaction service lives exactly as long as the application.
    """
    # Startup
    logger.info("=" * 50)
    logger.info(f"Starting {settings.project_name}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API prefix: {settings.api_v1_prefix}")
    logger.info(f"Storage backend: {settings.storage_backend}")
    logger.info(f"CORS origins: {get_cors_origins()}")
    logger.info("=" * 50)

    app.state.transaction_service = create_transaction_service(settings)

    yield

    # Shutdown
    app.state.transaction_service = None
    logger.info(f"Shutting down {settings.project_name}...")


def create_application() -> FastAPI:
    """
    Application factory for creating FastAPI instance

    This factory pattern allows:
    - Creating app with different settings for tests
    - Overriding the transaction service dependency
    """

    app = FastAPI(
        title=settings.project_name,
        description="Personal income and expense tracking",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Register routers
    register_routers(app)

    # Register base routes
    register_base_routes(app)

    return app


def register_routers(app: FastAPI) -> None:
    """Register API routers"""
    app.include_router(
        transactions.router,
        prefix=f"{settings.api_v1_prefix}/transactions",
        tags=["Transactions"]
    )
    app.include_router(
        reports.router,
        prefix=f"{settings.api_v1_prefix}/reports",
        tags=["Reports"]
    )
    app.include_router(
        categories.router,
        prefix=f"{settings.api_v1_prefix}/categories",
        tags=["Categories"]
    )
    logger.debug("Transactions, reports and categories routers registered")


def register_base_routes(app: FastAPI) -> None:
    """Register base application routes"""

    @app.get("/")
    async def root():
        """Root endpoint with API information"""
        return {
            "message": f"{settings.project_name} API",
            "version": __version__,
            "status": "running",
            "docs_url": "/docs" if settings.debug else "disabled",
            "features": [
                "Income and expense records",
                "Running balance",
                "Monthly and yearly category reports",
            ]
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
            "services": {
                "api": "operational",
                "storage": settings.storage_backend,
            }
        }

    @app.get("/config")
    async def get_config():
        """
        Get application configuration (development only)

        In production, this endpoint returns 404
        """
        if not settings.debug:
            raise HTTPException(
                status_code=404,
                detail="Endpoint is only available in development mode"
            )

        return {
            "project_name": settings.project_name,
            "debug": settings.debug,
            "api_v1_prefix": settings.api_v1_prefix,
            "storage_backend": settings.storage_backend,
            "storage_key": settings.storage_key,
            "currency_symbol": settings.currency_symbol,
            "log_level": settings.log_level,
            "cors_origins": get_cors_origins(),
        }


# Create application instance
app = create_application()


if __name__ == "__main__":
    """
    Development server entry point
    """
    import uvicorn

    uvicorn.run(
        "expense_tracker.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
