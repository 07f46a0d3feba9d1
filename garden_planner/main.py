# 📄 File: garden_planner/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Garden Planner, connects all its parts and
# gets it ready to answer requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with middleware setup, exception handlers,
# router registration and database lifecycle.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - garden_planner.shared.config.settings
# - garden_planner.shared.infrastructure.database
# - garden_planner.api (middleware, v1 routers)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - garden-planner console script

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from garden_planner.api.middleware import (
    AuthenticationMiddleware,
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    register_exception_handlers,
)
from garden_planner.api.v1 import api_v1_router, health_router
from garden_planner.shared.config.settings import get_settings
from garden_planner.shared.infrastructure.database import (
    close_database,
    init_database,
    initialize_sessions,
)
from garden_planner.shared.utils.logging import setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database engine and session factory on startup and disposes the
    engine on shutdown.
    """
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )
    logger.info("🌱 Garden Planner API starting up...")

    await init_database()
    logger.info("✅ Database connection initialized")

    initialize_sessions()
    logger.info("✅ Session manager initialized")

    try:
        yield
    finally:
        logger.info("🔄 Garden Planner API shutting down...")
        await close_database()
        logger.info("✅ Garden Planner API shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.ENABLE_SWAGGER_UI else None,
        redoc_url="/redoc" if settings.ENABLE_REDOC else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    app.add_middleware(AuthenticationMiddleware)

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(ErrorHandlingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router)
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.ENABLE_SWAGGER_UI else None,
            "health_check": "/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_application()


def main():
    """Run the application with uvicorn (python -m garden_planner.main)."""
    uvicorn.run(
        "garden_planner.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
