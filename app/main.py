# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Usuarios API.
# It configures the FastAPI application with middleware, routers, handlers
# and the static file mount.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main            (binds API_HOST:PORT from settings)
# =============================================================================

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.config import Settings, settings
from app.exceptions import (
    UsuariosException,
    unexpected_exception_handler,
    usuarios_exception_handler,
)
from app.middleware import build_middleware
from app.routers import users
from core.services.user_store import UserStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
db_logger = logging.getLogger("app.db")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: Report configuration
    - Shutdown: Report how many users were held
    """
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"Application: {app_settings.APP_NAME}")
    logger.info(f"DB server: {app_settings.DB_HOST}")
    db_logger.debug("Connecting to database")
    logger.info(f"Starting in {app_settings.ENVIRONMENT} mode on port {app_settings.PORT}")

    yield

    # Shutdown
    logger.info(f"Shutting down with {len(app.state.user_store)} users in memory")


def create_app(
    app_settings: Settings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """
    Build a configured application.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        store: User store to serve (defaults to a freshly seeded one)

    Returns:
        FastAPI: The application, with its own store on app.state
    """
    app_settings = app_settings or settings

    application = FastAPI(
        title=app_settings.APP_NAME,
        description="In-memory CRUD API for the users collection.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        middleware=build_middleware(app_settings),
        openapi_tags=[
            {
                "name": "Users",
                "description": "List, read, create, rename and delete users",
            },
        ],
    )

    application.state.settings = app_settings
    application.state.user_store = store if store is not None else UserStore.seeded()

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    application.add_exception_handler(UsuariosException, usuarios_exception_handler)
    application.add_exception_handler(Exception, unexpected_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    application.include_router(
        users.router,
        prefix="/api/usuarios",
        tags=["Users"]
    )

    # -------------------------------------------------------------------------
    # Static Files
    # -------------------------------------------------------------------------
    # Mounted last so the API routes take precedence

    static_dir = Path(app_settings.STATIC_DIR)
    if static_dir.is_dir():
        application.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory not found, not serving static files: {static_dir}")

    return application


app = create_app()


def run() -> None:
    """Serve the default application with uvicorn."""
    logger.info(f"Listening on port {settings.PORT}...")
    uvicorn.run(app, host=settings.API_HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
