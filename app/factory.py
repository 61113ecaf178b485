"""
Application factory

Building the app has no import-time side effects: settings are loaded
and the catalog is read only when create_app runs and the app starts.

Routers in app/api/:
- home.py: Home page view
- entries.py: Random entry sample and score aggregate
- status.py: Fixed 401/404 responses
- health.py: Health check and catalog counts

The catalog is loaded once at startup, stored on app.state and handed to
routers through app.dependencies.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from contextlib import asynccontextmanager
from typing import Optional
import logging
import os

from app.catalog import SCORES_AGGREGATE_WARNING
from app.catalog_loader import load_catalog
from app.config import load_config
from app.models import Catalog, Settings

# Import all API routers
from app.api import home, entries, status, health


logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Optional[Settings] = None, catalog: Optional[Catalog] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: Server settings (loaded from config when omitted)
        catalog: Preloaded catalog; when omitted it is read from
                 settings.data_path during startup

    Returns:
        Configured FastAPI app
    """
    if settings is None:
        settings = load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        # Startup: Load catalog unless one was injected
        if app.state.catalog is None:
            try:
                app.state.catalog = load_catalog(settings.data_path)
            except Exception as e:
                logger.error(f"Failed to load catalog: {e}")
                raise

        logger.info(
            f"Server started with {len(app.state.catalog.entries)} entries "
            f"and {len(app.state.catalog.scores)} scores"
        )

        if app.state.catalog.scores:
            logger.warning(SCORES_AGGREGATE_WARNING)

        yield

        # Shutdown
        logger.info("Server shutting down")

    app = FastAPI(
        title=settings.title,
        description="Read-only entry catalog: random entry samples, scores and fixed status routes",
        version=settings.version,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.templates = Jinja2Templates(directory=settings.views_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==================== INCLUDE ROUTERS ====================

    # Home view (GET /)
    app.include_router(home.router)

    # Catalog queries (GET /random-entries, /scores)
    app.include_router(entries.router)

    # Fixed statuses (GET /unauthorized, /not-found)
    app.include_router(status.router)

    # Health check (GET /health)
    app.include_router(health.router)

    # ==================== STATIC FILES ====================

    if os.path.exists(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    return app
