"""Main FastAPI application"""

from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI

from storefront.core.config import Settings, get_settings
from storefront.core.database import close_db, create_db_engine, create_session_factory, init_db
from storefront.core.logging import setup_logging
from storefront.core.middleware import setup_middleware
from storefront.services.catalog_service import CatalogSource
from storefront.services.storage import KeyValueStore, SQLKeyValueStore
from storefront.state import build_state

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    catalog_source: Optional[CatalogSource] = None,
) -> FastAPI:
    """
    Build the application

    Without an explicit store, the profile is persisted through the
    database configured in settings.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        setup_logging()
        logger.info(f"Starting up {settings.APP_NAME}...")

        engine = None
        kv_store = store
        if kv_store is None:
            engine = create_db_engine(settings.DATABASE_URL, settings.DATABASE_ECHO)
            init_db(engine)
            kv_store = SQLKeyValueStore(create_session_factory(engine))

        app.state.storefront = build_state(
            settings=settings,
            store=kv_store,
            catalog_source=catalog_source,
        )

        # A failed first load is kept as catalog error state for retry
        await app.state.storefront.catalog.load_products()

        try:
            yield
        finally:
            logger.info(f"Shutting down {settings.APP_NAME}...")
            if engine is not None:
                close_db(engine)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Storefront catalog, cart, checkout and profile API",
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_middleware(app, settings)

    from storefront.api.health import router as health_router
    from storefront.api.v1 import api_router

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(health_router)

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


app = create_app()
