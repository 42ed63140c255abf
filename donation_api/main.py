# donation_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from donation_api.core.config import Settings, get_settings
from donation_api.core.db import open_store
from donation_api.core.logging_config import setup_logging
from donation_api.errors import register_exception_handlers
from donation_api.middleware.access_log import AccessLogMiddleware
from donation_api.repos.base import DonationStore
from donation_api.routers import donations as donations_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[DonationStore] = None) -> FastAPI:
    """
    Build the API.

    With no `store`, the lifespan opens a MongoDB-backed one from
    `settings` and closes it on shutdown. A passed-in store is used as
    is and left open (the caller owns it).
    """
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.store is None
        if owned:
            app.state.store = await open_store(settings)
        try:
            yield
        finally:
            if owned:
                await app.state.store.close()
                app.state.store = None

    app = FastAPI(lifespan=lifespan, title="Donation Inventory API")
    app.state.settings = settings
    app.state.store = store

    register_exception_handlers(app)

    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(donations_router.router)  # /api/donations

    @app.get("/health")
    def health():
        return {"ok": True}

    # prebuilt UI bundle goes last so /api/* wins
    if settings.static_dir:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="ui")
        logger.info("Serving UI bundle from %s", settings.static_dir)

    return app
