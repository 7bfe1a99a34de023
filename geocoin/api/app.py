"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geocoin import __version__
from geocoin.api.dependencies import set_session_manager
from geocoin.api.routes import api_router
from geocoin.api.session_manager import SessionManager
from geocoin.config import GameConfig
from geocoin.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = SessionManager(_config)
        set_session_manager(manager)
        manager.start()
        logger.info("API server started — session running.")
        yield
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Geocoin",
        description=(
            "Location-based coin caches on a lat/lng grid.\n\n"
            "## API Groups\n\n"
            "- **Board** — Grid cells and their geographic bounds\n"
            "- **Caches** — Spawn, inspect, collect from and deposit into caches\n"
            "- **Player** — Player inventory and the game event feed\n"
            "- **Control** — Session reset\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
