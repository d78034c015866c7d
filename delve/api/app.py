"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from delve import __version__
from delve.api.dependencies import set_session_manager
from delve.api.routes import api_router
from delve.api.session_manager import SessionManager
from delve.config import DungeonConfig
from delve.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: DungeonConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = DungeonConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = SessionManager(_config)
        set_session_manager(manager)
        manager.start()
        logger.info("API server started, session ready.")
        yield
        manager.stop()
        set_session_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Delve",
        description=(
            "Turn-based dungeon crawler core, driven over HTTP.\n\n"
            "## API Groups\n\n"
            "- **Map** — Tile layers of the current level: blocked, explored, visible\n"
            "- **State** — Player, drawable entities, inventory and message log\n"
            "- **Action** — Submit one player action (or a raw key name) per request\n"
            "- **Control** — Reset the run, optionally with a new seed\n"
            "- **Config** — Read-only dungeon configuration\n"
            "- **Metadata** — Monster and item definitions\n"
        ),
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Map", "description": "Tile layers; re-fetch after a descent or to refresh explored tiles."},
            {"name": "State", "description": "Everything the presentation needs to draw a frame."},
            {"name": "Action", "description": "Advance the turn controller by one input."},
            {"name": "Control", "description": "Session lifecycle."},
            {"name": "Config", "description": "Dungeon configuration parameters."},
            {"name": "Metadata", "description": "Monster and item templates serialized from delve.core.templates."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
