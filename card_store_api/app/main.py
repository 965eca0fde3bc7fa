"""
Main entrypoint for the Card Store API.

This module assembles the FastAPI application, sets up logging,
creates the card store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn card_store_api.app.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import CardStore


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    store: CardStore = app.state.card_store
    logger.info("Card store ready with %d cards", len(store))
    yield
    store.clear()
    logger.info("Card store discarded")


def create_app(config: Optional[Settings] = None, store: Optional[CardStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    store : Optional[CardStore]
        Store to serve.  A freshly seeded store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance that owns its store.
    """
    config = config or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging("DEBUG" if config.debug else config.log_level, config.log_file or None)

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        lifespan=lifespan,
    )
    app.state.card_store = store if store is not None else CardStore()

    register_exception_handlers(app)

    # Cards are served from the root (``/cards``) rather than under a
    # version prefix.
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
