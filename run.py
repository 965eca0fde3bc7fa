"""Entry point for the Card Store API.

Starts the FastAPI application with Uvicorn.  Host and port come from
``Settings`` (environment variables ``HOST`` and ``PORT``, defaulting
to ``0.0.0.0`` and ``3000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from card_store_api.app.core.config import settings
from card_store_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    # ``log_config=None`` keeps the handlers installed by ``setup_logging``.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
