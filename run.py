"""Entry point for the Player Registry API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``API_HOST`` and ``API_PORT`` environment variables
(defaults ``0.0.0.0`` and ``8000``); see ``core/config.py`` for the
remaining settings.  Uvicorn installs no logging config of its own and
writes through the handlers set up by ``setup_logging``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from player_registry_api.app.core.config import settings
from player_registry_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
