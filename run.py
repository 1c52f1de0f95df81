"""Entry point for the village promotion API.

Starts the FastAPI application under uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``5000``); the storage backend and other options come
from the variables documented in ``village_promo_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from village_promo_api.app.core.config import settings
from village_promo_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("API stopped")


if __name__ == "__main__":
    main()
