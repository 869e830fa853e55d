"""Entry point for serving the Autos API.

Starts uvicorn with the host and port from ``Settings`` (``HOST`` and
``PORT`` environment variables, ``127.0.0.1:8000`` by default).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from autos_api.app.core.config import settings
from autos_api.app.main import app


async def main() -> None:
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


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
