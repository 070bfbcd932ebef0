"""Entry point for the Employee API.

Starts the ASGI application under uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``employee_api.app.core.config`` for the full list of settings.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_api.app.core.config import settings


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="employee_api.app.main:app",
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
