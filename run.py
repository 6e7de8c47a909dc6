"""Entry point for the Employee API.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``employee_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger = logging.getLogger(__name__)
    logger.info("Server running on port %s", settings.port)
    logger.info("Open Swagger at: http://localhost:%s%s", settings.port, settings.docs_url)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
