"""Entry point for the Greeting API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level are read from the environment through
``greeting_api.app.core.config.settings`` (``HOST``, ``PORT`` and
``LOG_LEVEL``).  Logging itself is configured by ``create_app`` when
the application module is imported.

Usage:
    python run.py
"""
import asyncio
import logging
from typing import Optional

from uvicorn import Config, Server
from uvicorn.config import LOG_LEVELS

from greeting_api.app.core.config import Settings, settings as default_settings
from greeting_api.app.main import app


# Names the standard library accepts but uvicorn does not.
_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


def resolve_log_level(name: str) -> str:
    """Map a ``LOG_LEVEL`` value to a name uvicorn understands.

    Unknown names fall back to ``"info"``, matching ``setup_logging``.
    """
    level = name.lower()
    level = _LEVEL_ALIASES.get(level, level)
    return level if level in LOG_LEVELS else "info"


def build_config(settings: Optional[Settings] = None) -> Config:
    """Build the uvicorn configuration for the application."""
    settings = settings or default_settings
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_log_level(settings.log_level),
    )


async def main() -> None:
    """Serve the application until interrupted."""
    config = build_config()
    logging.getLogger(__name__).info("Serving on %s:%s", config.host, config.port)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
