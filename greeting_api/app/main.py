"""
Main entrypoint for the Greeting API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn greeting_api.app.main:app --reload

Every call to ``create_app`` attaches a fresh ``GreetingService``, so
a new application instance behaves like a restarted process and
issues ids starting from one.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.greeting_service import GreetingService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level defaults.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the code below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.greeting_service = GreetingService()

    # The greeting path is part of the public contract, so version 1 is
    # mounted at the root rather than under /api/v1.
    app.include_router(v1_router)

    logging.getLogger(__name__).info(
        "Created %s %s", settings.project_name, settings.api_version
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
