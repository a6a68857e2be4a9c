"""
Service layer for greetings.

``GreetingService`` owns the only mutable state in the application:
an in-memory counter that starts at zero when the service is created
and is incremented once per greeting.  Increments happen under a lock
so that concurrent requests served from FastAPI's threadpool or event
loop each receive a distinct id.  Nothing is persisted; a new service
(i.e. a restarted application) starts counting from one again.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from greeting_api.app.schemas.greeting import Greeting


DEFAULT_NAME = "World"
TEMPLATE = "Hello, %s!"


class GreetingService:
    """Produce greetings stamped with a strictly increasing id."""

    def __init__(self) -> None:
        self._counter = 0
        self._lock = threading.Lock()

    def handle_greeting(self, name: Optional[str] = None) -> Greeting:
        """Build the greeting for ``name``.

        ``None`` means the caller supplied no name and is replaced with
        ``"World"``.  Any string, including the empty string, is used
        verbatim.
        """
        logger = logging.getLogger(__name__)
        if name is None:
            name = DEFAULT_NAME
        with self._lock:
            self._counter += 1
            greeting_id = self._counter
        logger.debug("Issued greeting %s", greeting_id)
        return Greeting(id=greeting_id, content=TEMPLATE % name)

    def current_id(self) -> int:
        """Return the last issued id, or ``0`` if none was issued yet."""
        with self._lock:
            return self._counter
