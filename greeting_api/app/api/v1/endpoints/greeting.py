"""
Greeting endpoint for API v1.

``GET /greeting`` returns ``{"id": ..., "content": ...}``.  The
optional ``name`` query parameter is accepted as any string; when it is
missing the service greets ``World``.  The endpoint is public.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from greeting_api.app.schemas.greeting import Greeting
from greeting_api.app.services.greeting_service import GreetingService

router = APIRouter()


def get_greeting_service(request: Request) -> GreetingService:
    """Return the service attached to the running application."""
    return request.app.state.greeting_service


@router.get("/greeting", response_model=Greeting)
async def get_greeting(
    name: Optional[str] = Query(None, description="Name to greet; defaults to 'World'"),
    service: GreetingService = Depends(get_greeting_service),
) -> Greeting:
    return service.handle_greeting(name)
