"""
Pydantic schema for greetings.

A greeting is produced fresh for every request and never stored.  It
carries the counter value issued for that request and the rendered
greeting text.
"""

from pydantic import BaseModel, ConfigDict, Field


class Greeting(BaseModel):
    """Schema for a single greeting returned by ``GET /greeting``."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Counter value, strictly increasing per running instance")
    content: str = Field(..., description="Rendered greeting, e.g. 'Hello, World!'")
