"""
Pydantic schemas for todo items.

A todo is a short piece of text with a completion flag and the time it
was created.  The JSON representation uses ``createdAt`` for the
creation timestamp; Python code uses ``created_at``.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a new todo.

    ``text`` is optional at the schema level so that a missing value is
    reported as a 400 by the service instead of a schema error.
    """

    text: Optional[str] = Field(None, description="What needs to be done")


class TodoUpdate(BaseModel):
    """Schema for updating an existing todo.

    All fields are optional; only provided values will be updated.
    """

    text: Optional[str] = None
    completed: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Return the fields that should be written to the store."""
        return {key: value for key, value in self.model_dump().items() if value is not None}


class TodoRead(BaseModel):
    """Schema for reading a todo."""

    id: str
    text: str
    completed: bool = False
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }
