"""
Pydantic models for user data.

A user is just an id and a display name.  ``UserCreate`` doubles as
the rename payload since both carry only ``name``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Payload for creating or renaming a user.

    ``name`` is optional at the schema level; the store rejects a
    missing or empty name with "Name is required".
    """

    name: Optional[str] = Field(None, examples=["Ann"])


UserUpdate = UserCreate


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
