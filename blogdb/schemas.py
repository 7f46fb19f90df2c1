"""
Pydantic schemas used to render database records on the console.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from .db.models import Role


class UserCreate(BaseModel):
    """Input accepted when creating a user."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name.")
    email: str = Field(..., min_length=3, max_length=320, description="Unique email address.")
    role: Role | None = Field(default=None, description="Role; stored as USER when omitted.")


class UserResponse(BaseModel):
    """A freshly created user, as printed by the create scripts."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    created_at: datetime


class PostResponse(BaseModel):
    """Post nested under its author."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str | None = None
    published: bool
    author_id: int
    created_at: datetime
    updated_at: datetime


class ProfileResponse(BaseModel):
    """Profile nested under its user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    bio: str | None = None
    date_of_birth: date | None = None
    user_id: int


class UserWithRelationsResponse(BaseModel):
    """A user with its posts and profile, as printed by ``list-users``."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    posts: list[PostResponse] = Field(default_factory=list)
    profile: ProfileResponse | None = None


__all__ = [
    "PostResponse",
    "ProfileResponse",
    "UserCreate",
    "UserResponse",
    "UserWithRelationsResponse",
]
