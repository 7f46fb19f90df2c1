"""
Database toolkit exposing ORM models, repositories, and session helpers.
"""

from .exceptions import DuplicateEmailError, RepositoryError
from .models import Base, Post, Profile, Role, User
from .repositories import BaseRepository, PostRepository, ProfileRepository, UserRepository
from .session import (
    create_engine,
    create_session_factory,
    database_context,
    enable_sqlite_foreign_keys,
    session_scope,
)

__all__ = [
    "Base",
    "BaseRepository",
    "DuplicateEmailError",
    "Post",
    "PostRepository",
    "Profile",
    "ProfileRepository",
    "RepositoryError",
    "Role",
    "User",
    "UserRepository",
    "create_engine",
    "create_session_factory",
    "database_context",
    "enable_sqlite_foreign_keys",
    "session_scope",
]
