"""
Repository classes for database access.

This module provides specialized repositories for different entity types:
- UserRepository: Data access for User entities
- PostRepository: Data access for Post entities
- ProfileRepository: Data access for Profile entities
"""

from .base import BaseRepository
from .post import PostRepository
from .profile import ProfileRepository
from .user import UserRepository

__all__ = ["BaseRepository", "PostRepository", "ProfileRepository", "UserRepository"]
