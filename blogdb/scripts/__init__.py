"""
Runnable scripts: seed users and list users with their relations.
"""

from .create_users import SEED_USERS, create_user, create_users
from .list_users import list_users

__all__ = ["SEED_USERS", "create_user", "create_users", "list_users"]
