"""
User repository for data access operations on User entities.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from ..exceptions import DuplicateEmailError
from ..models import Role, User
from .base import BaseRepository, violated_constraint

LOGGER = logging.getLogger(__name__)

_EMAIL_CONSTRAINT = "uq_users_email"


def is_duplicate_email(exc: IntegrityError) -> bool:
    """Whether ``exc`` comes from the unique index on ``users.email``."""

    constraint = violated_constraint(exc)
    if constraint is not None:
        return constraint == _EMAIL_CONSTRAINT
    # SQLite reports "UNIQUE constraint failed: users.email" without a name.
    message = str(exc.orig)
    return _EMAIL_CONSTRAINT in message or (
        "UNIQUE" in message.upper() and "users.email" in message
    )


class UserRepository(BaseRepository):
    """Data access helpers for User entities."""

    async def create(self, name: str, email: str, role: Role | None = None) -> User:
        """
        Insert a user and flush it so the generated id is populated.

        A missing role is stored as ``Role.USER``.

        Raises:
            DuplicateEmailError: if another user already has ``email``.
            IntegrityError: for any other constraint violation.
        """
        user = User(name=name, email=email, role=role or Role.USER)

        def translate(exc: IntegrityError) -> DuplicateEmailError | None:
            if not is_duplicate_email(exc):
                return None
            return DuplicateEmailError(
                f"User with email {email!r} already exists",
                context={"email": email},
            )

        await self._persist(user, translate)
        LOGGER.debug("Created user id=%s email=%s", user.id, user.email)
        return user

    async def get_by_id(self, user_id: int) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email; returns None if not found."""
        return await self._session.scalar(select(User).where(User.email == email))

    async def list_with_relations(self) -> list[User]:
        """
        Return every user ordered by id with posts and profile eager-loaded.

        Relations are loaded up front so they can be read after the session
        is closed.
        """
        stmt = (
            select(User)
            .options(selectinload(User.posts), selectinload(User.profile))
            .order_by(User.id)
        )
        result = await self._session.scalars(stmt)
        return list(result)


__all__ = ["UserRepository", "is_duplicate_email"]
