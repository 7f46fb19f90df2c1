"""
Create user records and print each one as it is stored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..db.models import Role
from ..db.repositories import UserRepository
from ..db.session import session_scope
from ..schemas import UserCreate, UserResponse

LOGGER = logging.getLogger(__name__)

SEED_USERS: tuple[UserCreate, ...] = (
    UserCreate(name="Sadman Islam", email="sadman@email.com"),
    UserCreate(name="Tahmid Rahman", email="tahmid@email.com"),
    UserCreate(name="Shaheenur Rashid", email="rashid@email.com"),
    UserCreate(name="Dhiraj Dhar", email="vatija@email.com"),
)


async def create_user(
    session_factory: async_sessionmaker[AsyncSession],
    name: str,
    email: str,
    role: Role | None = None,
) -> UserResponse:
    """Insert one user in its own transaction and print the stored record."""

    async with session_scope(session_factory) as session:
        user = await UserRepository(session).create(name, email, role)
        created = UserResponse.model_validate(user)

    LOGGER.info("Created user %s <%s>", created.name, created.email)
    print("Created User: ", created.model_dump_json(indent=2))
    return created


async def create_users(
    session_factory: async_sessionmaker[AsyncSession],
    users: Iterable[UserCreate] = SEED_USERS,
) -> list[UserResponse]:
    """
    Create ``users`` one after another.

    A failure stops the run; users created before it stay committed.
    """
    created: list[UserResponse] = []
    for payload in users:
        created.append(
            await create_user(session_factory, payload.name, payload.email, payload.role)
        )
    return created


__all__ = ["SEED_USERS", "create_user", "create_users"]
