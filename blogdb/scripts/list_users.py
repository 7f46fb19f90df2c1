"""
Print every user together with its posts and profile.
"""

from __future__ import annotations

import json
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..db.repositories import UserRepository
from ..schemas import UserWithRelationsResponse

LOGGER = logging.getLogger(__name__)


async def list_users(
    session_factory: async_sessionmaker[AsyncSession],
) -> list[UserWithRelationsResponse]:
    """Fetch all users with relations and print them in full as JSON."""

    async with session_factory() as session:
        users = await UserRepository(session).list_with_relations()
        rendered = [UserWithRelationsResponse.model_validate(user) for user in users]

    LOGGER.info("Fetched %d users", len(rendered))
    print(json.dumps([item.model_dump(mode="json") for item in rendered], indent=2))
    return rendered


__all__ = ["list_users"]
