"""
Profile repository for data access operations on Profile entities.
"""

from __future__ import annotations

import logging
from datetime import date

from ..exceptions import RepositoryError
from ..models import Profile
from .base import BaseRepository

LOGGER = logging.getLogger(__name__)


class ProfileRepository(BaseRepository):
    """Data access helpers for Profile entities."""

    async def create(
        self,
        user_id: int,
        *,
        bio: str | None = None,
        date_of_birth: date | None = None,
    ) -> Profile:
        """
        Attach a profile to ``user_id``.

        Raises:
            RepositoryError: if the user already has a profile or does not exist.
        """
        profile = Profile(user_id=user_id, bio=bio, date_of_birth=date_of_birth)
        await self._persist(
            profile,
            lambda exc: RepositoryError(
                f"Cannot create profile for user {user_id}",
                context={"user_id": user_id},
            ),
        )
        LOGGER.debug("Created profile id=%s user_id=%s", profile.id, user_id)
        return profile


__all__ = ["ProfileRepository"]
