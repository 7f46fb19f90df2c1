"""
Base repository class with shared utilities.
"""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Base


class BaseRepository:
    """Base class for all repositories; wraps a caller-managed session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Expose the underlying session for transaction management."""
        return self._session

    async def _persist(
        self,
        instance: Base,
        translate: Callable[[IntegrityError], Exception | None],
    ) -> None:
        """
        Add ``instance`` and flush so generated columns are populated.

        ``translate`` maps a constraint violation to a domain error; when it
        returns None the original ``IntegrityError`` is re-raised.
        """
        self._session.add(instance)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            error = translate(exc)
            if error is None:
                raise
            raise error from exc


def violated_constraint(exc: IntegrityError) -> str | None:
    """Best-effort name of the constraint behind ``exc``."""

    diag = getattr(exc.orig, "diag", None)
    return getattr(diag, "constraint_name", None)


__all__ = ["BaseRepository", "violated_constraint"]
