"""
Post repository for data access operations on Post entities.
"""

from __future__ import annotations

import logging

from ..exceptions import RepositoryError
from ..models import Post
from .base import BaseRepository

LOGGER = logging.getLogger(__name__)


class PostRepository(BaseRepository):
    """Data access helpers for Post entities."""

    async def create(
        self,
        author_id: int,
        title: str,
        content: str | None = None,
        *,
        published: bool = False,
    ) -> Post:
        """
        Insert a post for ``author_id``.

        Raises:
            RepositoryError: if the post violates a constraint, e.g. unknown author.
        """
        post = Post(author_id=author_id, title=title, content=content, published=published)
        await self._persist(
            post,
            lambda exc: RepositoryError(
                f"Cannot create post for author {author_id}",
                context={"author_id": author_id},
            ),
        )
        LOGGER.debug("Created post id=%s author_id=%s", post.id, author_id)
        return post


__all__ = ["PostRepository"]
