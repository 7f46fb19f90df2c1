"""
Tests for the list-users script.
"""

from __future__ import annotations

import json
from datetime import date

import pytest

from blogdb.db.repositories import PostRepository, ProfileRepository, UserRepository
from blogdb.scripts import list_users


class TestListUsers:
    """Tests for printing users with their relations."""

    @pytest.mark.asyncio
    async def test_prints_empty_array_when_no_users(self, session_factory, capsys) -> None:
        result = await list_users(session_factory)

        assert result == []
        assert json.loads(capsys.readouterr().out) == []

    @pytest.mark.asyncio
    async def test_prints_users_with_posts_and_profile(self, session_factory, capsys) -> None:
        async with session_factory() as session:
            users = UserRepository(session)
            writer = await users.create("Sadman Islam", "sadman@email.com")
            await users.create("Tahmid Rahman", "tahmid@email.com")
            await PostRepository(session).create(writer.id, "Hello", "First post", published=True)
            await ProfileRepository(session).create(
                writer.id, bio="Writes things", date_of_birth=date(2000, 2, 29)
            )
            await session.commit()

        await list_users(session_factory)
        printed = json.loads(capsys.readouterr().out)

        assert [item["name"] for item in printed] == ["Sadman Islam", "Tahmid Rahman"]
        writer_out, reader_out = printed
        assert set(writer_out) == {"id", "name", "posts", "profile"}
        assert len(writer_out["posts"]) == 1
        assert writer_out["posts"][0]["title"] == "Hello"
        assert writer_out["posts"][0]["published"] is True
        assert writer_out["profile"]["bio"] == "Writes things"
        assert writer_out["profile"]["date_of_birth"] == "2000-02-29"
        assert reader_out["posts"] == []
        assert reader_out["profile"] is None

    @pytest.mark.asyncio
    async def test_output_is_not_truncated(self, session_factory, capsys) -> None:
        body = "x" * 5000
        async with session_factory() as session:
            user = await UserRepository(session).create("Long", "long@email.com")
            for index in range(30):
                await PostRepository(session).create(user.id, f"Post {index}", body)
            await session.commit()

        result = await list_users(session_factory)
        printed = json.loads(capsys.readouterr().out)

        assert len(result[0].posts) == 30
        assert len(printed[0]["posts"]) == 30
        assert printed[0]["posts"][-1]["content"] == body
