"""
Tests for the create-users script.
"""

from __future__ import annotations

import json

import pytest
from sqlalchemy import func, select

from blogdb.db.exceptions import DuplicateEmailError
from blogdb.db.models import Role, User
from blogdb.schemas import UserCreate
from blogdb.scripts import SEED_USERS, create_user, create_users

PREFIX = "Created User:  "


def _printed_records(output: str) -> list[dict]:
    """Split console output into the JSON records printed after each prefix."""
    chunks = output.split(PREFIX)[1:]
    return [json.loads(chunk) for chunk in chunks]


class TestCreateUser:
    """Tests for creating a single user through the script helper."""

    @pytest.mark.asyncio
    async def test_prints_created_record(self, session_factory, capsys) -> None:
        created = await create_user(session_factory, "Sadman Islam", "sadman@email.com")

        records = _printed_records(capsys.readouterr().out)
        assert len(records) == 1
        assert records[0]["id"] == created.id
        assert records[0]["name"] == "Sadman Islam"
        assert records[0]["email"] == "sadman@email.com"
        assert records[0]["role"] == "USER"

    @pytest.mark.asyncio
    async def test_record_is_committed(self, session_factory) -> None:
        await create_user(session_factory, "Admin", "admin@email.com", Role.ADMIN)

        async with session_factory() as session:
            stored = await session.scalar(select(User).where(User.email == "admin@email.com"))

        assert stored is not None
        assert stored.role is Role.ADMIN

    @pytest.mark.asyncio
    async def test_duplicate_email_propagates(self, session_factory, capsys) -> None:
        await create_user(session_factory, "Sadman Islam", "sadman@email.com")

        with pytest.raises(DuplicateEmailError):
            await create_user(session_factory, "Impostor", "sadman@email.com")

        assert len(_printed_records(capsys.readouterr().out)) == 1


class TestCreateUsers:
    """Tests for the seed run."""

    @pytest.mark.asyncio
    async def test_seeds_four_users_in_order(self, session_factory, capsys) -> None:
        created = await create_users(session_factory)

        assert [user.email for user in created] == [
            "sadman@email.com",
            "tahmid@email.com",
            "rashid@email.com",
            "vatija@email.com",
        ]
        assert all(user.role is Role.USER for user in created)

        records = _printed_records(capsys.readouterr().out)
        assert [record["name"] for record in records] == [
            "Sadman Islam",
            "Tahmid Rahman",
            "Shaheenur Rashid",
            "Dhiraj Dhar",
        ]

    @pytest.mark.asyncio
    async def test_failure_stops_remaining_creates(self, session_factory) -> None:
        users = [
            UserCreate(name="One", email="one@email.com"),
            UserCreate(name="Clash", email="one@email.com"),
            UserCreate(name="Never", email="never@email.com"),
        ]

        with pytest.raises(DuplicateEmailError):
            await create_users(session_factory, users)

        async with session_factory() as session:
            count = await session.scalar(select(func.count(User.id)))
            never = await session.scalar(select(User).where(User.email == "never@email.com"))

        assert count == 1
        assert never is None

    def test_seed_users_have_no_explicit_role(self) -> None:
        assert len(SEED_USERS) == 4
        assert all(user.role is None for user in SEED_USERS)
