"""
Command-line entry point for the blogdb scripts.

Usage:
    # Create the four seed users
    blogdb create-users

    # Create a single user (role defaults to USER)
    blogdb create-user --name "Jane Doe" --email jane@email.com --role ADMIN

    # Print every user with posts and profile
    blogdb list-users
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from .config import Settings, get_settings
from .db.models import Role
from .db.session import database_context
from .logger import setup_logging
from .schemas import UserCreate
from .scripts import create_user, create_users, list_users


async def _run_create_users(settings: Settings) -> None:
    async with database_context(settings) as session_factory:
        await create_users(session_factory)


async def _run_create_user(settings: Settings, payload: UserCreate) -> None:
    async with database_context(settings) as session_factory:
        await create_user(session_factory, payload.name, payload.email, payload.role)


async def _run_list_users(settings: Settings) -> None:
    async with database_context(settings) as session_factory:
        await list_users(session_factory)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per script."""
    parser = argparse.ArgumentParser(
        prog="blogdb",
        description="Create and list blog users",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create-users", help="Create the seed users")

    create_parser = subparsers.add_parser("create-user", help="Create a single user")
    create_parser.add_argument("--name", required=True, help="User display name")
    create_parser.add_argument("--email", required=True, help="Unique email address")
    create_parser.add_argument(
        "--role",
        choices=[role.value for role in Role],
        default=None,
        help="User role (default: USER)",
    )

    subparsers.add_parser("list-users", help="List users with posts and profile")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point with subcommand routing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    payload: UserCreate | None = None
    if args.command == "create-user":
        try:
            payload = UserCreate(name=args.name, email=args.email, role=args.role)
        except ValidationError as exc:
            print(f"Error: invalid user: {exc}", file=sys.stderr)
            return 2

    settings = get_settings()
    setup_logging(settings)

    if args.command == "create-users":
        asyncio.run(_run_create_users(settings))
    elif payload is not None:
        asyncio.run(_run_create_user(settings, payload))
    elif args.command == "list-users":
        asyncio.run(_run_list_users(settings))
    return 0


__all__ = ["build_parser", "main"]
