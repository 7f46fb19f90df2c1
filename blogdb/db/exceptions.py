"""
Exceptions raised by the repository layer.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """Base exception for data-access failures surfaced by repositories."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class DuplicateEmailError(RepositoryError):
    """Raised when a user is created with an email that is already taken."""


__all__ = ["DuplicateEmailError", "RepositoryError"]
