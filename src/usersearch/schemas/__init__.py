"""Pydantic schema definitions for user records and configuration."""

from __future__ import annotations

from .user import NewUser, User, UserUpdate

__all__ = [
    "NewUser",
    "User",
    "UserUpdate",
]
