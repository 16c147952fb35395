"""Requester roles."""

from enum import Enum


class UserRole(str, Enum):
    """Role that decides which filtering rules apply.

    Sub-users (telecallers, lead managers, monitors) and requesters without a
    role row are treated as clients.
    """

    ADMIN = "admin"
    ENGINEER = "engineer"
    CLIENT = "client"

    @classmethod
    def parse(cls, value: "str | UserRole | None") -> "UserRole":
        """Parse a stored role, falling back to CLIENT for anything unknown."""
        if isinstance(value, UserRole):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.CLIENT

    @property
    def is_internal(self) -> bool:
        return self in (UserRole.ADMIN, UserRole.ENGINEER)
