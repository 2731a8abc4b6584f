"""Domain entity representing a user role."""

from enum import Enum


class UserRole(str, Enum):
    """Capability tag attached to every user and live connection."""

    STUDENT = "student"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: "UserRole | str") -> "UserRole":
        """Return the role matching ``value`` (case-insensitive)."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown role: {value!r}") from exc


__all__ = ["UserRole"]
