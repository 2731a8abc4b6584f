"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import UserRole


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    email: str
    password: str
    first_name: str | None
    last_name: str | None
    role: UserRole = UserRole.STUDENT
    leave_balance: int = 20
    profile_image_url: str | None = None
    roll_number: str | None = None
    branch: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        """Return the display name used in notification messages."""

        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) or self.email

    def has_role(self, role: UserRole | str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role is UserRole.parse(role)

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(UserRole.ADMIN)
