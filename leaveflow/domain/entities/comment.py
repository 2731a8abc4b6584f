"""Domain entity representing a comment on a leave request."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .user import User


@dataclass
class Comment:
    """Message exchanged between a student and administrators."""

    id: int | None
    leave_id: int
    user_id: str
    content: str
    created_at: datetime | None = None
    user: User | None = None


__all__ = ["Comment"]
