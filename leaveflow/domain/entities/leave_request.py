"""Domain entity representing a student leave request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User


class LeaveType(str, Enum):
    SICK = "sick"
    VACATION = "vacation"
    PERSONAL = "personal"
    ACADEMIC = "academic"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


@dataclass
class LeaveRequest:
    """Absence requested by a student and reviewed by an administrator."""

    id: int | None
    user_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    contact_info: str
    status: LeaveStatus = LeaveStatus.PENDING
    documents: list[dict[str, str]] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: User | None = None
    comments: list[Comment] = field(default_factory=list)

    @property
    def duration(self) -> int:
        """Number of calendar days covered, both ends included."""

        return (self.end_date - self.start_date).days + 1

    @property
    def is_pending(self) -> bool:
        return self.status is LeaveStatus.PENDING


__all__ = ["LeaveRequest", "LeaveStatus", "LeaveType"]
