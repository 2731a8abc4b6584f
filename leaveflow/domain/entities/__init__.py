"""Domain entities exposed by the application."""

from .comment import Comment
from .leave_request import LeaveRequest, LeaveStatus, LeaveType
from .notification import Event, Notification, NotificationKind
from .role import UserRole
from .university_update import UniversityUpdate
from .user import User

__all__ = [
    "Comment",
    "Event",
    "LeaveRequest",
    "LeaveStatus",
    "LeaveType",
    "Notification",
    "NotificationKind",
    "UniversityUpdate",
    "User",
    "UserRole",
]
