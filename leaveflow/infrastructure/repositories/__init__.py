"""Repository implementations for infrastructure layer."""

from .comment_repository import CommentRepository
from .leave_repository import LeaveRepository
from .notification_repository import NotificationRepository
from .university_update_repository import UniversityUpdateRepository
from .user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "LeaveRepository",
    "NotificationRepository",
    "UniversityUpdateRepository",
    "UserRepository",
]
