"""ORM models used by the application infrastructure."""

from .comment import CommentModel
from .leave_request import LeaveRequestModel
from .notification import NotificationModel
from .university_update import UniversityUpdateModel
from .user import UserModel

__all__ = [
    "CommentModel",
    "LeaveRequestModel",
    "NotificationModel",
    "UniversityUpdateModel",
    "UserModel",
]
