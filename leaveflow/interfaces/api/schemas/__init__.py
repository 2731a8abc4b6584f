from .auth import Token
from .leave import (
    CommentCreate,
    CommentRead,
    LeaveCreate,
    LeaveDetailRead,
    LeaveRead,
    LeaveStatsRead,
    MessageResponse,
)
from .notification import ConnectionStatsRead, NotificationRead
from .university_update import UniversityUpdateCreate, UniversityUpdateRead
from .user import ProfileUpdate, RoleUpdate, UserCreate, UserRead, UserSummaryRead

__all__ = [
    "CommentCreate",
    "CommentRead",
    "ConnectionStatsRead",
    "LeaveCreate",
    "LeaveDetailRead",
    "LeaveRead",
    "LeaveStatsRead",
    "MessageResponse",
    "NotificationRead",
    "ProfileUpdate",
    "RoleUpdate",
    "Token",
    "UniversityUpdateCreate",
    "UniversityUpdateRead",
    "UserCreate",
    "UserRead",
    "UserSummaryRead",
]
