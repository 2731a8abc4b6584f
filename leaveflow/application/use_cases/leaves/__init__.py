"""Use cases for student leave requests."""

from .add_comment import add_comment
from .cancel_leave import cancel_leave
from .create_leave import create_leave
from .get_leave import get_leave
from .leave_stats import LeaveStats, compute_leave_stats
from .list_leaves import list_all_leaves, list_leaves, list_recent_leaves
from .review_leave import approve_leave, reject_leave
from .submit_leave import submit_leave

__all__ = [
    "LeaveStats",
    "add_comment",
    "approve_leave",
    "cancel_leave",
    "compute_leave_stats",
    "create_leave",
    "get_leave",
    "list_all_leaves",
    "list_leaves",
    "list_recent_leaves",
    "reject_leave",
    "submit_leave",
]
