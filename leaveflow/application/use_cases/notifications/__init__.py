"""Public helpers for emitting and reading domain notifications."""

from .events import (
    notify_comment_added,
    notify_leave_created,
    notify_leave_reviewed,
    notify_leave_submitted,
)
from .inbox import (
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_comment_added",
    "notify_leave_created",
    "notify_leave_reviewed",
    "notify_leave_submitted",
]
