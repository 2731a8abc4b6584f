"""Domain entities representing user notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationKind(str, Enum):
    COMMENT = "comment"
    STATUS = "status"
    ALERT = "alert"


@dataclass
class Notification:
    """Persisted information message for a student or for all administrators.

    Admin notifications have no ``user_id`` and ``for_admin`` set.
    """

    id: int | None
    user_id: str | None
    title: str
    message: str
    kind: NotificationKind
    read: bool = False
    for_admin: bool = False
    related_id: int | None = None
    created_at: datetime | None = None

    def is_visible_to(self, user_id: str, *, is_admin: bool) -> bool:
        """Return ``True`` when ``user_id`` may read or update the notification."""

        if self.user_id == user_id:
            return True
        return self.for_admin and is_admin


@dataclass(frozen=True)
class Event:
    """Ephemeral payload pushed to live connections.

    Events are never stored by the delivery subsystem; the matching
    :class:`Notification` row is the durable copy.
    """

    title: str
    message: str
    kind: NotificationKind
    id: int | None = None
    related_id: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_notification(cls, notification: Notification) -> "Event":
        return cls(
            id=notification.id,
            title=notification.title,
            message=notification.message,
            kind=notification.kind,
            related_id=notification.related_id,
            created_at=notification.created_at,
        )


__all__ = ["Event", "Notification", "NotificationKind"]
