"""Use cases backing the pull-based notification list."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from leaveflow.application.errors import NotFoundError, PermissionDeniedError
from leaveflow.domain.entities import Notification, User
from leaveflow.infrastructure.repositories import NotificationRepository


def list_notifications(session: Session, user: User) -> Sequence[Notification]:
    """Administrators see the shared admin inbox, students their own."""

    repository = NotificationRepository(session)
    if user.is_admin():
        return repository.list_for_admins()
    return repository.list_for_user(user.id)


def mark_notification_read(
    session: Session, user: User, notification_id: int
) -> Notification:
    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if not notification.is_visible_to(user.id, is_admin=user.is_admin()):
        raise PermissionDeniedError("Unauthorized to update this notification")
    return repository.mark_as_read(notification_id)


def mark_all_notifications_read(session: Session, user: User) -> None:
    repository = NotificationRepository(session)
    if user.is_admin():
        repository.mark_all_read_for_admins()
    else:
        repository.mark_all_read_for_user(user.id)
