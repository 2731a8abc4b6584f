"""Utility helpers to generate and dispatch domain notifications.

Every helper persists the notification first and only then pushes it live, so
a client that misses the push still finds it in its notification list.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from leaveflow.domain.entities import (
    Comment,
    LeaveRequest,
    LeaveStatus,
    Notification,
    NotificationKind,
    User,
)
from leaveflow.infrastructure.notifications import NotificationPublisher
from leaveflow.infrastructure.repositories import NotificationRepository


def _persist_for_user(
    session: Session,
    publisher: NotificationPublisher,
    *,
    user_id: str,
    title: str,
    message: str,
    kind: NotificationKind,
    related_id: int | None,
) -> Notification:
    saved = NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=user_id,
            title=title,
            message=message,
            kind=kind,
            for_admin=False,
            related_id=related_id,
        )
    )
    publisher.to_user(user_id, saved)
    return saved


def _persist_for_admins(
    session: Session,
    publisher: NotificationPublisher,
    *,
    title: str,
    message: str,
    kind: NotificationKind,
    related_id: int | None,
) -> Notification:
    saved = NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=None,
            title=title,
            message=message,
            kind=kind,
            for_admin=True,
            related_id=related_id,
        )
    )
    publisher.to_admins(saved)
    return saved


def notify_leave_created(
    session: Session,
    publisher: NotificationPublisher,
    *,
    leave: LeaveRequest,
    student: User,
) -> Notification:
    """Tell administrators that ``student`` filed a new request."""

    return _persist_for_admins(
        session,
        publisher,
        title="New Leave Request",
        message=(
            f"{student.full_name} submitted a {leave.leave_type.value} leave request"
        ),
        kind=NotificationKind.COMMENT,
        related_id=leave.id,
    )


def notify_leave_submitted(
    session: Session,
    publisher: NotificationPublisher,
    *,
    leave: LeaveRequest,
    student: User,
) -> Notification:
    """Ask administrators to review a pending request."""

    return _persist_for_admins(
        session,
        publisher,
        title="Leave Request Submitted",
        message=(
            f"{student.full_name} has submitted a {leave.leave_type.value} "
            "leave request for review"
        ),
        kind=NotificationKind.ALERT,
        related_id=leave.id,
    )


def notify_leave_reviewed(
    session: Session,
    publisher: NotificationPublisher,
    *,
    leave: LeaveRequest,
) -> Notification:
    """Inform the student that ``leave`` was approved or rejected."""

    if leave.status is LeaveStatus.APPROVED:
        title, kind = "Leave Request Approved", NotificationKind.STATUS
    elif leave.status is LeaveStatus.REJECTED:
        title, kind = "Leave Request Rejected", NotificationKind.ALERT
    else:
        raise ValueError(f"Leave request {leave.id} has not been reviewed")

    return _persist_for_user(
        session,
        publisher,
        user_id=leave.user_id,
        title=title,
        message=f"Your {leave.leave_type.value} leave request has been {leave.status.value}",
        kind=kind,
        related_id=leave.id,
    )


def notify_comment_added(
    session: Session,
    publisher: NotificationPublisher,
    *,
    leave: LeaveRequest,
    comment: Comment,
    author: User,
) -> Notification:
    """Route a comment notification to the other side of the conversation.

    Comments by the request owner go to the administrators; comments by an
    administrator go to the owner.
    """

    message = f"{author.full_name} commented on your leave request"
    if comment.user_id == leave.user_id:
        return _persist_for_admins(
            session,
            publisher,
            title="New Comment",
            message=message,
            kind=NotificationKind.COMMENT,
            related_id=leave.id,
        )
    return _persist_for_user(
        session,
        publisher,
        user_id=leave.user_id,
        title="New Comment",
        message=message,
        kind=NotificationKind.COMMENT,
        related_id=leave.id,
    )
