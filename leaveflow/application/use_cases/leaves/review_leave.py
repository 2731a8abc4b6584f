"""Use cases for approving or rejecting leave requests."""

import logging

from sqlalchemy.orm import Session

from leaveflow.application.use_cases.notifications import notify_leave_reviewed
from leaveflow.domain.entities import LeaveRequest, LeaveStatus, User
from leaveflow.infrastructure.notifications import NotificationPublisher
from leaveflow.infrastructure.repositories import LeaveRepository

from .get_leave import load_leave
from .validators import ensure_admin, ensure_pending

logger = logging.getLogger(__name__)


def _review(
    session: Session,
    publisher: NotificationPublisher,
    leave_id: int,
    *,
    reviewer: User,
    status: LeaveStatus,
    action: str,
) -> LeaveRequest:
    ensure_admin(reviewer)
    leave = load_leave(session, leave_id)
    ensure_pending(leave, action=action)

    updated = LeaveRepository(session).update_status(leave_id, status)
    logger.info("Leave request %s %s by %s", leave_id, status.value, reviewer.id)
    notify_leave_reviewed(session, publisher, leave=updated)
    return updated


def approve_leave(
    session: Session, publisher: NotificationPublisher, leave_id: int, *, reviewer: User
) -> LeaveRequest:
    return _review(
        session,
        publisher,
        leave_id,
        reviewer=reviewer,
        status=LeaveStatus.APPROVED,
        action="approved",
    )


def reject_leave(
    session: Session, publisher: NotificationPublisher, leave_id: int, *, reviewer: User
) -> LeaveRequest:
    return _review(
        session,
        publisher,
        leave_id,
        reviewer=reviewer,
        status=LeaveStatus.REJECTED,
        action="rejected",
    )
