"""Use case for asking administrators to review a pending request."""

from sqlalchemy.orm import Session

from leaveflow.application.use_cases.notifications import notify_leave_submitted
from leaveflow.domain.entities import LeaveRequest, User
from leaveflow.infrastructure.notifications import NotificationPublisher

from .get_leave import load_leave
from .validators import ensure_owner, ensure_pending


def submit_leave(
    session: Session,
    publisher: NotificationPublisher,
    leave_id: int,
    *,
    user: User,
) -> LeaveRequest:
    """Send a review reminder; the request stays ``pending``."""

    leave = load_leave(session, leave_id)
    ensure_owner(leave, user, action="submit")
    ensure_pending(leave, action="submitted for review")
    notify_leave_submitted(session, publisher, leave=leave, student=user)
    return leave
