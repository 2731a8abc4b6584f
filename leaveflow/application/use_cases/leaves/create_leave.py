"""Use case for filing a new leave request."""

from datetime import date

from sqlalchemy.orm import Session

from leaveflow.application.use_cases.notifications import notify_leave_created
from leaveflow.domain.entities import LeaveRequest, LeaveStatus, LeaveType, User
from leaveflow.infrastructure.notifications import NotificationPublisher
from leaveflow.infrastructure.repositories import LeaveRepository

from .validators import ensure_date_range


def create_leave(
    session: Session,
    publisher: NotificationPublisher,
    *,
    user: User,
    leave_type: LeaveType | str,
    start_date: date,
    end_date: date,
    reason: str,
    contact_info: str,
) -> LeaveRequest:
    """Persist a pending request for ``user`` and alert the administrators."""

    ensure_date_range(start_date, end_date)
    leave = LeaveRepository(session).create(
        LeaveRequest(
            id=None,
            user_id=user.id,
            leave_type=LeaveType(leave_type),
            start_date=start_date,
            end_date=end_date,
            reason=reason.strip(),
            contact_info=contact_info.strip(),
            status=LeaveStatus.PENDING,
        )
    )
    notify_leave_created(session, publisher, leave=leave, student=user)
    return leave
