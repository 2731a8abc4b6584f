"""Use case for withdrawing a pending leave request."""

from sqlalchemy.orm import Session

from leaveflow.domain.entities import LeaveRequest, LeaveStatus, User
from leaveflow.infrastructure.repositories import LeaveRepository

from .get_leave import load_leave
from .validators import ensure_owner, ensure_pending


def cancel_leave(session: Session, leave_id: int, *, user: User) -> LeaveRequest:
    leave = load_leave(session, leave_id)
    ensure_owner(leave, user, action="cancel")
    ensure_pending(leave, action="cancelled")
    return LeaveRepository(session).update_status(leave_id, LeaveStatus.CANCELLED)
