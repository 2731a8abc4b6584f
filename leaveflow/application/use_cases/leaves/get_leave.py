"""Use case for retrieving a single leave request."""

from sqlalchemy.orm import Session

from leaveflow.application.errors import NotFoundError
from leaveflow.domain.entities import LeaveRequest, User
from leaveflow.infrastructure.repositories import LeaveRepository

from .validators import ensure_can_view


def load_leave(session: Session, leave_id: int) -> LeaveRequest:
    leave = LeaveRepository(session).get(leave_id)
    if leave is None:
        raise NotFoundError("Leave request not found")
    return leave


def get_leave(session: Session, leave_id: int, *, user: User) -> LeaveRequest:
    """Return the request with its comments when ``user`` owns it or is an admin."""

    leave = load_leave(session, leave_id)
    ensure_can_view(leave, user)
    return leave
