"""Use cases listing leave requests."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from leaveflow.domain.entities import LeaveRequest, User
from leaveflow.infrastructure.repositories import LeaveRepository

from .validators import ensure_admin

RECENT_LIMIT = 5


def list_leaves(session: Session, user: User) -> Sequence[LeaveRequest]:
    return LeaveRepository(session).list_for_user(user.id)


def list_recent_leaves(
    session: Session, user: User, *, limit: int = RECENT_LIMIT
) -> Sequence[LeaveRequest]:
    return LeaveRepository(session).list_for_user(user.id, limit=limit)


def list_all_leaves(session: Session, user: User) -> Sequence[LeaveRequest]:
    """Every request in the system, newest first. Administrators only."""

    ensure_admin(user)
    return LeaveRepository(session).list_all()
