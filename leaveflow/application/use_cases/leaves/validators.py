"""Shared checks for leave request use cases."""

from __future__ import annotations

from datetime import date

from leaveflow.application.errors import InvalidStateError, PermissionDeniedError
from leaveflow.domain.entities import LeaveRequest, User


def ensure_date_range(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise ValueError("End date must be on or after the start date")


def ensure_can_view(leave: LeaveRequest, user: User, *, action: str = "access") -> None:
    if leave.user_id != user.id and not user.is_admin():
        raise PermissionDeniedError(f"Unauthorized to {action} this leave request")


def ensure_owner(leave: LeaveRequest, user: User, *, action: str) -> None:
    if leave.user_id != user.id:
        raise PermissionDeniedError(f"Unauthorized to {action} this leave request")


def ensure_admin(user: User) -> None:
    if not user.is_admin():
        raise PermissionDeniedError("Unauthorized access")


def ensure_pending(leave: LeaveRequest, *, action: str) -> None:
    if not leave.is_pending:
        raise InvalidStateError(f"Only pending leave requests can be {action}")
