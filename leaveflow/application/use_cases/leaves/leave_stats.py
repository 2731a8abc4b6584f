"""Use case summarising a student's leave usage."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from leaveflow.domain.entities import LeaveStatus, User
from leaveflow.infrastructure.repositories import LeaveRepository


@dataclass(frozen=True)
class LeaveStats:
    pending: int
    approved: int
    rejected: int
    balance: int
    balance_percentage: int


def compute_leave_stats(session: Session, user: User) -> LeaveStats:
    """Count requests by status and derive the remaining day balance.

    Used days are the inclusive durations of approved requests. The balance
    never goes below zero.
    """

    repository = LeaveRepository(session)
    counts = repository.count_by_status(user.id)
    used_days = sum(
        leave.duration
        for leave in repository.list_for_user(user.id)
        if leave.status is LeaveStatus.APPROVED
    )
    total = user.leave_balance
    remaining = max(0, total - used_days)
    percentage = round(remaining / total * 100) if total else 0
    return LeaveStats(
        pending=counts[LeaveStatus.PENDING],
        approved=counts[LeaveStatus.APPROVED],
        rejected=counts[LeaveStatus.REJECTED],
        balance=remaining,
        balance_percentage=percentage,
    )
