"""Persistence helpers for leave requests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from leaveflow.domain.entities import LeaveRequest, LeaveStatus, LeaveType
from leaveflow.infrastructure.models import CommentModel, LeaveRequestModel
from leaveflow.utils import ensure_app_timezone

from .comment_repository import CommentRepository
from .user_repository import UserRepository


class LeaveRepository:
    """Provide CRUD operations for :class:`LeaveRequest` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, leave_id: int, *, with_comments: bool = True) -> LeaveRequest | None:
        query = self.session.query(LeaveRequestModel).filter(
            LeaveRequestModel.id == leave_id
        )
        if with_comments:
            query = query.options(
                selectinload(LeaveRequestModel.comments).joinedload(CommentModel.user)
            )
        model = query.first()
        return self._to_entity(model, with_comments=with_comments) if model else None

    def list_for_user(
        self, user_id: str, *, limit: int | None = None
    ) -> Sequence[LeaveRequest]:
        query = (
            self.session.query(LeaveRequestModel)
            .filter(LeaveRequestModel.user_id == user_id)
            .order_by(LeaveRequestModel.created_at.desc(), LeaveRequestModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_all(self) -> Sequence[LeaveRequest]:
        query = self.session.query(LeaveRequestModel).order_by(
            LeaveRequestModel.created_at.desc(), LeaveRequestModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def count_by_status(self, user_id: str) -> dict[LeaveStatus, int]:
        rows = (
            self.session.query(LeaveRequestModel.status, func.count(LeaveRequestModel.id))
            .filter(LeaveRequestModel.user_id == user_id)
            .group_by(LeaveRequestModel.status)
            .all()
        )
        counts = {status: 0 for status in LeaveStatus}
        for status, total in rows:
            counts[LeaveStatus(status)] = total
        return counts

    def create(self, leave: LeaveRequest) -> LeaveRequest:
        model = LeaveRequestModel(
            user_id=leave.user_id,
            leave_type=LeaveType(leave.leave_type).value,
            start_date=leave.start_date,
            end_date=leave.end_date,
            reason=leave.reason,
            contact_info=leave.contact_info,
            status=LeaveStatus(leave.status).value,
            documents=list(leave.documents or []),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, leave_id: int, status: LeaveStatus) -> LeaveRequest:
        model = self.session.get(LeaveRequestModel, leave_id)
        if model is None:
            msg = f"Leave request with id {leave_id} not found"
            raise ValueError(msg)
        model.status = LeaveStatus(status).value
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: LeaveRequestModel, *, with_comments: bool = False) -> LeaveRequest:
        leave = LeaveRequest(
            id=model.id,
            user_id=model.user_id,
            leave_type=LeaveType(model.leave_type),
            start_date=model.start_date,
            end_date=model.end_date,
            reason=model.reason,
            contact_info=model.contact_info,
            status=LeaveStatus(model.status),
            documents=list(model.documents or []),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            user=UserRepository._to_entity(model.user) if model.user else None,
        )
        if with_comments:
            leave.comments = [
                CommentRepository._to_entity(comment) for comment in model.comments
            ]
        return leave


__all__ = ["LeaveRepository"]
