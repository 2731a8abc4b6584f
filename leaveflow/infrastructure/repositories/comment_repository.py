"""Persistence helpers for leave request comments."""

from __future__ import annotations

from sqlalchemy.orm import Session

from leaveflow.domain.entities import Comment
from leaveflow.infrastructure.models import CommentModel
from leaveflow.utils import ensure_app_timezone

from .user_repository import UserRepository


class CommentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            leave_id=comment.leave_id,
            user_id=comment.user_id,
            content=comment.content,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            leave_id=model.leave_id,
            user_id=model.user_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
            user=UserRepository._to_entity(model.user) if model.user else None,
        )


__all__ = ["CommentRepository"]
