"""Persistence helpers for university announcements."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from leaveflow.domain.entities import UniversityUpdate
from leaveflow.infrastructure.models import UniversityUpdateModel
from leaveflow.utils import ensure_app_timezone


class UniversityUpdateRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[UniversityUpdate]:
        query = self.session.query(UniversityUpdateModel).order_by(
            UniversityUpdateModel.created_at.desc(), UniversityUpdateModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, update: UniversityUpdate) -> UniversityUpdate:
        model = UniversityUpdateModel(
            title=update.title,
            content=update.content,
            image_url=update.image_url,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UniversityUpdateModel) -> UniversityUpdate:
        return UniversityUpdate(
            id=model.id,
            title=model.title,
            content=model.content,
            image_url=model.image_url,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UniversityUpdateRepository"]
