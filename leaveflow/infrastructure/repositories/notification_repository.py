"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from leaveflow.domain.entities import Notification, NotificationKind
from leaveflow.infrastructure.models import NotificationModel
from leaveflow.utils import ensure_app_timezone


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self, user_id: str, *, limit: int | None = 50
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        return self._ordered(query, limit)

    def list_for_admins(self, *, limit: int | None = 50) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id.is_(None))
            .filter(NotificationModel.for_admin.is_(True))
        )
        return self._ordered(query, limit)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            title=notification.title,
            message=notification.message,
            kind=NotificationKind(notification.kind).value,
            read=notification.read,
            for_admin=notification.for_admin,
            related_id=notification.related_id,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int) -> Notification:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        model.read = True
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_read_for_user(self, user_id: str) -> None:
        self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        ).update({NotificationModel.read: True}, synchronize_session=False)
        self.session.commit()

    def mark_all_read_for_admins(self) -> None:
        self.session.query(NotificationModel).filter(
            NotificationModel.user_id.is_(None),
            NotificationModel.for_admin.is_(True),
        ).update({NotificationModel.read: True}, synchronize_session=False)
        self.session.commit()

    def _ordered(self, query, limit: int | None) -> list[Notification]:
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            kind=NotificationKind(model.kind),
            read=model.read,
            for_admin=model.for_admin,
            related_id=model.related_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
