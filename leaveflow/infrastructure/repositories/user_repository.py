"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from leaveflow.domain.entities import User, UserRole
from leaveflow.infrastructure.models import UserModel
from leaveflow.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .order_by(UserModel.created_at.asc())
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(id=user.id or uuid4().hex)
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id) if user.id else None
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            first_name=model.first_name,
            last_name=model.last_name,
            role=UserRole.parse(model.role),
            leave_balance=model.leave_balance,
            profile_image_url=model.profile_image_url,
            roll_number=model.roll_number,
            branch=model.branch,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields and user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        model.email = user.email.strip().lower()
        model.password = user.password
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.role = UserRole.parse(user.role).value
        model.leave_balance = user.leave_balance
        model.profile_image_url = user.profile_image_url
        model.roll_number = user.roll_number
        model.branch = user.branch
        model.is_active = user.is_active


__all__ = ["UserRepository"]
