"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from leaveflow.application.errors import NotFoundError
from leaveflow.domain.entities import User
from leaveflow.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: str, *, include_inactive: bool = False) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    if not include_inactive and not user.is_active:
        raise NotFoundError("User is inactive")
    return user
