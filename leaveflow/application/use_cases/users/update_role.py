"""Use case for changing the role of a user."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from leaveflow.application.errors import PermissionDeniedError
from leaveflow.domain.entities import User, UserRole
from leaveflow.infrastructure.repositories import UserRepository

from .get_user import get_user

logger = logging.getLogger(__name__)


def update_role(
    session: Session,
    *,
    acting_user: User,
    target_user_id: str,
    role: UserRole | str,
) -> User:
    """Assign ``role`` to ``target_user_id``.

    Users may change their own role (self-service promotion for demos); only
    administrators may change somebody else's. Live event streams keep the
    role they were opened with, so the new role applies to streams opened
    after this call.
    """

    if target_user_id != acting_user.id and not acting_user.is_admin():
        raise PermissionDeniedError("Permission denied")

    try:
        new_role = UserRole.parse(role)
    except ValueError as exc:
        raise ValueError("Invalid role") from exc
    target = get_user(session, target_user_id, include_inactive=True)
    if target.role is new_role:
        return target

    updated = UserRepository(session).update(replace(target, role=new_role))
    logger.info(
        "User %s changed role of %s from %s to %s",
        acting_user.id,
        target.id,
        target.role.value,
        new_role.value,
    )
    return updated
