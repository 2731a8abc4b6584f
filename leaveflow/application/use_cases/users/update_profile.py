"""Use case for editing the caller's own profile fields."""

from dataclasses import replace

from sqlalchemy.orm import Session

from leaveflow.domain.entities import User
from leaveflow.infrastructure.repositories import UserRepository

PROFILE_FIELDS = frozenset(
    {"first_name", "last_name", "roll_number", "branch", "profile_image_url"}
)


def update_profile(session: Session, user: User, changes: dict[str, object]) -> User:
    """Apply ``changes`` restricted to :data:`PROFILE_FIELDS` and persist them."""

    unknown = set(changes) - PROFILE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
    if not changes:
        return user
    return UserRepository(session).update(replace(user, **changes))
