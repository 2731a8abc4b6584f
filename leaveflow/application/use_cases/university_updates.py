"""Use cases for university announcements."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from leaveflow.application.errors import PermissionDeniedError
from leaveflow.domain.entities import UniversityUpdate, User
from leaveflow.infrastructure.repositories import UniversityUpdateRepository


def list_updates(session: Session) -> Sequence[UniversityUpdate]:
    return UniversityUpdateRepository(session).list()


def create_update(
    session: Session,
    *,
    author: User,
    title: str,
    content: str,
    image_url: str | None = None,
) -> UniversityUpdate:
    if not author.is_admin():
        raise PermissionDeniedError("Unauthorized access")
    return UniversityUpdateRepository(session).create(
        UniversityUpdate(id=None, title=title, content=content, image_url=image_url)
    )
