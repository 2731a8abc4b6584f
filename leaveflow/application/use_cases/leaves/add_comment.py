"""Use case for commenting on a leave request."""

from sqlalchemy.orm import Session

from leaveflow.application.use_cases.notifications import notify_comment_added
from leaveflow.domain.entities import Comment, User
from leaveflow.infrastructure.notifications import NotificationPublisher
from leaveflow.infrastructure.repositories import CommentRepository

from .get_leave import load_leave
from .validators import ensure_can_view


def add_comment(
    session: Session,
    publisher: NotificationPublisher,
    leave_id: int,
    *,
    author: User,
    content: str,
) -> Comment:
    content = content.strip()
    if not content:
        raise ValueError("Comment cannot be empty")

    leave = load_leave(session, leave_id)
    ensure_can_view(leave, author, action="comment on")

    comment = CommentRepository(session).create(
        Comment(id=None, leave_id=leave_id, user_id=author.id, content=content)
    )
    notify_comment_added(session, publisher, leave=leave, comment=comment, author=author)
    return comment
