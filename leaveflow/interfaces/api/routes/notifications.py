"""Endpoints and Server-Sent Events stream for live notifications."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from leaveflow.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
)
from leaveflow.config import get_settings
from leaveflow.domain.entities import User
from leaveflow.infrastructure.database import SessionLocal, get_db
from leaveflow.infrastructure.notifications import EventDispatcher, SSEChannel
from leaveflow.interfaces.api.dependencies import (
    get_current_active_user,
    get_event_dispatcher,
    resolve_current_user,
)
from leaveflow.interfaces.api.routes_helpers import to_http_exception
from leaveflow.interfaces.api.schemas import MessageResponse, NotificationRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
}


def get_stream_user(token: str | None = Query(default=None)) -> User:
    """Authenticate an event stream through the ``token`` query parameter.

    Browsers' ``EventSource`` cannot send an ``Authorization`` header. The
    lookup uses its own short-lived session: a ``get_db`` session would stay
    checked out of the pool until the stream ends.
    """

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    with SessionLocal() as session:
        user = resolve_current_user(token, session)
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Inactive user")
    return user


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications_uc(db, current_user)
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/read/{notification_id}", response_model=NotificationRead)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = mark_notification_read(db, current_user, notification_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return NotificationRead.model_validate(notification)


@router.post("/read-all", response_model=MessageResponse)
def read_all_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    mark_all_notifications_read(db, current_user)
    return MessageResponse(message="All notifications marked as read")


@router.get("/events")
async def notification_events(
    current_user: User = Depends(get_stream_user),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
) -> StreamingResponse:
    """Open a live stream; the first frame is the ``{"connected": true}`` handshake."""

    settings = get_settings()
    channel = SSEChannel(max_pending=settings.sse_max_pending_frames)
    connection_id = dispatcher.open(current_user.id, current_user.role, channel)

    async def stream() -> AsyncIterator[str]:
        try:
            async for frame in channel.frames(settings.sse_heartbeat_seconds):
                yield frame
        except Exception:
            logger.exception("Event stream %s for user %s failed", connection_id, current_user.id)
            raise
        finally:
            channel.close()
            dispatcher.registry.remove(connection_id)
            logger.info("Event stream %s for user %s ended", connection_id, current_user.id)

    return StreamingResponse(
        stream(),
        media_type="text/event-stream",
        headers=STREAM_HEADERS,
    )
