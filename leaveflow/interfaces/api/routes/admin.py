"""Administrator routes: reviewing requests and managing live connections."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from leaveflow.application.use_cases.leaves import (
    approve_leave as approve_leave_uc,
    list_all_leaves,
    reject_leave as reject_leave_uc,
)
from leaveflow.application.use_cases.university_updates import create_update
from leaveflow.domain.entities import User
from leaveflow.infrastructure.database import get_db
from leaveflow.infrastructure.notifications import EventDispatcher, NotificationPublisher
from leaveflow.interfaces.api.dependencies import (
    get_event_dispatcher,
    get_notification_publisher,
    require_admin,
)
from leaveflow.interfaces.api.routes_helpers import to_http_exception
from leaveflow.interfaces.api.schemas import (
    ConnectionStatsRead,
    LeaveRead,
    UniversityUpdateCreate,
    UniversityUpdateRead,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/leaves", response_model=list[LeaveRead])
def list_leaves(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> list[LeaveRead]:
    return [LeaveRead.model_validate(leave) for leave in list_all_leaves(db, current_user)]


@router.post("/leaves/{leave_id}/approve", response_model=LeaveRead)
def approve_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> LeaveRead:
    try:
        leave = approve_leave_uc(db, publisher, leave_id, reviewer=current_user)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return LeaveRead.model_validate(leave)


@router.post("/leaves/{leave_id}/reject", response_model=LeaveRead)
def reject_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> LeaveRead:
    try:
        leave = reject_leave_uc(db, publisher, leave_id, reviewer=current_user)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return LeaveRead.model_validate(leave)


@router.post(
    "/updates",
    response_model=UniversityUpdateRead,
    status_code=status.HTTP_201_CREATED,
)
def publish_update(
    payload: UniversityUpdateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> UniversityUpdateRead:
    try:
        update = create_update(
            db,
            author=current_user,
            title=payload.title,
            content=payload.content,
            image_url=payload.image_url,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UniversityUpdateRead.model_validate(update)


@router.get("/connections", response_model=ConnectionStatsRead)
async def connection_stats(
    _: User = Depends(require_admin),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
) -> ConnectionStatsRead:
    return ConnectionStatsRead(count=dispatcher.registry.count())


@router.delete("/connections/{connection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def disconnect(
    connection_id: str,
    _: User = Depends(require_admin),
    dispatcher: EventDispatcher = Depends(get_event_dispatcher),
) -> Response:
    """Close a live notification stream.

    Declared async so the channel is closed on the event loop that drains it.
    """

    if not dispatcher.disconnect(connection_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Connection not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
