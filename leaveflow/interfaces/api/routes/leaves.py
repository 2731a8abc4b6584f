"""Routes for students filing, tracking and discussing leave requests."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from leaveflow.application.use_cases.leaves import (
    add_comment as add_comment_uc,
    cancel_leave as cancel_leave_uc,
    compute_leave_stats,
    create_leave as create_leave_uc,
    get_leave as get_leave_uc,
    list_leaves as list_leaves_uc,
    list_recent_leaves,
    submit_leave as submit_leave_uc,
)
from leaveflow.domain.entities import User
from leaveflow.infrastructure.database import get_db
from leaveflow.infrastructure.notifications import NotificationPublisher
from leaveflow.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_publisher,
)
from leaveflow.interfaces.api.routes_helpers import to_http_exception
from leaveflow.interfaces.api.schemas import (
    CommentCreate,
    CommentRead,
    LeaveCreate,
    LeaveDetailRead,
    LeaveRead,
    LeaveStatsRead,
    MessageResponse,
)

router = APIRouter(prefix="/leaves", tags=["leaves"])


@router.get("", response_model=list[LeaveRead])
def list_leaves(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[LeaveRead]:
    return [LeaveRead.model_validate(leave) for leave in list_leaves_uc(db, current_user)]


@router.get("/recent", response_model=list[LeaveRead])
def recent_leaves(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[LeaveRead]:
    return [LeaveRead.model_validate(leave) for leave in list_recent_leaves(db, current_user)]


@router.get("/stats", response_model=LeaveStatsRead)
def leave_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> LeaveStatsRead:
    return LeaveStatsRead.model_validate(compute_leave_stats(db, current_user))


@router.get("/{leave_id}", response_model=LeaveDetailRead)
def read_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> LeaveDetailRead:
    try:
        leave = get_leave_uc(db, leave_id, user=current_user)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return LeaveDetailRead.model_validate(leave)


@router.post("", response_model=LeaveRead, status_code=status.HTTP_201_CREATED)
def create_leave(
    payload: LeaveCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> LeaveRead:
    """File a pending request; administrators are notified."""

    try:
        leave = create_leave_uc(
            db,
            publisher,
            user=current_user,
            leave_type=payload.leave_type,
            start_date=payload.start_date,
            end_date=payload.end_date,
            reason=payload.reason,
            contact_info=payload.contact_info,
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return LeaveRead.model_validate(leave)


@router.post("/{leave_id}/cancel", response_model=LeaveRead)
def cancel_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> LeaveRead:
    try:
        leave = cancel_leave_uc(db, leave_id, user=current_user)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return LeaveRead.model_validate(leave)


@router.post("/{leave_id}/submit", response_model=MessageResponse)
def submit_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> MessageResponse:
    try:
        submit_leave_uc(db, publisher, leave_id, user=current_user)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MessageResponse(message="Leave request submitted to admin for review")


@router.post(
    "/{leave_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    leave_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> CommentRead:
    try:
        comment = add_comment_uc(
            db, publisher, leave_id, author=current_user, content=payload.content
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return CommentRead.model_validate(comment)
