"""Routes for registering users and managing profiles and roles."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from leaveflow.application.use_cases.users import (
    create_user as create_user_uc,
    update_profile as update_profile_uc,
    update_role as update_role_uc,
)
from leaveflow.domain.entities import User
from leaveflow.infrastructure.database import get_db
from leaveflow.interfaces.api.dependencies import get_current_active_user
from leaveflow.interfaces.api.routes_helpers import to_http_exception
from leaveflow.interfaces.api.schemas import ProfileUpdate, RoleUpdate, UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    """Create a student account."""

    try:
        user = create_user_uc(
            db,
            email=user_in.email,
            password=user_in.password,
            first_name=user_in.first_name,
            last_name=user_in.last_name,
            roll_number=user_in.roll_number,
            branch=user_in.branch,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UserRead.model_validate(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.patch("/profile", response_model=UserRead)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UserRead:
    try:
        user = update_profile_uc(db, current_user, payload.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)


@router.patch("/{user_id}/role", response_model=UserRead)
def update_role(
    user_id: str,
    payload: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UserRead:
    """Change a role; applies to notification streams opened afterwards."""

    try:
        user = update_role_uc(
            db, acting_user=current_user, target_user_id=user_id, role=payload.role
        )
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)
