"""FastAPI dependency utilities."""

from hashlib import sha256

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from leaveflow.domain.entities import User
from leaveflow.infrastructure.database import get_db
from leaveflow.infrastructure.notifications import EventDispatcher, NotificationPublisher
from leaveflow.infrastructure.repositories import UserRepository
from leaveflow.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def password_signature(user: User) -> str:
    """Fingerprint embedded in tokens so password or status changes revoke them."""

    return sha256(f"{user.password}:{int(user.is_active)}".encode()).hexdigest()


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    user_id = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(user_id, str) or not isinstance(signature_claim, str):
        raise _credentials_exception()

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception("User not found")

    if signature_claim != password_signature(user):
        raise _credentials_exception()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized access",
        )
    return current_user


def get_event_dispatcher(request: Request) -> EventDispatcher:
    """Return the process-wide dispatcher created in ``create_app``."""

    return request.app.state.event_dispatcher


def get_notification_publisher(request: Request) -> NotificationPublisher:
    return request.app.state.notification_publisher
