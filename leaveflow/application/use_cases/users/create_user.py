"""Use case for creating users."""

from sqlalchemy.orm import Session

from leaveflow.config import get_settings
from leaveflow.domain.entities import User, UserRole
from leaveflow.infrastructure.repositories import UserRepository
from leaveflow.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
    role: UserRole | str = UserRole.STUDENT,
    roll_number: str | None = None,
    branch: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    user = User(
        id=None,
        email=email,
        password=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        role=UserRole.parse(role),
        leave_balance=get_settings().default_leave_balance,
        roll_number=roll_number,
        branch=branch,
        is_active=True,
    )
    return repository.create(user)
