"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from leaveflow.infrastructure.database import Base
from leaveflow.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a student or administrator."""

    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    first_name = Column(String(80), nullable=True)
    last_name = Column(String(80), nullable=True)
    profile_image_url = Column(String(500), nullable=True)
    role = Column(String(20), nullable=False, default="student")
    leave_balance = Column(Integer, nullable=False, default=20)
    roll_number = Column(String(40), nullable=True)
    branch = Column(String(80), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["UserModel"]
