"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from leaveflow.infrastructure.database import Base
from leaveflow.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for student and administrator notifications."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    # NULL for notifications addressed to every administrator.
    user_id = Column(String(64), ForeignKey("users.id"), nullable=True, index=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    kind = Column("type", String(20), nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    for_admin = Column(Boolean, nullable=False, default=False, index=True)
    related_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
