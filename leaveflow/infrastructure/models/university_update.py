"""SQLAlchemy model for university announcements."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from leaveflow.infrastructure.database import Base
from leaveflow.utils import now_in_app_naive_datetime


class UniversityUpdateModel(Base):
    __tablename__ = "updates"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UniversityUpdateModel"]
