"""SQLAlchemy model for leave request comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from leaveflow.infrastructure.database import Base
from leaveflow.utils import now_in_app_naive_datetime


class CommentModel(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    leave_id = Column(Integer, ForeignKey("leaves.id"), nullable=False, index=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    leave = relationship("LeaveRequestModel", back_populates="comments")
    user = relationship("UserModel", lazy="joined")


__all__ = ["CommentModel"]
