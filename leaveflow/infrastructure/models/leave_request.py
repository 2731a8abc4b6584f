"""SQLAlchemy model for leave requests."""

from sqlalchemy import JSON, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from leaveflow.infrastructure.database import Base
from leaveflow.utils import now_in_app_naive_datetime


class LeaveRequestModel(Base):
    """Database representation of a student leave request."""

    __tablename__ = "leaves"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    leave_type = Column("type", String(20), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    reason = Column(Text, nullable=False)
    contact_info = Column(String(120), nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)
    documents = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    user = relationship("UserModel", lazy="joined")
    comments = relationship(
        "CommentModel",
        back_populates="leave",
        order_by="CommentModel.created_at.desc()",
        cascade="all, delete-orphan",
    )


__all__ = ["LeaveRequestModel"]
