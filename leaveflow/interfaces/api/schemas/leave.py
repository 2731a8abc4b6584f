"""Pydantic models describing leave requests and their comments."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leaveflow.domain.entities import LeaveStatus, LeaveType

from .user import UserSummaryRead


class LeaveCreate(BaseModel):
    leave_type: LeaveType = Field(..., alias="type")
    start_date: date
    end_date: date
    reason: str = Field(..., min_length=1)
    contact_info: str = Field(..., min_length=1, max_length=120)

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _validate_range(self) -> "LeaveCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)


class CommentRead(BaseModel):
    id: int
    leave_id: int
    user_id: str
    content: str
    created_at: datetime | None
    user: UserSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class LeaveRead(BaseModel):
    id: int
    user_id: str
    leave_type: LeaveType = Field(..., serialization_alias="type")
    start_date: date
    end_date: date
    reason: str
    contact_info: str
    status: LeaveStatus
    duration: int
    documents: list[dict[str, str]] = Field(default_factory=list)
    created_at: datetime | None
    updated_at: datetime | None
    user: UserSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class LeaveDetailRead(LeaveRead):
    comments: list[CommentRead] = Field(default_factory=list)


class LeaveStatsRead(BaseModel):
    pending: int
    approved: int
    rejected: int
    balance: int
    balance_percentage: int

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    success: bool = True
    message: str | None = None
