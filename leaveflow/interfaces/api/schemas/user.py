"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from leaveflow.domain.entities import UserRole


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str | None = Field(default=None, max_length=80)
    last_name: str | None = Field(default=None, max_length=80)
    roll_number: str | None = Field(default=None, max_length=40)
    branch: str | None = Field(default=None, max_length=80)


class ProfileUpdate(BaseModel):
    first_name: str | None = Field(default=None, max_length=80)
    last_name: str | None = Field(default=None, max_length=80)
    roll_number: str | None = Field(default=None, max_length=40)
    branch: str | None = Field(default=None, max_length=80)
    profile_image_url: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(extra="forbid")


class RoleUpdate(BaseModel):
    role: str = Field(..., description="Either 'student' or 'admin'")


class UserRead(BaseModel):
    id: str
    email: EmailStr
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    role: UserRole
    leave_balance: int
    roll_number: str | None
    branch: str | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class UserSummaryRead(BaseModel):
    id: str
    email: EmailStr
    first_name: str | None
    last_name: str | None
    role: UserRole

    model_config = ConfigDict(from_attributes=True)
