"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from leaveflow.domain.entities import NotificationKind


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: str | None
    title: str
    message: str
    kind: NotificationKind = Field(..., serialization_alias="type")
    read: bool
    for_admin: bool
    related_id: int | None = None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ConnectionStatsRead(BaseModel):
    count: int
