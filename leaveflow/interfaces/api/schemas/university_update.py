"""Pydantic models describing university announcements."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UniversityUpdateCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    image_url: str | None = Field(default=None, max_length=500)


class UniversityUpdateRead(BaseModel):
    id: int
    title: str
    content: str
    image_url: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
