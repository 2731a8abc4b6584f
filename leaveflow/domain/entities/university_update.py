"""Domain entity representing a university announcement."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UniversityUpdate:
    id: int | None
    title: str
    content: str
    image_url: str | None = None
    created_at: datetime | None = None


__all__ = ["UniversityUpdate"]
