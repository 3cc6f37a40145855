"""Task schemas."""
from datetime import date
from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate, RecordCreate

TaskPriority = Literal["low", "medium", "high"]


class TaskCreate(RecordCreate):
    """Request to add a checklist task."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    completed: bool = False
    due_date: date | None = None
    priority: TaskPriority = "medium"


class TaskUpdate(PartialUpdate):
    """Partial task update."""

    non_nullable = ("title", "completed", "priority")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    completed: bool | None = None
    due_date: date | None = None
    priority: TaskPriority | None = None


class TaskResponse(CamelModel):
    """Stored task."""

    id: int
    user_id: int
    title: str
    description: str | None = None
    completed: bool = False
    due_date: date | None = None
    priority: TaskPriority = "medium"
    created_at: str | None = None
