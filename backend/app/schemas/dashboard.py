"""Dashboard and timeline view schemas."""
import datetime
from typing import Literal

from app.schemas.common import CamelModel
from app.schemas.task import TaskResponse


class TaskProgress(CamelModel):
    total: int
    completed: int
    remaining: int
    percent_complete: int


class RsvpSummary(CamelModel):
    total: int
    confirmed: int
    declined: int
    pending: int
    plus_ones: int
    percent_responded: int


class BudgetSummary(CamelModel):
    total_estimated: float
    total_actual: float
    remaining: float  # Negative when over budget
    percent_spent: int


class DashboardResponse(CamelModel):
    """Figures shown on the dashboard."""

    wedding_date: datetime.date | None = None
    days_remaining: int
    tasks: TaskProgress
    rsvp: RsvpSummary
    budget: BudgetSummary
    upcoming_tasks: list[TaskResponse]
    priority_tasks: list[TaskResponse]


class TimelineEntry(CamelModel):
    """A dated task or timeline event positioned relative to the wedding."""

    source: Literal["task", "event"]
    id: int
    title: str
    description: str | None = None
    date: datetime.date | None = None
    months_before: int | None = None
    timeframe: str | None = None
    completed: bool = False


class TimelineViewResponse(CamelModel):
    wedding_date: datetime.date | None = None
    entries: list[TimelineEntry]
