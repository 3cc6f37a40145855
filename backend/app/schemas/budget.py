"""Budget schemas."""
from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate, RecordCreate


class BudgetCategoryCreate(RecordCreate):
    """Request to add a budget category."""

    name: str = Field(..., min_length=1, max_length=255)
    estimated_cost: float = Field(0, ge=0)
    actual_cost: float = Field(0, ge=0)
    notes: str | None = None


class BudgetCategoryUpdate(PartialUpdate):
    """Partial budget category update."""

    non_nullable = ("name", "estimated_cost", "actual_cost")

    name: str | None = Field(None, min_length=1, max_length=255)
    estimated_cost: float | None = Field(None, ge=0)
    actual_cost: float | None = Field(None, ge=0)
    notes: str | None = None


class BudgetCategoryResponse(CamelModel):
    """Stored budget category."""

    id: int
    user_id: int
    name: str
    estimated_cost: float = 0
    actual_cost: float = 0
    notes: str | None = None
