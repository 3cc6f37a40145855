"""Wedding settings and timeline schemas."""
import datetime

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate, RecordCreate


class WeddingSettingsWrite(RecordCreate):
    """Create-or-update request for the wedding settings."""

    partner1_name: str | None = Field(None, max_length=255)
    partner2_name: str | None = Field(None, max_length=255)
    wedding_date: datetime.date | None = None
    venue_name: str | None = Field(None, max_length=255)
    venue_address: str | None = None
    theme: str | None = Field(None, max_length=255)
    notes: str | None = None
    profile_image_url: str | None = Field(None, max_length=500)

    def changes(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)


class WeddingSettingsResponse(CamelModel):
    """Stored wedding settings."""

    id: int
    user_id: int
    partner1_name: str | None = None
    partner2_name: str | None = None
    wedding_date: datetime.date | None = None
    venue_name: str | None = None
    venue_address: str | None = None
    theme: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None


class TimelineEventCreate(RecordCreate):
    """Request to add a timeline milestone."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    date: datetime.date | None = None
    months_before: int | None = Field(None, ge=0)
    completed: bool = False


class TimelineEventUpdate(PartialUpdate):
    """Partial timeline event update."""

    non_nullable = ("title", "completed")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    date: datetime.date | None = None
    months_before: int | None = Field(None, ge=0)
    completed: bool | None = None


class TimelineEventResponse(CamelModel):
    """Stored timeline event."""

    id: int
    user_id: int
    title: str
    description: str | None = None
    date: datetime.date | None = None
    months_before: int | None = None
    completed: bool = False
