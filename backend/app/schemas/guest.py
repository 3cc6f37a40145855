"""Guest list schemas."""
from typing import Literal

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate, RecordCreate

RsvpStatus = Literal["pending", "confirmed", "declined"]


class GuestCreate(RecordCreate):
    """Request to add a guest."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str | None = None
    phone: str | None = None
    rsvp_status: RsvpStatus = "pending"
    meal_preference: str | None = None
    plus_one: bool = False
    plus_one_name: str | None = None
    notes: str | None = None


class GuestUpdate(PartialUpdate):
    """Partial guest update, e.g. an RSVP change."""

    non_nullable = ("name", "rsvp_status", "plus_one")

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = None
    phone: str | None = None
    rsvp_status: RsvpStatus | None = None
    meal_preference: str | None = None
    plus_one: bool | None = None
    plus_one_name: str | None = None
    notes: str | None = None


class GuestResponse(CamelModel):
    """Stored guest."""

    id: int
    user_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    rsvp_status: RsvpStatus = "pending"
    meal_preference: str | None = None
    plus_one: bool = False
    plus_one_name: str | None = None
    notes: str | None = None
