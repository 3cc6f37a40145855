"""Vendor schemas."""
from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate, RecordCreate


class VendorCreate(RecordCreate):
    """Request to add a vendor."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    contract_link: str | None = None
    notes: str | None = None


class VendorUpdate(PartialUpdate):
    """Partial vendor update."""

    non_nullable = ("name", "category")

    name: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = Field(None, min_length=1, max_length=100)
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    contract_link: str | None = None
    notes: str | None = None


class VendorResponse(CamelModel):
    """Stored vendor."""

    id: int
    user_id: int
    name: str
    category: str
    contact_name: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    contract_link: str | None = None
    notes: str | None = None
