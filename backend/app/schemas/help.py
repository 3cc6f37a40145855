"""Help center and upload schemas."""
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, RecordCreate


class HelpMessageCreate(RecordCreate):
    """Help center contact form."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class HelpMessageResponse(CamelModel):
    """Result of submitting a help message."""

    success: bool
    message: str
    email_sent: bool


class ImageUploadResponse(CamelModel):
    """Location of an uploaded image."""

    image_url: str
