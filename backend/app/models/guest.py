"""Guest list model."""
from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, Text

from app.database import Base


class Guest(Base):
    """Invited guest and their RSVP."""

    __tablename__ = "guests"
    __table_args__ = (
        Index("ix_guests_user_rsvp", "user_id", "rsvp_status"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    phone = Column(String(50))
    rsvp_status = Column(String(20), default="pending")  # pending, confirmed, declined
    meal_preference = Column(String(100))
    plus_one = Column(Boolean, default=False)
    plus_one_name = Column(String(255))
    notes = Column(Text)
