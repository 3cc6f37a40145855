"""Wedding settings and timeline models."""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text

from app.database import Base


class WeddingSettings(Base):
    """The single settings record describing a user's wedding."""

    __tablename__ = "wedding_settings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    partner1_name = Column(String(255))
    partner2_name = Column(String(255))
    wedding_date = Column(String(10))  # YYYY-MM-DD
    venue_name = Column(String(255))
    venue_address = Column(Text)
    theme = Column(String(255))
    notes = Column(Text)
    profile_image_url = Column(String(500))


class TimelineEvent(Base):
    """Milestone on the planning timeline, pinned to a date or to N months before the wedding."""

    __tablename__ = "timeline_events"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    date = Column(String(10))  # YYYY-MM-DD
    months_before = Column(Integer)
    completed = Column(Boolean, default=False)
