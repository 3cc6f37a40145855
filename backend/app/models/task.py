"""Checklist task model."""
from datetime import datetime

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String, Text

from app.database import Base


class Task(Base):
    """Item on the wedding checklist."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_user_due", "user_id", "due_date"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    completed = Column(Boolean, default=False)
    due_date = Column(String(10))  # YYYY-MM-DD
    priority = Column(String(10), default="medium")  # low, medium, high
    created_at = Column(String(26), default=lambda: datetime.utcnow().isoformat())
