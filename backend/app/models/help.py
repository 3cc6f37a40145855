"""Help center model."""
from datetime import datetime

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.database import Base


class HelpMessage(Base):
    """Message sent through the help center form."""

    __tablename__ = "help_messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(String(26), default=lambda: datetime.utcnow().isoformat())
