"""User model."""
from datetime import datetime

from sqlalchemy import Column, Integer, String

from app.database import Base


class User(Base):
    """User account."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(String(26), default=lambda: datetime.utcnow().isoformat())
