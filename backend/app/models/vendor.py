"""Vendor model."""
from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.database import Base


class Vendor(Base):
    """Vendor contact in the directory."""

    __tablename__ = "vendors"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)  # Free text: florist, caterer, ...
    contact_name = Column(String(255))
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(500))
    contract_link = Column(String(500))
    notes = Column(Text)
