"""Budget model."""
from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text

from app.database import Base


class BudgetCategory(Base):
    """Budget line with an estimate and the amount actually spent."""

    __tablename__ = "budget_categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    estimated_cost = Column(Float, default=0.0)
    actual_cost = Column(Float, default=0.0)
    notes = Column(Text)
