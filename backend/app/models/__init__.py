"""SQLAlchemy models package."""
from app.models.user import User
from app.models.wedding import TimelineEvent, WeddingSettings
from app.models.task import Task
from app.models.budget import BudgetCategory
from app.models.vendor import Vendor
from app.models.guest import Guest
from app.models.help import HelpMessage

__all__ = [
    "User",
    "WeddingSettings",
    "TimelineEvent",
    "Task",
    "BudgetCategory",
    "Vendor",
    "Guest",
    "HelpMessage",
]
