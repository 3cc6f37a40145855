"""Dict-backed storage, used for development and tests."""
from datetime import datetime
import itertools

from app.database import Base
from app.models import (
    BudgetCategory,
    Guest,
    HelpMessage,
    Task,
    TimelineEvent,
    User,
    Vendor,
    WeddingSettings,
)
from app.storage.base import (
    OwnedCollection,
    Record,
    SingletonCollection,
    Storage,
    UserCollection,
)


def _scalar_defaults(model: type[Base]) -> Record:
    """Column defaults of ``model``, so records match the SQL backend's shape."""
    defaults: Record = {}
    for column in model.__table__.columns:
        default = column.default
        defaults[column.key] = default.arg if default is not None and default.is_scalar else None
    return defaults


class MemoryCollection(OwnedCollection, SingletonCollection):
    """All operations for one entity kind, held in a dict keyed by id."""

    def __init__(self, model: type[Base]):
        self.kind = model.__name__
        self._defaults = _scalar_defaults(model)
        self._records: dict[int, Record] = {}
        # Ids are never reused, even after deletes
        self._ids = itertools.count(1)

    def _fields(self, data: Record) -> Record:
        return {key: value for key, value in data.items() if key in self._defaults and key != "id"}

    async def list(self, user_id: int) -> list[Record]:
        return [dict(r) for r in self._records.values() if r["user_id"] == user_id]

    async def get(self, record_id: int) -> Record | None:
        record = self._records.get(record_id)
        return dict(record) if record is not None else None

    async def get_by_user(self, user_id: int) -> Record | None:
        for record in self._records.values():
            if record["user_id"] == user_id:
                return dict(record)
        return None

    async def create(self, data: Record) -> Record:
        record = {**self._defaults, **self._fields(data), "id": next(self._ids)}
        if "created_at" in self._defaults and not record.get("created_at"):
            record["created_at"] = datetime.utcnow().isoformat()
        self._records[record["id"]] = record
        return dict(record)

    async def update(self, record_id: int, partial: Record) -> Record | None:
        existing = self._records.get(record_id)
        if existing is None:
            return None
        existing.update(self._fields(partial))
        return dict(existing)

    async def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None


class MemoryUserCollection(MemoryCollection, UserCollection):
    """Users held in memory."""

    def __init__(self):
        super().__init__(User)

    async def _find(self, field: str, value: str) -> Record | None:
        for record in self._records.values():
            if record[field] == value:
                return dict(record)
        return None

    async def get_by_username(self, username: str) -> Record | None:
        return await self._find("username", username)

    async def get_by_email(self, email: str) -> Record | None:
        return await self._find("email", email)


class MemoryStorage(Storage):
    """In-memory implementation of :class:`Storage`."""

    def __init__(self):
        super().__init__(
            users=MemoryUserCollection(),
            wedding_settings=MemoryCollection(WeddingSettings),
            tasks=MemoryCollection(Task),
            budget_categories=MemoryCollection(BudgetCategory),
            vendors=MemoryCollection(Vendor),
            guests=MemoryCollection(Guest),
            timeline_events=MemoryCollection(TimelineEvent),
            help_messages=MemoryCollection(HelpMessage),
        )
