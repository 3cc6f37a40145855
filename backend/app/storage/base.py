"""Storage interface shared by the in-memory and relational backends.

Every record crosses this boundary as a plain ``dict`` keyed by snake_case
column names. Callers get copies, so mutating a returned record never changes
stored state. Ownership and field validation are the API layer's job; the
only error raised here is :class:`StorageError`, for faults in the backing
store itself. "Not found" is reported through ``None``/``False`` returns.
"""
from abc import ABC, abstractmethod
from typing import Any

Record = dict[str, Any]


class StorageError(Exception):
    """Raised when the persistence layer fails (connectivity, constraint, ...)."""


class RecordCollection(ABC):
    """Write side common to every entity kind."""

    kind: str

    @abstractmethod
    async def create(self, data: Record) -> Record:
        """Insert a record, assigning its id and generated timestamps."""


class OwnedCollection(RecordCollection):
    """Full CRUD for an entity owned by a single user."""

    @abstractmethod
    async def list(self, user_id: int) -> list[Record]:
        """Return all records owned by ``user_id``, ordered by id."""

    @abstractmethod
    async def get(self, record_id: int) -> Record | None:
        """Return one record regardless of owner."""

    @abstractmethod
    async def update(self, record_id: int, partial: Record) -> Record | None:
        """Merge ``partial`` into the record; ``None`` if it does not exist."""

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Remove the record and report whether anything was removed."""


class SingletonCollection(RecordCollection):
    """Entity kind with at most one record per user."""

    @abstractmethod
    async def get_by_user(self, user_id: int) -> Record | None:
        """Return the user's record, if any."""

    @abstractmethod
    async def update(self, record_id: int, partial: Record) -> Record | None:
        """Merge ``partial`` into the record; ``None`` if it does not exist."""


class UserCollection(RecordCollection):
    """Lookups used by the authentication layer."""

    @abstractmethod
    async def get(self, user_id: int) -> Record | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Record | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Record | None:
        ...


class Storage:
    """One accessor per entity kind; the rest of the app depends only on this."""

    def __init__(
        self,
        users: UserCollection,
        wedding_settings: SingletonCollection,
        tasks: OwnedCollection,
        budget_categories: OwnedCollection,
        vendors: OwnedCollection,
        guests: OwnedCollection,
        timeline_events: OwnedCollection,
        help_messages: RecordCollection,
    ):
        self.users = users
        self.wedding_settings = wedding_settings
        self.tasks = tasks
        self.budget_categories = budget_categories
        self.vendors = vendors
        self.guests = guests
        self.timeline_events = timeline_events
        self.help_messages = help_messages

    def collection(self, name: str) -> OwnedCollection:
        """Look up an owned-entity accessor by attribute name."""
        collection = getattr(self, name, None)
        if not isinstance(collection, OwnedCollection):
            raise KeyError(f"No owned collection named {name!r}")
        return collection

    def close(self) -> None:
        """Release backend resources."""
