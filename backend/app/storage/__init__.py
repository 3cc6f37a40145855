"""Persistence layer: one interface, two interchangeable backends."""
import logging

from app.config import Settings
from app.database import create_db_engine, init_db
from app.storage.base import (
    OwnedCollection,
    Record,
    SingletonCollection,
    Storage,
    StorageError,
    UserCollection,
)
from app.storage.memory import MemoryStorage
from app.storage.sql import DatabaseStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> Storage:
    """Build the backend selected by ``STORAGE_BACKEND``."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage")
        return MemoryStorage()

    engine = create_db_engine(settings.database_url, echo=settings.debug)
    init_db(engine)
    logger.info("Using database storage at %s", engine.url.render_as_string(hide_password=True))
    return DatabaseStorage(engine)


__all__ = [
    "DatabaseStorage",
    "MemoryStorage",
    "OwnedCollection",
    "Record",
    "SingletonCollection",
    "Storage",
    "StorageError",
    "UserCollection",
    "create_storage",
]
