"""SQLAlchemy-backed storage."""
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
import logging
import threading
from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.concurrency import run_in_threadpool

from app.database import Base, create_session_factory, get_db_context
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
    StorageError,
    UserCollection,
)

logger = logging.getLogger(__name__)


class SqlCollection(OwnedCollection, SingletonCollection):
    """All operations for one ORM model. Each call is its own transaction."""

    def __init__(
        self,
        model: type[Base],
        session_factory: sessionmaker,
        lock: AbstractContextManager | None = None,
    ):
        self.kind = model.__name__
        self.model = model
        self.session_factory = session_factory
        self._lock = lock if lock is not None else nullcontext()
        self._columns = {column.key for column in model.__table__.columns}

    def _to_record(self, row: Base) -> Record:
        return {key: getattr(row, key) for key in self._columns}

    def _fields(self, data: Record) -> Record:
        return {key: value for key, value in data.items() if key in self._columns and key != "id"}

    async def _run(self, operation: str, work: Callable[[Session], Any]) -> Any:
        def unit_of_work():
            with self._lock, get_db_context(self.session_factory) as db:
                return work(db)

        try:
            return await run_in_threadpool(unit_of_work)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to {operation} {self.kind}") from exc

    async def list(self, user_id: int) -> list[Record]:
        def work(db: Session) -> list[Record]:
            rows = db.query(self.model).filter(self.model.user_id == user_id).order_by(self.model.id).all()
            return [self._to_record(row) for row in rows]

        return await self._run("list", work)

    async def get(self, record_id: int) -> Record | None:
        def work(db: Session) -> Record | None:
            row = db.get(self.model, record_id)
            return self._to_record(row) if row is not None else None

        return await self._run("get", work)

    async def get_by_user(self, user_id: int) -> Record | None:
        def work(db: Session) -> Record | None:
            row = db.query(self.model).filter(self.model.user_id == user_id).order_by(self.model.id).first()
            return self._to_record(row) if row is not None else None

        return await self._run("get", work)

    async def create(self, data: Record) -> Record:
        def work(db: Session) -> Record:
            row = self.model(**self._fields(data))
            db.add(row)
            db.flush()
            return self._to_record(row)

        return await self._run("create", work)

    async def update(self, record_id: int, partial: Record) -> Record | None:
        def work(db: Session) -> Record | None:
            row = db.get(self.model, record_id)
            if row is None:
                return None
            for key, value in self._fields(partial).items():
                setattr(row, key, value)
            db.flush()
            return self._to_record(row)

        return await self._run("update", work)

    async def delete(self, record_id: int) -> bool:
        def work(db: Session) -> bool:
            deleted = db.query(self.model).filter(self.model.id == record_id).delete(synchronize_session=False)
            return deleted > 0

        return await self._run("delete", work)


class SqlUserCollection(SqlCollection, UserCollection):
    """Users stored in the ``users`` table."""

    def __init__(self, session_factory: sessionmaker, lock: AbstractContextManager | None = None):
        super().__init__(User, session_factory, lock)

    async def _find(self, column, value: str) -> Record | None:
        def work(db: Session) -> Record | None:
            row = db.query(User).filter(column == value).first()
            return self._to_record(row) if row is not None else None

        return await self._run("get", work)

    async def get_by_username(self, username: str) -> Record | None:
        return await self._find(User.username, username)

    async def get_by_email(self, email: str) -> Record | None:
        return await self._find(User.email, email)


class DatabaseStorage(Storage):
    """Relational implementation of :class:`Storage`."""

    def __init__(self, engine: Engine):
        self.engine = engine
        session_factory = create_session_factory(engine)
        # A StaticPool hands every worker thread the same connection, so
        # transactions must not interleave on it
        lock = threading.Lock() if isinstance(engine.pool, StaticPool) else None
        super().__init__(
            users=SqlUserCollection(session_factory, lock),
            wedding_settings=SqlCollection(WeddingSettings, session_factory, lock),
            tasks=SqlCollection(Task, session_factory, lock),
            budget_categories=SqlCollection(BudgetCategory, session_factory, lock),
            vendors=SqlCollection(Vendor, session_factory, lock),
            guests=SqlCollection(Guest, session_factory, lock),
            timeline_events=SqlCollection(TimelineEvent, session_factory, lock),
            help_messages=SqlCollection(HelpMessage, session_factory, lock),
        )

    def close(self) -> None:
        logger.info("Disposing database engine")
        self.engine.dispose()
