"""Database engine and session management."""
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def _ensure_sqlite_directory(database_url: str) -> None:
    parsed_url = make_url(database_url)
    database_path = parsed_url.database
    if not database_path or database_path == ":memory:":
        return
    Path(database_path).parent.mkdir(parents=True, exist_ok=True)


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the configured database URL."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    # SQLite requires check_same_thread=False for FastAPI
    connect_args = {"check_same_thread": False}
    if make_url(database_url).database in (None, "", ":memory:"):
        # One shared connection so every session sees the same in-memory database
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool, echo=echo)

    _ensure_sqlite_directory(database_url)
    return create_engine(database_url, connect_args=connect_args, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    # Import all models so they're registered with Base
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


@contextmanager
def get_db_context(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Context manager for a unit of work: commit on success, rollback on error."""
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
