"""Engine, session factory and declarative base."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from project_tracker.config import get_settings

Base: Any = declarative_base()


def engine_options(database_url: str) -> dict[str, Any]:
    """Connection options suited to the database behind ``database_url``.

    SQLite connections are shared with the request worker threads, so the
    same-thread check is off; server databases get a checked pool.
    """
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


def build_engine(database_url: str) -> Engine:
    return create_engine(database_url, **engine_options(database_url))


engine = build_engine(get_settings().database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a per-request database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the users and projects tables if they are missing."""
    # Models register themselves on Base.metadata when imported
    from project_tracker import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
