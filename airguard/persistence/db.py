"""Database connection and session management."""
from typing import Iterator, Optional
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from airguard.config import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()

engine = None
SessionLocal = None


def init_db(database_url: Optional[str] = None):
    """Initialize database connection and create tables.

    Args:
        database_url: SQLAlchemy connection string (default: DATABASE_URL setting)
    """
    global engine, SessionLocal

    # Register models on Base.metadata
    from airguard.persistence import models  # noqa: F401

    url = database_url or get_settings().database_url
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # Share the single in-memory database across sessions
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, echo=False, **kwargs)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Mission store initialised at %s", engine.url.render_as_string(hide_password=True))


def get_db() -> Iterator[Session]:
    """Get database session.

    Returns:
        Database session
    """
    if SessionLocal is None:
        init_db()

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def close_db():
    """Close database connection."""
    global engine, SessionLocal
    if engine:
        engine.dispose()
    engine = None
    SessionLocal = None
