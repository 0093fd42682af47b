"""
Database configuration and session management
Uses SQLAlchemy sync engine; the only table is the profile key-value store
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool, StaticPool
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from .config import get_settings
from storefront.models.base import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Create an engine with parameters suited to the backend"""
    settings = get_settings()
    url = database_url or settings.DATABASE_URL
    echo = settings.DATABASE_ECHO if echo is None else echo

    if url.startswith("sqlite"):
        # In-memory SQLite must share one connection across sessions
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            return create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,
        )

    return create_engine(url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(engine, autocommit=False, autoflush=False, expire_on_commit=False)


@contextmanager
def get_db_sync_context(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Context manager for synchronous database sessions
    Commits on success, rolls back on error
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> None:
    """Initialize database tables"""
    Base.metadata.create_all(engine)
    logger.info("Database tables created successfully")


def close_db(engine: Engine) -> None:
    """Close database connections"""
    engine.dispose()
    logger.info("Database connections closed")
