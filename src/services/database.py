"""Ledger session management."""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from config import settings

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker | None = None


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.database.url,
            echo=settings.database.echo,
            pool_pre_ping=True,
        )
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine())
    return _session_factory


def get_sync_session() -> Session:
    return get_session_factory()()


@contextmanager
def session_scope(session_factory=None) -> Generator[Session, None, None]:
    """Yield a ledger session that is always closed on exit.

    Usage:
        with session_scope() as session:
            # use session

    The core only reads the ledger, so nothing is committed here; a failed
    block is rolled back before the session is released.
    """
    factory = session_factory or get_sync_session
    session = factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def check_connection() -> bool:
    """Check if the ledger connection is working."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Ledger connection check failed: {e}")
        return False
