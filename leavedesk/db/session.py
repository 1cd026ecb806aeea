"""
Database session management
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from leavedesk.core.config import settings
from leavedesk.db.base import Base

logger = logging.getLogger(__name__)

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=False,
    connect_args={"check_same_thread": False} if _is_sqlite else {},
)

# Create all tables automatically on startup for SQLite; other databases use Alembic
if _is_sqlite:
    import leavedesk.models  # noqa: F401  (register tables on Base.metadata)
    Base.metadata.create_all(bind=engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Run a block of writes as one transaction.

    Commits when the block exits normally and rolls back when it raises,
    so either every write in the block is persisted or none is.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        logger.debug("Transaction rolled back")
        raise
