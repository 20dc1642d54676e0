# ednc/db/session.py
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session

from ednc.core.config import settings
from ednc.core.exceptions import StorageFailure

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_engine(url: str):
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(url, pool_pre_ping=True)
    enable_sqlite_foreign_keys(engine)
    return engine


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def commit_or_fail(db: Session, what: str) -> None:
    """Commit the unit of work, or roll it back and raise StorageFailure."""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"❌ [DB] Failed to {what}")
        raise StorageFailure()
