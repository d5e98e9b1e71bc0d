import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from boardhub.config import settings
from boardhub.logger import get_logger

logger = get_logger(__name__)

# Default to a local SQLite database if no DATABASE_URL is provided or usable
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(BASE_DIR, ".."))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "boardhub.db")


def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """Turn on FK enforcement for every new SQLite connection of ``engine``.

    SQLite ships with foreign keys disabled, which would silently skip the
    ON DELETE CASCADE rules the schema relies on.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # pragma: no cover - driver callback
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()

    return engine


def _build_engine():
    """Create the SQLAlchemy engine, preferring the configured DATABASE_URL."""
    database_url = settings.DATABASE_URL

    if database_url:
        try:
            engine = create_engine(database_url, echo=settings.SQL_ECHO, pool_pre_ping=True)
            # Ensure the target database is reachable; otherwise fall back to SQLite
            with engine.connect():
                pass
            return enable_sqlite_foreign_keys(engine)
        except ModuleNotFoundError as exc:
            logger.warning("Database driver missing for DATABASE_URL (%s), using SQLite", exc)
        except Exception as exc:
            logger.warning("DATABASE_URL unreachable (%s), using SQLite", exc)

    sqlite_url = f"sqlite:///{DEFAULT_DB_PATH}"
    engine = create_engine(sqlite_url, echo=settings.SQL_ECHO, connect_args={"check_same_thread": False})
    return enable_sqlite_foreign_keys(engine)


engine = _build_engine()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the models
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
