"""Schema migration for the BoardHub tables.

``upgrade`` creates the tables in dependency order and ``downgrade`` drops
them in reverse, so each table is removed before the tables it references.
"""
from typing import Tuple

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

import boardhub.models  # noqa: F401  (registers the tables on Base.metadata)
from boardhub.database import Base
from boardhub.logger import get_logger

logger = get_logger(__name__)

TABLE_ORDER: Tuple[str, ...] = (
    "profiles",
    "auths",
    "users",
    "boards",
    "boards_users",
    "boards_invites",
    "panels",
    "tickets",
)


def _table_exists(conn, table_name: str) -> bool:
    return inspect(conn).has_table(table_name)


def upgrade(engine: Engine) -> None:
    with engine.begin() as conn:
        for name in TABLE_ORDER:
            if _table_exists(conn, name):
                continue
            Base.metadata.tables[name].create(bind=conn)
            logger.info("Created table %s", name)


def downgrade(engine: Engine) -> None:
    with engine.begin() as conn:
        for name in reversed(TABLE_ORDER):
            if not _table_exists(conn, name):
                continue
            Base.metadata.tables[name].drop(bind=conn)
            logger.info("Dropped table %s", name)


def reset(engine: Engine) -> None:
    """Roll the schema back and migrate it again, leaving empty tables."""
    downgrade(engine)
    upgrade(engine)
