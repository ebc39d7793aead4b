"""Database engine setup for SQLite.

The DB is stored at ``{root}/.cardflow/cardflow.db``.  SQLAlchemy Core
(not ORM) is used throughout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from cardflow.infrastructure.database.schema import metadata

DATA_DIRNAME = ".cardflow"
DB_FILENAME = "cardflow.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(root: Path) -> Engine:
    """Initialize the cardflow database under ``{root}/.cardflow/``.

    Idempotent, safe to call on an existing data directory.
    """
    data_dir = root / DATA_DIRNAME
    data_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(data_dir / DB_FILENAME)
    metadata.create_all(engine)
    return engine
