"""SQLite database engine and schema via SQLAlchemy Core."""

from cardflow.infrastructure.database.engine import create_db_engine, init_database
from cardflow.infrastructure.database.schema import (
    blocks,
    board_columns,
    boards,
    cards,
    metadata,
)

__all__ = [
    "blocks",
    "board_columns",
    "boards",
    "cards",
    "create_db_engine",
    "init_database",
    "metadata",
]
