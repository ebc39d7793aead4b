"""SQLAlchemy Core table definitions for the cardflow database.

Ownership is expressed with foreign keys only: a column points at its
board, a card at its current column, a block record at its card.
Deleting a board cascades through its columns, cards, and blocks.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

boards = Table(
    "boards",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("created", Text, nullable=False),
)

board_columns = Table(
    "board_columns",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("board_id", Integer, ForeignKey("boards.id", ondelete="CASCADE"), nullable=False),
    Column("name", Text, nullable=False),
    Column("order", Integer, nullable=False),
    Column("kind", Text, nullable=False),  # INITIAL | PENDING | FINAL | CANCEL
    UniqueConstraint("board_id", "order"),
)

cards = Table(
    "cards",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False, default="", server_default=""),
    Column(
        "column_id",
        Integer,
        ForeignKey("board_columns.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created", Text, nullable=False),
)

# Append-only ledger: a row is open while unblocked_at is NULL.
blocks = Table(
    "blocks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("card_id", Integer, ForeignKey("cards.id", ondelete="CASCADE"), nullable=False),
    Column("blocked_at", Text, nullable=False),
    Column("block_reason", Text, nullable=False),
    Column("unblocked_at", Text),
    Column("unblock_reason", Text),
)

Index("ix_board_columns_board", board_columns.c.board_id)
Index("ix_cards_column", cards.c.column_id)
Index("ix_blocks_card", blocks.c.card_id)
