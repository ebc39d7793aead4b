"""Card Lookup and card writes.

The caller owns the transaction; pass a ``Connection`` obtained from
``engine.begin()`` so reads and the single write of a workflow
operation share one unit of work.  Block state in the snapshot comes
from the :class:`BlockLedger` on the same connection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update

from cardflow.domain.cards import CardState
from cardflow.infrastructure.database.schema import board_columns, cards
from cardflow.infrastructure.repositories.blocks import BlockLedger

if TYPE_CHECKING:
    from sqlalchemy import Connection


class CardRepository:
    """SQL for the ``cards`` table and the card state snapshot."""

    def __init__(self, conn: Connection, ledger: BlockLedger | None = None) -> None:
        self._conn = conn
        self._ledger = ledger if ledger is not None else BlockLedger(conn)

    def insert(self, title: str, description: str, column_id: int, created: str) -> int:
        """Insert a card into *column_id* and return its generated id."""
        result = self._conn.execute(
            insert(cards).values(
                title=title,
                description=description,
                column_id=column_id,
                created=created,
            )
        )
        return int(result.inserted_primary_key[0])

    def load_state(self, card_id: int) -> CardState | None:
        """Fetch the current snapshot of a card, or None if it does not exist."""
        stmt = (
            select(
                cards.c.id,
                cards.c.title,
                cards.c.description,
                cards.c.column_id,
                board_columns.c.name.label("column_name"),
            )
            .select_from(cards.join(board_columns, board_columns.c.id == cards.c.column_id))
            .where(cards.c.id == card_id)
        )
        row = self._conn.execute(stmt).mappings().first()
        if row is None:
            return None
        open_block = self._ledger.open_record(card_id)
        return CardState(
            id=row["id"],
            title=row["title"],
            description=row["description"] or "",
            blocked=open_block is not None,
            blocked_at=open_block.blocked_at if open_block else None,
            block_reason=open_block.block_reason if open_block else None,
            blocks_amount=self._ledger.count(card_id),
            column_id=row["column_id"],
            column_name=row["column_name"],
        )

    def move(self, card_id: int, column_id: int) -> int:
        """Point the card at *column_id*. Returns the number of rows updated."""
        result = self._conn.execute(
            update(cards).where(cards.c.id == card_id).values(column_id=column_id)
        )
        return result.rowcount
