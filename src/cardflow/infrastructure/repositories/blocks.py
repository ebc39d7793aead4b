"""Block Ledger: append-only block/unblock history per card.

Blocking inserts an open record; unblocking closes the open record.
A card is blocked iff it has an open record, and the number of times it
has been blocked is the number of records, open or closed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select, update

from cardflow.domain.cards import BlockRecord
from cardflow.infrastructure.database.schema import blocks

if TYPE_CHECKING:
    from sqlalchemy import Connection


def _to_record(row: Any) -> BlockRecord:
    return BlockRecord(
        id=row["id"],
        card_id=row["card_id"],
        blocked_at=row["blocked_at"],
        block_reason=row["block_reason"],
        unblocked_at=row["unblocked_at"],
        unblock_reason=row["unblock_reason"],
    )


class BlockLedger:
    """SQL for the ``blocks`` table. The caller owns the transaction."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def append(self, card_id: int, reason: str, blocked_at: str) -> int:
        """Open a new block record and return its id."""
        result = self._conn.execute(
            insert(blocks).values(card_id=card_id, blocked_at=blocked_at, block_reason=reason)
        )
        return int(result.inserted_primary_key[0])

    def close(self, card_id: int, reason: str, unblocked_at: str) -> int:
        """Close the open block record of *card_id*. Returns rows updated."""
        result = self._conn.execute(
            update(blocks)
            .where(blocks.c.card_id == card_id, blocks.c.unblocked_at.is_(None))
            .values(unblocked_at=unblocked_at, unblock_reason=reason)
        )
        return result.rowcount

    def open_record(self, card_id: int) -> BlockRecord | None:
        """The open block record of *card_id*, if any."""
        row = (
            self._conn.execute(
                select(blocks).where(blocks.c.card_id == card_id, blocks.c.unblocked_at.is_(None))
            )
            .mappings()
            .first()
        )
        return _to_record(row) if row is not None else None

    def count(self, card_id: int) -> int:
        """How many times *card_id* has been blocked."""
        stmt = select(func.count(blocks.c.id)).where(blocks.c.card_id == card_id)
        return int(self._conn.execute(stmt).scalar_one())

    def history(self, card_id: int) -> list[BlockRecord]:
        """All block records of *card_id*, oldest first."""
        rows = (
            self._conn.execute(
                select(blocks).where(blocks.c.card_id == card_id).order_by(blocks.c.id)
            )
            .mappings()
            .all()
        )
        return [_to_record(row) for row in rows]
