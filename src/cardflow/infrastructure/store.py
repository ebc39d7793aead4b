"""Store: repository pattern with unit-of-work transactions.

The Store is the single dependency injected into every service.  It owns
the database engine; :meth:`Store.transaction` opens one unit of work
that commits when the block exits normally and rolls back when it
raises, re-raising the original exception.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select

from cardflow.domain.cards import BlockRecord, CardState
from cardflow.domain.columns import ColumnInfo, ColumnSpec
from cardflow.infrastructure.database.engine import init_database
from cardflow.infrastructure.database.schema import board_columns, boards
from cardflow.infrastructure.repositories.blocks import BlockLedger
from cardflow.infrastructure.repositories.boards import BoardRepository, select_column_infos
from cardflow.infrastructure.repositories.cards import CardRepository

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from cardflow.config.settings import CardflowSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# StoreTransaction: yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Persistence port for one unit of work.

    Services read card state and issue their single write through these
    methods; all of them share :attr:`conn`.
    """

    conn: Connection
    cards: CardRepository = field(init=False, repr=False)
    blocks: BlockLedger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.blocks = BlockLedger(self.conn)
        self.cards = CardRepository(self.conn, self.blocks)

    # -- cards ----------------------------------------------------------

    def load_card_state(self, card_id: int) -> CardState | None:
        return self.cards.load_state(card_id)

    def insert_card(self, title: str, description: str, column_id: int, created: str) -> int:
        return self.cards.insert(title, description, column_id, created)

    def move_card(self, card_id: int, column_id: int) -> None:
        self.cards.move(card_id, column_id)

    # -- block ledger ---------------------------------------------------

    def append_block(self, card_id: int, reason: str, timestamp: str) -> int:
        return self.blocks.append(card_id, reason, timestamp)

    def close_block(self, card_id: int, reason: str, timestamp: str) -> None:
        self.blocks.close(card_id, reason, timestamp)

    def block_history(self, card_id: int) -> list[BlockRecord]:
        return self.blocks.history(card_id)

    # -- boards ---------------------------------------------------------

    def column_infos(self, board_id: int) -> list[ColumnInfo]:
        return select_column_infos(self.conn, board_id)

    def insert_board(
        self, name: str, columns: list[ColumnSpec], created: str
    ) -> tuple[int, list[ColumnInfo]]:
        """Insert a board and its columns; returns the board id and column infos."""
        result = self.conn.execute(insert(boards).values(name=name, created=created))
        board_id = int(result.inserted_primary_key[0])
        infos: list[ColumnInfo] = []
        for spec in columns:
            col = self.conn.execute(
                insert(board_columns).values(
                    board_id=board_id,
                    name=spec.name,
                    order=spec.order,
                    kind=str(spec.kind),
                )
            )
            infos.append(
                ColumnInfo(id=int(col.inserted_primary_key[0]), order=spec.order, kind=spec.kind)
            )
        return board_id, infos

    def board_exists(self, board_id: int) -> bool:
        row = self.conn.execute(select(boards.c.id).where(boards.c.id == board_id)).first()
        return row is not None

    def delete_board(self, board_id: int) -> None:
        """Delete a board; columns, cards and blocks cascade."""
        self.conn.execute(delete(boards).where(boards.c.id == board_id))


# ---------------------------------------------------------------------------
# Store: the repository
# ---------------------------------------------------------------------------


class Store:
    """Repository encapsulating database access.

    Constructed once at CLI startup from :class:`CardflowSettings` and
    stored in ``click.Context.obj``.  Services receive the Store via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: CardflowSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.root)
        self._boards = BoardRepository(self._engine)

    @property
    def root(self) -> Path:
        """Directory holding the ``.cardflow/`` data directory."""
        return self._settings.data_root

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @property
    def settings(self) -> CardflowSettings:
        return self._settings

    @property
    def boards(self) -> BoardRepository:
        """Read-side board and column queries."""
        return self._boards

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """One all-or-nothing unit of work.

        Commits when the block exits normally (including an early
        ``return`` after a failed precondition, which has written
        nothing).  Any exception rolls the whole unit back and
        propagates unchanged.

        Usage::

            with store.transaction() as txn:
                state = txn.load_card_state(card_id)
                txn.move_card(card_id, target.id)
        """
        with self._engine.begin() as conn:
            try:
                yield StoreTransaction(conn=conn)
            except BaseException:
                logger.debug("Rolling back unit of work", exc_info=True)
                raise
