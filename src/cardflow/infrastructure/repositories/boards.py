"""Read-oriented repository for boards and columns."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from cardflow.domain.cards import BoardDetail, CardSummary, ColumnDetail, ColumnOverview
from cardflow.domain.columns import ColumnInfo, ColumnKind
from cardflow.infrastructure.database.schema import board_columns, boards, cards

if TYPE_CHECKING:
    from sqlalchemy import Connection


def select_column_infos(conn: Connection, board_id: int) -> list[ColumnInfo]:
    """Flow metadata of a board's columns, ordered by position."""
    stmt = (
        select(board_columns.c.id, board_columns.c.order, board_columns.c.kind)
        .where(board_columns.c.board_id == board_id)
        .order_by(board_columns.c.order)
    )
    rows = conn.execute(stmt).mappings().all()
    return [ColumnInfo(id=r["id"], order=r["order"], kind=ColumnKind(r["kind"])) for r in rows]


class BoardRepository:
    """Encapsulates SQL for read-side board and column queries."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_boards(self) -> list[dict[str, Any]]:
        """All boards as ``{id, name}`` rows, ordered by id."""
        stmt = select(boards.c.id, boards.c.name).order_by(boards.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

    def column_infos(self, board_id: int) -> list[ColumnInfo]:
        """Flow metadata of a board's columns; empty if the board does not exist."""
        with self._engine.connect() as conn:
            return select_column_infos(conn, board_id)

    def board_detail(self, board_id: int) -> BoardDetail | None:
        """A board with each column's card count, or None if absent."""
        cards_amount = (
            select(func.count(cards.c.id))
            .where(cards.c.column_id == board_columns.c.id)
            .correlate(board_columns)
            .scalar_subquery()
        )
        with self._engine.connect() as conn:
            board = (
                conn.execute(select(boards.c.id, boards.c.name).where(boards.c.id == board_id))
                .mappings()
                .first()
            )
            if board is None:
                return None
            rows = (
                conn.execute(
                    select(
                        board_columns.c.id,
                        board_columns.c.name,
                        board_columns.c.order,
                        board_columns.c.kind,
                        cards_amount.label("cards_amount"),
                    )
                    .where(board_columns.c.board_id == board_id)
                    .order_by(board_columns.c.order)
                )
                .mappings()
                .all()
            )
        columns = [
            ColumnOverview(
                id=r["id"],
                name=r["name"],
                order=r["order"],
                kind=ColumnKind(r["kind"]),
                cards_amount=int(r["cards_amount"] or 0),
            )
            for r in rows
        ]
        return BoardDetail(id=board["id"], name=board["name"], columns=columns)

    def column_detail(self, column_id: int) -> ColumnDetail | None:
        """A column with its cards, or None if absent."""
        with self._engine.connect() as conn:
            column = (
                conn.execute(select(board_columns).where(board_columns.c.id == column_id))
                .mappings()
                .first()
            )
            if column is None:
                return None
            rows = (
                conn.execute(
                    select(cards.c.id, cards.c.title, cards.c.description)
                    .where(cards.c.column_id == column_id)
                    .order_by(cards.c.id)
                )
                .mappings()
                .all()
            )
        return ColumnDetail(
            id=column["id"],
            board_id=column["board_id"],
            name=column["name"],
            order=column["order"],
            kind=ColumnKind(column["kind"]),
            cards=[
                CardSummary(id=r["id"], title=r["title"], description=r["description"] or "")
                for r in rows
            ],
        )
