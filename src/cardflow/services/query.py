"""CardQueryService and BoardQueryService: read-only lookups."""

from __future__ import annotations

from cardflow.domain.columns import ColumnInfo, cancel_column
from cardflow.services.base import BaseService
from cardflow.services.result import ServiceResult
from cardflow.services.telemetry import traced


class CardQueryService(BaseService):
    """Point-in-time card snapshots and block history."""

    @traced
    def find_card_state(self, card_id: int) -> ServiceResult:
        """Card detail: title, description, block state, and current column."""
        op = "show_card"
        with self._store.transaction() as txn:
            state = txn.load_card_state(card_id)
        if state is None:
            return self._not_found(op, "card", card_id)
        return ServiceResult(ok=True, op=op, data=state.model_dump())

    @traced
    def block_history(self, card_id: int) -> ServiceResult:
        """Every block record of a card, oldest first."""
        op = "block_history"
        with self._store.transaction() as txn:
            state = txn.load_card_state(card_id)
            records = txn.block_history(card_id) if state is not None else []
        if state is None:
            return self._not_found(op, "card", card_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": card_id,
                "count": len(records),
                "items": [r.model_dump() for r in records],
            },
        )


class BoardQueryService(BaseService):
    """Board listings and board/column detail views."""

    def column_infos(self, board_id: int) -> list[ColumnInfo]:
        """Column metadata the workflow engine validates against."""
        return self._store.boards.column_infos(board_id)

    def board_columns(self, board_id: int) -> ServiceResult:
        """Column metadata wrapped in a result; NOT_FOUND for an unknown board.

        ``data["columns"]`` holds :class:`ColumnInfo` objects and
        ``data["cancel_column_id"]`` the board's CANCEL column.
        """
        op = "board_columns"
        columns = self.column_infos(board_id)
        if not columns:
            return self._not_found(op, "board", board_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "board_id": board_id,
                "columns": columns,
                "cancel_column_id": cancel_column(columns).id,
            },
        )

    @traced
    def list_boards(self) -> ServiceResult:
        items = self._store.boards.list_boards()
        return ServiceResult(ok=True, op="list_boards", data={"count": len(items), "items": items})

    @traced
    def show_board(self, board_id: int) -> ServiceResult:
        """A board and its columns with card counts."""
        op = "show_board"
        detail = self._store.boards.board_detail(board_id)
        if detail is None:
            return self._not_found(op, "board", board_id)
        return ServiceResult(ok=True, op=op, data=detail.model_dump(mode="json"))

    @traced
    def show_column(self, column_id: int) -> ServiceResult:
        """A column and the cards it holds."""
        op = "show_column"
        detail = self._store.boards.column_detail(column_id)
        if detail is None:
            return self._not_found(op, "column", column_id)
        return ServiceResult(ok=True, op=op, data=detail.model_dump(mode="json"))
