"""CardService: the card workflow engine.

Every operation is one unit of work: re-read the card, validate the
transition against the board's columns and the block ledger, then issue
exactly one write.  A failed precondition raises
:class:`WorkflowViolation` inside the transaction, so the unit of work
rolls back (nothing was written) and the violation is returned as a
failed ServiceResult.  Storage errors propagate unchanged after rollback.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog

from cardflow.domain.columns import ColumnInfo, initial_column
from cardflow.domain.errors import ErrorCode, WorkflowViolation
from cardflow.domain.workflow import check_block, check_cancel, check_move, check_unblock
from cardflow.services._helpers import now_iso
from cardflow.services.base import BaseService
from cardflow.services.result import ServiceResult
from cardflow.services.telemetry import traced

if TYPE_CHECKING:
    from cardflow.domain.cards import CardState
    from cardflow.infrastructure.store import StoreTransaction

log = structlog.get_logger(__name__)


def _require_card(txn: StoreTransaction, card_id: int) -> CardState:
    state = txn.load_card_state(card_id)
    if state is None:
        raise WorkflowViolation(ErrorCode.NOT_FOUND, f"No card found with id: {card_id}")
    return state


class CardService(BaseService):
    """Create, move, cancel, block and unblock cards."""

    @traced
    def create(self, board_id: int, title: str, description: str = "") -> ServiceResult:
        """Insert a new card into the board's INITIAL column.

        Raises:
            ConfigurationError: If the board has no INITIAL column.
        """
        op = "create_card"
        try:
            with self._store.transaction() as txn:
                columns = txn.column_infos(board_id)
                if not columns:
                    raise WorkflowViolation(
                        ErrorCode.NOT_FOUND, f"No board found with id: {board_id}"
                    )
                column = initial_column(columns)
                card_id = txn.insert_card(title, description, column.id, now_iso())
        except WorkflowViolation as exc:
            return self._failure(op, exc, board_id=board_id)

        log.debug("card.created", card_id=card_id, board_id=board_id, column_id=column.id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": card_id,
                "board_id": board_id,
                "title": title,
                "column_id": column.id,
                "order": column.order,
            },
        )

    @traced
    def move_to_next(self, card_id: int, columns: Sequence[ColumnInfo]) -> ServiceResult:
        """Advance a card to the column at ``order + 1``."""
        op = "move_card"
        try:
            with self._store.transaction() as txn:
                state = _require_card(txn, card_id)
                target = check_move(state, columns)
                txn.move_card(card_id, target.id)
        except WorkflowViolation as exc:
            return self._failure(op, exc, card_id=card_id)

        log.debug("card.moved", card_id=card_id, from_column=state.column_id, to_column=target.id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": card_id,
                "from_column_id": state.column_id,
                "column_id": target.id,
                "order": target.order,
                "kind": str(target.kind),
            },
        )

    @traced
    def cancel(
        self, card_id: int, cancel_column_id: int, columns: Sequence[ColumnInfo]
    ) -> ServiceResult:
        """Move a card to the board's CANCEL column.

        The card must still have a successor column in the flow, and
        *cancel_column_id* must be the CANCEL column among *columns*.
        """
        op = "cancel_card"
        try:
            with self._store.transaction() as txn:
                state = _require_card(txn, card_id)
                check_cancel(state, columns, cancel_column_id)
                txn.move_card(card_id, cancel_column_id)
        except WorkflowViolation as exc:
            return self._failure(op, exc, card_id=card_id)

        log.debug("card.cancelled", card_id=card_id, column_id=cancel_column_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": card_id,
                "from_column_id": state.column_id,
                "column_id": cancel_column_id,
            },
        )

    @traced
    def block(self, card_id: int, reason: str, columns: Sequence[ColumnInfo]) -> ServiceResult:
        """Open a block record for a card outside the terminal columns."""
        op = "block_card"
        blocked_at = now_iso()
        try:
            with self._store.transaction() as txn:
                state = _require_card(txn, card_id)
                check_block(state, columns)
                block_id = txn.append_block(card_id, reason, blocked_at)
        except WorkflowViolation as exc:
            return self._failure(op, exc, card_id=card_id)

        log.debug("card.blocked", card_id=card_id, block_id=block_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": card_id,
                "blocked": True,
                "block_id": block_id,
                "block_reason": reason,
                "blocked_at": blocked_at,
                "blocks_amount": state.blocks_amount + 1,
            },
        )

    @traced
    def unblock(self, card_id: int, reason: str) -> ServiceResult:
        """Close the open block record of a card. Never moves the card."""
        op = "unblock_card"
        unblocked_at = now_iso()
        try:
            with self._store.transaction() as txn:
                state = _require_card(txn, card_id)
                check_unblock(state)
                txn.close_block(card_id, reason, unblocked_at)
        except WorkflowViolation as exc:
            return self._failure(op, exc, card_id=card_id)

        log.debug("card.unblocked", card_id=card_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": card_id,
                "blocked": False,
                "unblock_reason": reason,
                "unblocked_at": unblocked_at,
                "blocks_amount": state.blocks_amount,
            },
        )
