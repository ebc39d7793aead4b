"""BoardService: board creation and deletion."""

from __future__ import annotations

import structlog

from cardflow.domain.columns import build_board_layout
from cardflow.domain.errors import ErrorCode, WorkflowViolation
from cardflow.services._helpers import now_iso
from cardflow.services.base import BaseService
from cardflow.services.result import ServiceResult
from cardflow.services.telemetry import traced

log = structlog.get_logger(__name__)


class BoardService(BaseService):
    """Creates boards with the standard column layout and deletes them."""

    @traced
    def create_board(
        self,
        name: str,
        *,
        pending_names: list[str] | None = None,
        pending_count: int | None = None,
    ) -> ServiceResult:
        """Create a board with INITIAL, PENDING*, FINAL and CANCEL columns.

        Pending column names come from *pending_names* when given,
        otherwise *pending_count* (default from ``[board]`` config)
        generated names are used.  Passing both is a validation failure.
        """
        op = "create_board"
        config = self._store.settings.board
        name = name.strip()
        try:
            if not name:
                raise WorkflowViolation(ErrorCode.VALIDATION_FAILED, "Board name cannot be empty")
            if pending_names is not None and pending_count is not None:
                raise WorkflowViolation(
                    ErrorCode.VALIDATION_FAILED,
                    "Give either pending column names or a pending column count, not both",
                )
            if pending_names is None:
                count = config.default_pending if pending_count is None else pending_count
                if count < 0:
                    raise WorkflowViolation(
                        ErrorCode.VALIDATION_FAILED,
                        "The number of pending columns must be zero or more",
                    )
                pending_names = config.pending_names(count)
        except WorkflowViolation as exc:
            return self._failure(op, exc)

        layout = build_board_layout(
            pending_names,
            initial_name=config.initial_name,
            final_name=config.final_name,
            cancel_name=config.cancel_name,
        )
        with self._store.transaction() as txn:
            board_id, columns = txn.insert_board(name, layout, now_iso())

        log.debug("board.created", board_id=board_id, columns=len(columns))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": board_id,
                "name": name,
                "columns": [
                    {"id": info.id, "name": spec.name, "order": info.order, "kind": str(info.kind)}
                    for spec, info in zip(layout, columns, strict=True)
                ],
            },
        )

    @traced
    def delete_board(self, board_id: int) -> ServiceResult:
        """Delete a board together with its columns, cards and block records."""
        op = "delete_board"
        with self._store.transaction() as txn:
            if not txn.board_exists(board_id):
                return self._not_found(op, "board", board_id)
            txn.delete_board(board_id)

        log.debug("board.deleted", board_id=board_id)
        return ServiceResult(ok=True, op=op, data={"id": board_id})
