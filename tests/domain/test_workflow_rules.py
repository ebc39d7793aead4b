"""Tests for the pure card state machine rules."""

import pytest

from cardflow.domain.cards import CardState
from cardflow.domain.columns import ColumnInfo, ColumnKind
from cardflow.domain.errors import ErrorCode, WorkflowViolation
from cardflow.domain.workflow import check_block, check_cancel, check_move, check_unblock

COLUMNS = [
    ColumnInfo(id=1, order=0, kind=ColumnKind.INITIAL),
    ColumnInfo(id=2, order=1, kind=ColumnKind.PENDING),
    ColumnInfo(id=3, order=2, kind=ColumnKind.FINAL),
    ColumnInfo(id=4, order=3, kind=ColumnKind.CANCEL),
]


def _state(column_id: int, *, blocked: bool = False) -> CardState:
    return CardState(
        id=7,
        title="Card",
        column_id=column_id,
        column_name=f"col-{column_id}",
        blocked=blocked,
        block_reason="waiting" if blocked else None,
        blocks_amount=1 if blocked else 0,
    )


def _code(exc_info: pytest.ExceptionInfo[WorkflowViolation]) -> ErrorCode:
    return exc_info.value.code


class TestCheckMove:
    def test_initial_to_pending(self) -> None:
        assert check_move(_state(1), COLUMNS).id == 2

    def test_pending_to_final(self) -> None:
        assert check_move(_state(2), COLUMNS).id == 3

    def test_blocked_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_move(_state(2, blocked=True), COLUMNS)
        assert _code(exc_info) == ErrorCode.CARD_BLOCKED
        assert "unblocked" in exc_info.value.message

    def test_final_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_move(_state(3), COLUMNS)
        assert _code(exc_info) == ErrorCode.CARD_FINISHED

    def test_cancel_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_move(_state(4), COLUMNS)
        assert _code(exc_info) == ErrorCode.INVALID_STATE

    def test_foreign_column_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_move(_state(99), COLUMNS)
        assert _code(exc_info) == ErrorCode.INVALID_STATE
        assert "different board" in exc_info.value.message

    def test_no_successor_rejected(self) -> None:
        # A board whose last column is a PENDING one.
        truncated = COLUMNS[:2]
        with pytest.raises(WorkflowViolation) as exc_info:
            check_move(_state(2), truncated)
        assert _code(exc_info) == ErrorCode.INVALID_STATE

    def test_blocked_checked_before_column(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_move(_state(99, blocked=True), COLUMNS)
        assert _code(exc_info) == ErrorCode.CARD_BLOCKED


class TestCheckCancel:
    @pytest.mark.parametrize("column_id", [1, 2])
    def test_allowed_before_final(self, column_id: int) -> None:
        assert check_cancel(_state(column_id), COLUMNS, 4).id == 4

    def test_final_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_cancel(_state(3), COLUMNS, 4)
        assert _code(exc_info) == ErrorCode.CARD_FINISHED

    def test_already_cancelled_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_cancel(_state(4), COLUMNS, 4)
        assert _code(exc_info) == ErrorCode.INVALID_STATE

    def test_blocked_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_cancel(_state(1, blocked=True), COLUMNS, 4)
        assert _code(exc_info) == ErrorCode.CARD_BLOCKED

    def test_no_successor_rejected(self) -> None:
        # A board whose last column is a PENDING one.
        truncated = COLUMNS[:2]
        with pytest.raises(WorkflowViolation) as exc_info:
            check_cancel(_state(2), truncated, 4)
        assert _code(exc_info) == ErrorCode.INVALID_STATE
        assert "end of the board flow" in exc_info.value.message

    @pytest.mark.parametrize("target", [1, 2, 3, 99])
    def test_target_must_be_cancel_column(self, target: int) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_cancel(_state(1), COLUMNS, target)
        assert _code(exc_info) == ErrorCode.INVALID_STATE
        assert "not a cancel column" in exc_info.value.message


class TestCheckBlock:
    @pytest.mark.parametrize("column_id", [1, 2])
    def test_allowed_outside_terminal_columns(self, column_id: int) -> None:
        check_block(_state(column_id), COLUMNS)

    @pytest.mark.parametrize("column_id", [3, 4])
    def test_terminal_columns_rejected(self, column_id: int) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_block(_state(column_id), COLUMNS)
        assert _code(exc_info) == ErrorCode.INVALID_STATE

    def test_already_blocked_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_block(_state(2, blocked=True), COLUMNS)
        assert _code(exc_info) == ErrorCode.CARD_BLOCKED
        assert "already blocked" in exc_info.value.message


class TestCheckUnblock:
    def test_blocked_card_allowed(self) -> None:
        check_unblock(_state(2, blocked=True))

    def test_unblocked_card_rejected(self) -> None:
        with pytest.raises(WorkflowViolation) as exc_info:
            check_unblock(_state(2))
        assert _code(exc_info) == ErrorCode.CARD_BLOCKED
        assert "not blocked" in exc_info.value.message
