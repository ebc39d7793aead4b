"""Card state machine rules.

A card sits in exactly one column and carries an orthogonal blocked
flag.  Cards in FINAL or CANCEL columns are terminal.  Each check below
inspects a fresh :class:`CardState` against the board's column metadata
and raises :class:`WorkflowViolation` when the transition is illegal;
none of them touch storage.
"""

from __future__ import annotations

from collections.abc import Sequence

from cardflow.domain.cards import CardState
from cardflow.domain.columns import (
    TERMINAL_KINDS,
    ColumnInfo,
    ColumnKind,
    find_column,
    next_column,
)
from cardflow.domain.errors import ErrorCode, WorkflowViolation


def _locate(state: CardState, columns: Sequence[ColumnInfo]) -> ColumnInfo:
    current = find_column(columns, state.column_id)
    if current is None:
        raise WorkflowViolation(
            ErrorCode.INVALID_STATE,
            f"Card {state.id} belongs to a different board",
        )
    return current


def _movable_position(state: CardState, columns: Sequence[ColumnInfo]) -> ColumnInfo:
    """Shared guards of move and cancel; returns the current column."""
    if state.blocked:
        raise WorkflowViolation(
            ErrorCode.CARD_BLOCKED,
            f"Card {state.id} is blocked, it must be unblocked before moving",
        )
    current = _locate(state, columns)
    if current.kind == ColumnKind.FINAL:
        raise WorkflowViolation(ErrorCode.CARD_FINISHED, f"Card {state.id} is already finished")
    if current.kind == ColumnKind.CANCEL:
        raise WorkflowViolation(ErrorCode.INVALID_STATE, f"Card {state.id} is cancelled")
    return current


def check_move(state: CardState, columns: Sequence[ColumnInfo]) -> ColumnInfo:
    """Validate a move to the next column and return that column."""
    current = _movable_position(state, columns)
    target = next_column(columns, current.order)
    if target is None:
        raise WorkflowViolation(
            ErrorCode.INVALID_STATE,
            f"Card {state.id} is at the end of the board flow",
        )
    return target


def check_cancel(
    state: CardState, columns: Sequence[ColumnInfo], cancel_column_id: int
) -> ColumnInfo:
    """Validate cancelling a card into *cancel_column_id* and return that column.

    Same guards as :func:`check_move`: a card with no successor column is
    past the end of the flow and cannot be cancelled either.  The
    destination must be a CANCEL column of the same board.
    """
    check_move(state, columns)
    target = find_column(columns, cancel_column_id)
    if target is None or target.kind != ColumnKind.CANCEL:
        raise WorkflowViolation(
            ErrorCode.INVALID_STATE,
            f"Column {cancel_column_id} is not a cancel column of this board",
        )
    return target


def check_block(state: CardState, columns: Sequence[ColumnInfo]) -> None:
    """Validate blocking a card."""
    if state.blocked:
        raise WorkflowViolation(ErrorCode.CARD_BLOCKED, f"Card {state.id} is already blocked")
    current = _locate(state, columns)
    if current.kind in TERMINAL_KINDS:
        raise WorkflowViolation(
            ErrorCode.INVALID_STATE,
            f"Card {state.id} is in a {current.kind} column and cannot be blocked",
        )


def check_unblock(state: CardState) -> None:
    """Validate unblocking a card."""
    if not state.blocked:
        raise WorkflowViolation(ErrorCode.CARD_BLOCKED, f"Card {state.id} is not blocked")
