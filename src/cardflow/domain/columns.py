"""Column Flow Model: a board's ordered columns and their kinds.

A board is a dense sequence of columns ordered from 0.  The flow is
always ``INITIAL -> PENDING* -> FINAL -> CANCEL``: cards advance one
column at a time, and cancelled cards jump straight to the CANCEL
column.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel

from cardflow.domain.errors import ConfigurationError


class ColumnKind(StrEnum):
    """Role of a column in the board flow."""

    INITIAL = "INITIAL"
    PENDING = "PENDING"
    FINAL = "FINAL"
    CANCEL = "CANCEL"


TERMINAL_KINDS: frozenset[ColumnKind] = frozenset({ColumnKind.FINAL, ColumnKind.CANCEL})


class ColumnInfo(BaseModel):
    """Immutable column metadata handed to the workflow engine per operation."""

    model_config = {"frozen": True}

    id: int
    order: int
    kind: ColumnKind


class ColumnSpec(BaseModel):
    """A column to be created with a new board (no id yet)."""

    model_config = {"frozen": True}

    name: str
    order: int
    kind: ColumnKind


def build_board_layout(
    pending: Sequence[str],
    *,
    initial_name: str = "Initial",
    final_name: str = "Final",
    cancel_name: str = "Cancelled",
) -> list[ColumnSpec]:
    """Build the standard column layout for a new board.

    ``INITIAL`` at order 0, one ``PENDING`` column per name in *pending*,
    then ``FINAL`` and ``CANCEL`` as the last two columns.
    """
    specs = [ColumnSpec(name=initial_name, order=0, kind=ColumnKind.INITIAL)]
    for offset, name in enumerate(pending, start=1):
        specs.append(ColumnSpec(name=name, order=offset, kind=ColumnKind.PENDING))
    specs.append(ColumnSpec(name=final_name, order=len(pending) + 1, kind=ColumnKind.FINAL))
    specs.append(ColumnSpec(name=cancel_name, order=len(pending) + 2, kind=ColumnKind.CANCEL))
    return specs


def _unique_of_kind(columns: Sequence[ColumnInfo], kind: ColumnKind) -> ColumnInfo:
    matches = [c for c in columns if c.kind == kind]
    if not matches:
        raise ConfigurationError(f"Board has no {kind} column")
    if len(matches) > 1:
        raise ConfigurationError(f"Board has {len(matches)} {kind} columns, expected one")
    return matches[0]


def initial_column(columns: Sequence[ColumnInfo]) -> ColumnInfo:
    """The board's unique INITIAL column.

    Raises:
        ConfigurationError: If the board has no (or more than one) INITIAL column.
    """
    return _unique_of_kind(columns, ColumnKind.INITIAL)


def cancel_column(columns: Sequence[ColumnInfo]) -> ColumnInfo:
    """The board's unique CANCEL column.

    Raises:
        ConfigurationError: If the board has no (or more than one) CANCEL column.
    """
    return _unique_of_kind(columns, ColumnKind.CANCEL)


def next_column(columns: Sequence[ColumnInfo], current_order: int) -> ColumnInfo | None:
    """The column at ``current_order + 1``, or None at the end of the flow."""
    for column in columns:
        if column.order == current_order + 1:
            return column
    return None


def find_column(columns: Sequence[ColumnInfo], column_id: int) -> ColumnInfo | None:
    """Look up a column by id within *columns*."""
    for column in columns:
        if column.id == column_id:
            return column
    return None
