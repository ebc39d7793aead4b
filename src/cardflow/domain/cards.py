"""Read-only snapshots returned by the card and board queries."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cardflow.domain.columns import ColumnKind


class CardState(BaseModel):
    """Point-in-time view of a card, re-read before every workflow decision.

    Attributes:
        blocked: True while the card has an open block record.
        block_reason: Reason of the open block, if any.
        blocked_at: ISO timestamp of the open block, if any.
        blocks_amount: Total number of block records (open or closed).
        column_id: Id of the column currently holding the card.
    """

    model_config = {"frozen": True}

    id: int
    title: str
    description: str = ""
    blocked: bool = False
    blocked_at: str | None = None
    block_reason: str | None = None
    blocks_amount: int = 0
    column_id: int
    column_name: str


class BlockRecord(BaseModel):
    """One block interval of a card; open while ``unblocked_at`` is None."""

    model_config = {"frozen": True}

    id: int
    card_id: int
    blocked_at: str
    block_reason: str
    unblocked_at: str | None = None
    unblock_reason: str | None = None

    @property
    def is_open(self) -> bool:
        return self.unblocked_at is None


class CardSummary(BaseModel):
    """Card row as listed inside a column."""

    model_config = {"frozen": True}

    id: int
    title: str
    description: str = ""


class ColumnDetail(BaseModel):
    """A column with the cards it currently holds."""

    model_config = {"frozen": True}

    id: int
    board_id: int
    name: str
    order: int
    kind: ColumnKind
    cards: list[CardSummary] = Field(default_factory=list)


class ColumnOverview(BaseModel):
    """A column inside a board overview (card count only)."""

    model_config = {"frozen": True}

    id: int
    name: str
    order: int
    kind: ColumnKind
    cards_amount: int = 0


class BoardDetail(BaseModel):
    """A board with its ordered columns."""

    model_config = {"frozen": True}

    id: int
    name: str
    columns: list[ColumnOverview] = Field(default_factory=list)
