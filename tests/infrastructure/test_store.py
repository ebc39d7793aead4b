"""Tests for the Store unit of work and its persistence port."""

from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy import func, select

from cardflow.domain.columns import ColumnKind, build_board_layout
from cardflow.infrastructure.database.schema import board_columns, boards, cards
from cardflow.infrastructure.store import Store


class TestTransaction:
    def test_commits_on_success(self, store: Store) -> None:
        with store.transaction() as txn:
            board_id, _ = txn.insert_board("B", build_board_layout([]), "2026-01-01")
        with store.engine.connect() as conn:
            row = conn.execute(select(boards.c.name).where(boards.c.id == board_id)).one()
        assert row.name == "B"

    def test_rolls_back_and_reraises(self, store: Store) -> None:
        class Boom(Exception):
            pass

        with pytest.raises(Boom):
            with store.transaction() as txn:
                txn.insert_board("B", build_board_layout(["Doing"]), "2026-01-01")
                raise Boom

        with store.engine.connect() as conn:
            assert conn.execute(select(func.count()).select_from(boards)).scalar_one() == 0
            assert conn.execute(select(func.count()).select_from(board_columns)).scalar_one() == 0


class TestPersistencePort:
    def test_insert_board_returns_column_infos(self, store: Store) -> None:
        with store.transaction() as txn:
            board_id, infos = txn.insert_board("B", build_board_layout(["Doing"]), "now")
            assert txn.column_infos(board_id) == infos
        assert [c.kind for c in infos] == [
            ColumnKind.INITIAL,
            ColumnKind.PENDING,
            ColumnKind.FINAL,
            ColumnKind.CANCEL,
        ]

    def test_load_missing_card(self, store: Store) -> None:
        with store.transaction() as txn:
            assert txn.load_card_state(12345) is None

    def test_card_roundtrip_through_port(self, store: Store, board: dict[str, Any]) -> None:
        initial = board["by_kind"]["INITIAL"]
        pending = board["by_kind"]["PENDING"]
        with store.transaction() as txn:
            card_id = txn.insert_card("T", "D", initial.id, "now")
            txn.move_card(card_id, pending.id)
            txn.append_block(card_id, "waiting", "t1")
        with store.transaction() as txn:
            state = txn.load_card_state(card_id)
        assert state is not None
        assert state.column_id == pending.id
        assert state.column_name == "Pending 1"
        assert state.blocked is True
        assert state.block_reason == "waiting"
        assert state.blocked_at == "t1"
        assert state.blocks_amount == 1

    def test_close_block_updates_snapshot(self, store: Store, new_card: int) -> None:
        with store.transaction() as txn:
            txn.append_block(new_card, "waiting", "t1")
            txn.close_block(new_card, "done", "t2")
            state = txn.load_card_state(new_card)
            history = txn.block_history(new_card)
        assert state is not None
        assert state.blocked is False
        assert state.block_reason is None
        assert state.blocks_amount == 1
        assert history[0].unblock_reason == "done"

    def test_delete_board(self, store: Store, board: dict[str, Any], new_card: int) -> None:
        with store.transaction() as txn:
            assert txn.board_exists(board["id"])
            txn.delete_board(board["id"])
            assert not txn.board_exists(board["id"])
        with store.engine.connect() as conn:
            assert conn.execute(select(func.count()).select_from(cards)).scalar_one() == 0
