"""Tests for BoardService."""

from __future__ import annotations

from pathlib import Path

from cardflow.config.settings import CardflowSettings
from cardflow.domain.errors import ErrorCode
from cardflow.infrastructure.store import Store
from cardflow.services.board import BoardService
from cardflow.services.card import CardService
from cardflow.services.query import BoardQueryService


class TestCreateBoard:
    def test_default_layout(self, store: Store) -> None:
        result = BoardService(store).create_board("Sprint")
        assert result.ok
        cols = result.data["columns"]
        assert [(c["name"], c["order"], c["kind"]) for c in cols] == [
            ("Initial", 0, "INITIAL"),
            ("Pending 1", 1, "PENDING"),
            ("Final", 2, "FINAL"),
            ("Cancelled", 3, "CANCEL"),
        ]

    def test_named_pending_columns(self, store: Store) -> None:
        result = BoardService(store).create_board("Sprint", pending_names=["Doing", "Review"])
        names = [c["name"] for c in result.data["columns"]]
        assert names == ["Initial", "Doing", "Review", "Final", "Cancelled"]

    def test_zero_pending_columns(self, store: Store) -> None:
        result = BoardService(store).create_board("Tiny", pending_count=0)
        kinds = [c["kind"] for c in result.data["columns"]]
        assert kinds == ["INITIAL", "FINAL", "CANCEL"]

    def test_negative_pending_rejected(self, store: Store) -> None:
        result = BoardService(store).create_board("Bad", pending_count=-1)
        assert result.code == ErrorCode.VALIDATION_FAILED
        assert BoardQueryService(store).list_boards().data["count"] == 0

    def test_blank_name_rejected(self, store: Store) -> None:
        result = BoardService(store).create_board("  ")
        assert result.code == ErrorCode.VALIDATION_FAILED

    def test_names_and_count_together_rejected(self, store: Store) -> None:
        result = BoardService(store).create_board("Mixed", pending_names=["A"], pending_count=3)
        assert result.code == ErrorCode.VALIDATION_FAILED
        assert BoardQueryService(store).list_boards().data["count"] == 0

    def test_names_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "cardflow.toml").write_text(
            '[board]\ninitial_name = "Backlog"\nfinal_name = "Done"\n'
            'pending_prefix = "Step"\ndefault_pending = 2\n'
        )
        settings = CardflowSettings.from_cli(
            config_path=str(tmp_path / "cardflow.toml"), data_root=tmp_path
        )
        store = Store(settings)
        try:
            result = BoardService(store).create_board("Configured")
        finally:
            store.close()
        names = [c["name"] for c in result.data["columns"]]
        assert names == ["Backlog", "Step 1", "Step 2", "Done", "Cancelled"]


class TestDeleteBoard:
    def test_deletes_board_and_cards(self, store: Store, board: dict, new_card: int) -> None:
        result = BoardService(store).delete_board(board["id"])
        assert result.ok
        assert BoardQueryService(store).show_board(board["id"]).code == ErrorCode.NOT_FOUND
        assert CardService(store).unblock(new_card, "x").code == ErrorCode.NOT_FOUND

    def test_unknown_board(self, store: Store) -> None:
        result = BoardService(store).delete_board(404)
        assert result.code == ErrorCode.NOT_FOUND
