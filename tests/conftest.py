"""Shared pytest fixtures for cardflow tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from cardflow.config.settings import CardflowSettings
from cardflow.domain.columns import ColumnInfo
from cardflow.infrastructure.database.engine import init_database
from cardflow.infrastructure.store import Store
from cardflow.services.board import BoardService
from cardflow.services.card import CardService
from cardflow.services.query import BoardQueryService
from cardflow.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CARDFLOW_* environment out of the tests."""
    monkeypatch.delenv("CARDFLOW_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Undo what a CLI invocation leaves behind: root log handlers and telemetry."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(tmp_path: Path) -> Iterator[Store]:
    """A Store over a fresh database in a temp directory."""
    settings = CardflowSettings.from_cli(data_root=tmp_path)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def board(store: Store) -> dict[str, Any]:
    """Board with INITIAL(0), PENDING(1), FINAL(2), CANCEL(3).

    Returns the create_board payload plus ``infos`` (list of ColumnInfo)
    and ``by_kind`` (kind -> ColumnInfo).
    """
    result = BoardService(store).create_board("Scenario", pending_count=1)
    assert result.ok, result.error
    infos: list[ColumnInfo] = BoardQueryService(store).column_infos(result.data["id"])
    return {**result.data, "infos": infos, "by_kind": {str(c.kind): c for c in infos}}


@pytest.fixture
def new_card(store: Store, board: dict[str, Any]) -> int:
    """A freshly created card in the board's INITIAL column."""
    result = CardService(store).create(board["id"], "Write docs", "Usage guide")
    assert result.ok, result.error
    return int(result.data["id"])


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database."""
    monkeypatch.chdir(tmp_path)
