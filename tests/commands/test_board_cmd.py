"""Tests for the ``cardflow board`` command group."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from cardflow.cli import cli


def _json(cli_runner: CliRunner, *args: str) -> dict[str, Any]:
    result = cli_runner.invoke(cli, ["--json", *args])
    return json.loads(result.output)


@pytest.mark.usefixtures("_isolated_root")
class TestBoardCreate:
    def test_create_default_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "board", "create", "Sprint 12"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["ok"] is True
        assert [c["kind"] for c in payload["data"]["columns"]] == [
            "INITIAL",
            "PENDING",
            "FINAL",
            "CANCEL",
        ]

    def test_create_with_pending_count(self, cli_runner: CliRunner) -> None:
        payload = _json(cli_runner, "board", "create", "Wide", "--pending", "3")
        assert len(payload["data"]["columns"]) == 6

    def test_create_with_named_columns(self, cli_runner: CliRunner) -> None:
        payload = _json(
            cli_runner, "board", "create", "Release", "--column", "Doing", "--column", "Review"
        )
        names = [c["name"] for c in payload["data"]["columns"]]
        assert names == ["Initial", "Doing", "Review", "Final", "Cancelled"]

    def test_pending_and_column_together_fail(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "board", "create", "Mixed", "--pending", "3", "--column", "A"]
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "VALIDATION_FAILED"

    def test_blank_name_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "board", "create", " "])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "VALIDATION_FAILED"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "create", "Sprint"])
        assert result.exit_code == 0
        assert "create_board" in result.output
        assert "[CANCEL]" in result.output

    def test_quiet_prints_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "board", "create", "Sprint"])
        assert result.output.strip() == "1"


@pytest.mark.usefixtures("_isolated_root")
class TestBoardQueries:
    def test_list(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["board", "create", "A"])
        cli_runner.invoke(cli, ["board", "create", "B"])
        payload = _json(cli_runner, "board", "list")
        assert [b["name"] for b in payload["data"]["items"]] == ["A", "B"]

    def test_list_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "list"])
        assert result.exit_code == 0
        assert "No boards." in result.output

    def test_show(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["board", "create", "Sprint"])
        result = cli_runner.invoke(cli, ["board", "show", "1"])
        assert result.exit_code == 0
        assert "Board 1 - Sprint" in result.output

    def test_show_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "show", "42"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output

    def test_column(self, cli_runner: CliRunner) -> None:
        created = _json(cli_runner, "board", "create", "Sprint")
        initial_id = created["data"]["columns"][0]["id"]
        _json(cli_runner, "card", "create", "-b", "1", "Fix login")
        payload = _json(cli_runner, "board", "column", str(initial_id))
        assert [c["title"] for c in payload["data"]["cards"]] == ["Fix login"]


@pytest.mark.usefixtures("_isolated_root")
class TestBoardDelete:
    def test_delete_with_yes(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["board", "create", "Sprint"])
        result = cli_runner.invoke(cli, ["--json", "board", "delete", "1", "--yes"])
        assert result.exit_code == 0, result.output
        assert _json(cli_runner, "board", "list")["data"]["count"] == 0

    def test_delete_confirm_declined(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["board", "create", "Sprint"])
        result = cli_runner.invoke(cli, ["board", "delete", "1"], input="n\n")
        assert result.exit_code == 1
        assert _json(cli_runner, "board", "list")["data"]["count"] == 1

    def test_no_interact_skips_prompt(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["board", "create", "Sprint"])
        result = cli_runner.invoke(cli, ["--no-interact", "board", "delete", "1"])
        assert result.exit_code == 0, result.output

    def test_delete_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "board", "delete", "9", "--yes"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"


@pytest.mark.usefixtures("_isolated_root")
class TestExamples:
    def test_group_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "--examples"])
        assert result.exit_code == 0
        assert "cardflow board open 1" in result.output

    def test_command_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "delete", "--examples"])
        assert result.exit_code == 0
        assert "--yes" in result.output
