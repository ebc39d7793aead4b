"""Interactive board menu.

All prompting for an action happens before its service call, so no
unit of work is ever open while waiting for input.  A failed action is
displayed and the loop continues; storage and board-configuration
errors are logged, displayed, and the loop continues as well.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click
import structlog
from sqlalchemy.exc import SQLAlchemyError

from cardflow.domain.errors import ConfigurationError
from cardflow.services.card import CardService
from cardflow.services.query import BoardQueryService, CardQueryService

if TYPE_CHECKING:
    from cardflow.commands._context import AppContext
    from cardflow.domain.columns import ColumnInfo
    from cardflow.services.result import ServiceResult

log = structlog.get_logger(__name__)

EXIT_OPTION = 9


class BoardMenu:
    """Menu loop over one board."""

    def __init__(self, app: AppContext, board_id: int) -> None:
        self._app = app
        self._board_id = board_id
        self._actions: dict[int, tuple[str, Callable[[], ServiceResult]]] = {
            1: ("Create a card", self._create_card),
            2: ("Move a card to the next column", self._move_card),
            3: ("Block a card", self._block_card),
            4: ("Unblock a card", self._unblock_card),
            5: ("Cancel a card", self._cancel_card),
            6: ("Show board", self._show_board),
            7: ("Show a column with its cards", self._show_column),
            8: ("Show a card", self._show_card),
        }

    def run(self) -> None:
        click.echo(f"Board {self._board_id}: choose an operation")
        while True:
            for number, (label, _) in self._actions.items():
                click.echo(f"{number} - {label}")
            click.echo(f"{EXIT_OPTION} - Back")
            option = click.prompt("Option", type=int)
            if option == EXIT_OPTION:
                return
            action = self._actions.get(option)
            if action is None:
                click.echo("Invalid option, choose one from the menu")
                continue
            try:
                self._app.render(action[1]())
            except (ConfigurationError, SQLAlchemyError) as exc:
                log.error("menu.action_failed", option=option, error=str(exc))
                click.echo(f"Error: {exc}", err=True)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _columns(self) -> list[ColumnInfo]:
        return BoardQueryService(self._app.store).column_infos(self._board_id)

    def _create_card(self) -> ServiceResult:
        title = click.prompt("Card title")
        description = click.prompt("Card description", default="", show_default=False)
        return CardService(self._app.store).create(self._board_id, title, description)

    def _move_card(self) -> ServiceResult:
        card_id = click.prompt("Id of the card to move", type=int)
        return CardService(self._app.store).move_to_next(card_id, self._columns())

    def _block_card(self) -> ServiceResult:
        card_id = click.prompt("Id of the card to block", type=int)
        reason = click.prompt("Block reason")
        return CardService(self._app.store).block(card_id, reason, self._columns())

    def _unblock_card(self) -> ServiceResult:
        card_id = click.prompt("Id of the card to unblock", type=int)
        reason = click.prompt("Unblock reason")
        return CardService(self._app.store).unblock(card_id, reason)

    def _cancel_card(self) -> ServiceResult:
        card_id = click.prompt("Id of the card to cancel", type=int)
        info = BoardQueryService(self._app.store).board_columns(self._board_id)
        if not info.ok:
            return info
        return CardService(self._app.store).cancel(
            card_id, info.data["cancel_column_id"], info.data["columns"]
        )

    def _show_board(self) -> ServiceResult:
        return BoardQueryService(self._app.store).show_board(self._board_id)

    def _show_column(self) -> ServiceResult:
        columns = {c.id for c in self._columns()}
        column_id = click.prompt(
            "Column id",
            type=click.Choice([str(c) for c in sorted(columns)]),
        )
        return BoardQueryService(self._app.store).show_column(int(column_id))

    def _show_card(self) -> ServiceResult:
        card_id = click.prompt("Id of the card to show", type=int)
        return CardQueryService(self._app.store).find_card_state(card_id)
