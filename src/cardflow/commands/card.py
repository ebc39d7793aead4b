"""Command group: card lifecycle (create, move, cancel, block, unblock) and lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from cardflow.commands._base import CardflowGroup
from cardflow.services.card import CardService
from cardflow.services.query import BoardQueryService, CardQueryService

if TYPE_CHECKING:
    from cardflow.commands._context import AppContext


_CARD_EXAMPLES = """\
  cardflow card create -b 1 "Write release notes" -d "For v2.0"
  cardflow card move -b 1 7
  cardflow card block -b 1 7 --reason "waiting on review"
  cardflow card unblock 7 --reason "review done"
  cardflow card cancel -b 1 7
  cardflow card show 7
  cardflow card history 7"""

_board_option = click.option(
    "-b", "--board", "board_id", type=int, required=True, help="Board the card belongs to."
)


def _board_columns(app: AppContext, board_id: int) -> dict[str, Any]:
    """Column metadata of *board_id*; exits with NOT_FOUND if the board is unknown."""
    result = BoardQueryService(app.store).board_columns(board_id)
    if not result.ok:
        app.emit(result)
    return result.data


@click.group(cls=CardflowGroup, examples=_CARD_EXAMPLES)
@click.pass_obj
def card(app: AppContext) -> None:
    """Create cards and move them through a board."""


@card.command("create", examples='cardflow card create -b 1 "Fix login" -d "Safari only"')
@_board_option
@click.argument("title")
@click.option("-d", "--description", default="", help="Card description.")
@click.pass_obj
def create_card(app: AppContext, board_id: int, title: str, description: str) -> None:
    """Create a card in the board's INITIAL column."""
    app.emit(CardService(app.store).create(board_id, title, description))


@card.command("move", examples="cardflow card move -b 1 7")
@_board_option
@click.argument("card_id", type=int)
@click.pass_obj
def move_card(app: AppContext, board_id: int, card_id: int) -> None:
    """Move a card to the next column of its board."""
    info = _board_columns(app, board_id)
    app.emit(CardService(app.store).move_to_next(card_id, info["columns"]))


@card.command("cancel", examples="cardflow card cancel -b 1 7")
@_board_option
@click.argument("card_id", type=int)
@click.pass_obj
def cancel_card(app: AppContext, board_id: int, card_id: int) -> None:
    """Move a card to the board's CANCEL column."""
    info = _board_columns(app, board_id)
    app.emit(
        CardService(app.store).cancel(card_id, info["cancel_column_id"], info["columns"])
    )


@card.command("block", examples='cardflow card block -b 1 7 -r "waiting on review"')
@_board_option
@click.argument("card_id", type=int)
@click.option("-r", "--reason", required=True, help="Why the card is blocked.")
@click.pass_obj
def block_card(app: AppContext, board_id: int, card_id: int, reason: str) -> None:
    """Block a card so it cannot move."""
    info = _board_columns(app, board_id)
    app.emit(CardService(app.store).block(card_id, reason, info["columns"]))


@card.command("unblock", examples='cardflow card unblock 7 -r "review done"')
@click.argument("card_id", type=int)
@click.option("-r", "--reason", required=True, help="Why the card is unblocked.")
@click.pass_obj
def unblock_card(app: AppContext, card_id: int, reason: str) -> None:
    """Unblock a blocked card."""
    app.emit(CardService(app.store).unblock(card_id, reason))


@card.command("show", examples="cardflow card show 7")
@click.argument("card_id", type=int)
@click.pass_obj
def show_card(app: AppContext, card_id: int) -> None:
    """Show a card's column and block state."""
    app.emit(CardQueryService(app.store).find_card_state(card_id))


@card.command("history", examples="cardflow card history 7")
@click.argument("card_id", type=int)
@click.pass_obj
def card_history(app: AppContext, card_id: int) -> None:
    """Show every time a card was blocked and unblocked."""
    app.emit(CardQueryService(app.store).block_history(card_id))
