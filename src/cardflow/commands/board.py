"""Command group: board creation, inspection, deletion and the interactive menu."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cardflow.commands._base import CardflowGroup
from cardflow.services.board import BoardService
from cardflow.services.query import BoardQueryService

if TYPE_CHECKING:
    from cardflow.commands._context import AppContext


_BOARD_EXAMPLES = """\
  cardflow board create "Sprint 12" --pending 2
  cardflow board create "Release" --column Doing --column Review
  cardflow board list
  cardflow board show 1
  cardflow board column 3
  cardflow board open 1
  cardflow board delete 1 --yes"""


@click.group(cls=CardflowGroup, examples=_BOARD_EXAMPLES)
@click.pass_obj
def board(app: AppContext) -> None:
    """Create, inspect and delete boards."""


@board.command("create", examples='cardflow board create "Sprint 12" --pending 2')
@click.argument("name")
@click.option(
    "--pending",
    "pending_count",
    type=int,
    default=None,
    help="Number of PENDING columns (default from [board] config). Not with --column.",
)
@click.option(
    "--column",
    "pending_names",
    multiple=True,
    help="Name of a PENDING column, in flow order (repeatable). Not with --pending.",
)
@click.pass_obj
def create_board(
    app: AppContext,
    name: str,
    pending_count: int | None,
    pending_names: tuple[str, ...],
) -> None:
    """Create a board with INITIAL, PENDING, FINAL and CANCEL columns."""
    result = BoardService(app.store).create_board(
        name,
        pending_names=list(pending_names) if pending_names else None,
        pending_count=pending_count,
    )
    app.emit(result)


@board.command("list", examples="cardflow board list")
@click.pass_obj
def list_boards(app: AppContext) -> None:
    """List all boards."""
    app.emit(BoardQueryService(app.store).list_boards())


@board.command("show", examples="cardflow board show 1")
@click.argument("board_id", type=int)
@click.pass_obj
def show_board(app: AppContext, board_id: int) -> None:
    """Show a board's columns and how many cards each holds."""
    app.emit(BoardQueryService(app.store).show_board(board_id))


@board.command("column", examples="cardflow board column 3")
@click.argument("column_id", type=int)
@click.pass_obj
def show_column(app: AppContext, column_id: int) -> None:
    """Show a column and the cards in it."""
    app.emit(BoardQueryService(app.store).show_column(column_id))


@board.command("delete", examples="cardflow board delete 1 --yes")
@click.argument("board_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete_board(app: AppContext, board_id: int, yes: bool) -> None:
    """Delete a board with all of its columns, cards and block history."""
    if not yes and not app.settings.no_interact:
        click.confirm(f"Delete board {board_id} and all its cards?", abort=True)
    app.emit(BoardService(app.store).delete_board(board_id))


@board.command("open", examples="cardflow board open 1")
@click.argument("board_id", type=int)
@click.pass_obj
def open_board(app: AppContext, board_id: int) -> None:
    """Work on a board interactively."""
    from cardflow.commands.menu import BoardMenu

    columns = BoardQueryService(app.store).board_columns(board_id)
    if not columns.ok:
        app.emit(columns)
    BoardMenu(app, board_id).run()
