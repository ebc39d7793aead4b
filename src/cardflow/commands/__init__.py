"""Subcommand modules for cardflow.

Provides register_commands() which uses deferred imports to keep
``cardflow --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``board`` and ``card`` command groups on the root CLI group."""
    from cardflow.commands.board import board
    from cardflow.commands.card import card

    cli.add_command(board)
    cli.add_command(card)
