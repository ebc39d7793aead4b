"""Custom Click base classes with --examples support and error translation.

Provides CardflowCommand and CardflowGroup that accept an ``examples``
parameter.  When ``--examples`` is passed, the command prints usage
examples and exits.  Both translate storage and board-configuration
errors into a ``click.ClickException`` so they reach the user as a
one-line message with exit code 1.
"""

from __future__ import annotations

from typing import Any

import click
import structlog
from sqlalchemy.exc import SQLAlchemyError

from cardflow.domain.errors import ConfigurationError

log = structlog.get_logger(__name__)


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def _invoke_translating(invoke: Any, ctx: click.Context) -> Any:
    try:
        return invoke(ctx)
    except ConfigurationError as exc:
        log.error("board.misconfigured", error=str(exc))
        raise click.ClickException(f"Board configuration error: {exc}") from exc
    except SQLAlchemyError as exc:
        log.error("storage.failed", error=str(exc))
        raise click.ClickException(f"Storage error: {exc}") from exc


class CardflowCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def invoke(self, ctx: click.Context) -> Any:
        return _invoke_translating(super().invoke, ctx)


class CardflowGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = CardflowCommand`` so all subcommands accept the
    ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = CardflowCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
