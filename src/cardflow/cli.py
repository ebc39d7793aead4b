"""Root CLI group for cardflow with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from cardflow import __version__
from cardflow.commands import register_commands
from cardflow.commands._context import AppContext
from cardflow.config.settings import CardflowSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cardflow")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--log-sql", is_flag=True, help="Log the SQL of each card and board operation.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-r",
    "--root",
    "data_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the .cardflow/ board store (default: discovered).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    log_sql: bool,
    no_interact: bool,
    config_path: str | None,
    data_root: Path | None,
) -> None:
    """cardflow: task boards with a validated card workflow.

    Boards run INITIAL -> PENDING* -> FINAL, with a CANCEL column on the side.
    Use `cardflow board open ID` for the interactive menu.
    """
    ctx.ensure_object(dict)
    settings = CardflowSettings.from_cli(
        config_path=config_path,
        data_root=data_root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        log_sql=log_sql,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
