"""Rich Console factory and theme for cardflow output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CARDFLOW_THEME = Theme(
    {
        "cf.ok": "bold green",
        "cf.error": "bold red",
        "cf.warning": "bold yellow",
        "cf.op": "bold cyan",
        "cf.key": "dim",
        "cf.id": "bold blue",
        "cf.title": "bold",
        "cf.blocked": "bold red",
        "cf.kind.INITIAL": "cyan",
        "cf.kind.PENDING": "yellow",
        "cf.kind.FINAL": "green",
        "cf.kind.CANCEL": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=CARDFLOW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a column kind."""
    return f"cf.kind.{kind}" if kind in {"INITIAL", "PENDING", "FINAL", "CANCEL"} else ""
