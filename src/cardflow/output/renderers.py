"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cardflow.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from cardflow.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict))
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cf.ok"), Text(f"  {result.op}", style="cf.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="cf.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="cf.id")
    elif key == "title":
        v = Text(str(value), style="cf.title")
    elif key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    telemetry = result.meta.get("telemetry")
    if telemetry:
        console.print(
            Text(f"  {telemetry['duration_ms']:.2f}ms  {telemetry['name']}", style="dim")
        )


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            continue
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    code = error.code if error else "ERROR"
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="cf.error"),
        Text(f"  {result.op}", style="cf.op"),
        Text(f"  [{code}] {message}"),
    )
    if verbose and error and error.detail:
        console.print(Text("  detail:", style="cf.key"))
        for key, value in error.detail.items():
            _field(console, f"  {key}", value)


def _render_card(result: ServiceResult, console: Console) -> None:
    data = result.data
    lines = Text()
    lines.append(f"{data.get('description') or '(no description)'}\n")
    if data.get("blocked"):
        lines.append(f"Blocked: {data.get('block_reason')}", style="cf.blocked")
        if data.get("blocked_at"):
            lines.append(f" (since {data['blocked_at']})", style="dim")
        lines.append("\n")
    else:
        lines.append("Not blocked\n")
    lines.append(f"Blocked {data.get('blocks_amount', 0)} time(s)\n")
    lines.append(f"Column {data.get('column_id')} - {data.get('column_name')}")
    title = escape(f"Card {data.get('id')} - {data.get('title')}")
    console.print(Panel(lines, title=title, expand=False))


def _render_board(result: ServiceResult, console: Console) -> None:
    data = result.data
    table = Table(title=escape(f"Board {data.get('id')} - {data.get('name')}"))
    table.add_column("Order", justify="right")
    table.add_column("ID", style="cf.id")
    table.add_column("Column")
    table.add_column("Kind")
    table.add_column("Cards", justify="right")
    for col in data.get("columns", []):
        table.add_row(
            str(col["order"]),
            str(col["id"]),
            Text(col["name"]),
            Text(col["kind"], style=style_for_kind(col["kind"])),
            str(col.get("cards_amount", 0)),
        )
    console.print(table)


def _render_column(result: ServiceResult, console: Console) -> None:
    data = result.data
    kind = data.get("kind", "")
    console.print(
        Text(f"Column {data.get('id')} - {data.get('name')} ", style="cf.title"),
        Text(f"[{kind}]", style=style_for_kind(kind)),
    )
    cards = data.get("cards", [])
    if not cards:
        console.print(Text("  (no cards)", style="dim"))
        return
    table = Table()
    table.add_column("ID", style="cf.id")
    table.add_column("Title", style="cf.title")
    table.add_column("Description")
    for card in cards:
        table.add_row(str(card["id"]), Text(card["title"]), Text(card.get("description", "")))
    console.print(table)


def _render_board_list(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print(Text("No boards.", style="dim"))
        return
    table = Table(title="Boards")
    table.add_column("ID", style="cf.id")
    table.add_column("Name")
    for item in items:
        table.add_row(str(item["id"]), Text(item["name"]))
    console.print(table)


def _render_block_history(result: ServiceResult, console: Console) -> None:
    data = result.data
    table = Table(title=f"Blocks of card {data.get('id')}")
    table.add_column("Blocked at")
    table.add_column("Reason")
    table.add_column("Unblocked at")
    table.add_column("Unblock reason")
    for rec in data.get("items", []):
        table.add_row(
            rec["blocked_at"],
            Text(rec["block_reason"]),
            rec.get("unblocked_at") or "-",
            Text(rec.get("unblock_reason") or "-"),
        )
    console.print(table)


def _render_created_board(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "id", result.data.get("id"))
    _field(console, "name", result.data.get("name"))
    for col in result.data.get("columns", []):
        console.print(
            Text(f"    {col['order']}. ", style="dim"),
            Text(f"{col['name']} ", style="cf.title"),
            Text(f"[{col['kind']}]", style=style_for_kind(col["kind"])),
            Text(f"  id={col['id']}", style="dim"),
        )


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "show_card": _render_card,
    "show_board": _render_board,
    "show_column": _render_column,
    "list_boards": _render_board_list,
    "block_history": _render_block_history,
    "create_board": _render_created_board,
}
