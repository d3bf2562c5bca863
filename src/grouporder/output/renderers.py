"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from grouporder.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from grouporder.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Sorted records come out as JSON lines so they pipe cleanly.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "sort":
        return "\n".join(_compact(item) for item in result.data.get("items", []))
    if "order" in result.data:
        return " ".join(result.data["order"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "go.ok"), (f"  {result.op}", "go.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="go.key")
    if key == "kind":
        v = Text(str(value), style="go.kind")
    elif isinstance(value, (dict, list)):
        v = Text(_compact(value))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    if span_data.get("annotations"):
        extras = [f"{ak}={av}" for ak, av in span_data["annotations"].items()]
        line += f"  ({', '.join(extras)})"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "go.error"), (f"  {result.op}", "go.op"), " — ", msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_kinds(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_kinds as a table of kinds and their default order."""
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print(Text("  No kinds configured.", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind", style="go.kind", no_wrap=True)
    table.add_column("Groups")
    table.add_column("Orderings", style="dim")
    for item in items:
        table.add_row(
            str(item["name"]),
            ", ".join(item["groups"]),
            ", ".join(item["orderings"]),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render describe as a rank -> group table."""
    _status_line(console, result)
    _field(console, "kind", result.data.get("kind", ""))
    _field(console, "is_default", result.data.get("is_default", False))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Rank", style="go.rank", justify="right")
    table.add_column("Group", style="go.group")
    for name, rank in result.data.get("ranks", {}).items():
        table.add_row(str(rank), name)
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_sort(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render sort results: per-group counts, then one record per line."""
    _status_line(console, result)
    _field(console, "kind", result.data.get("kind", ""))
    _field(console, "field", result.data.get("field", ""))
    _field(console, "order", result.data.get("order", []))
    _field(console, "group_counts", result.data.get("group_counts", {}))
    _field(console, "count", result.data.get("count", 0))
    for item in result.data.get("items", []):
        console.print(f"  {_compact(item)}", markup=False)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_kinds": _render_kinds,
    "describe": _render_describe,
    "validate": _render_generic,
    "sort": _render_sort,
}
