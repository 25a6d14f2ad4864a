"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; :func:`render_result`
returns the captured text. Renderers are dispatched by ``result.op``;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cnpjtools.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from cnpjtools.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]

# Data key printed by --quiet for single-value operations.
_QUIET_KEYS: dict[str, str] = {
    "mask": "masked",
    "format": "formatted",
    "check_digits": "formatted",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose and result.meta:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key is not None:
        return str(result.data.get(key, ""))

    items = result.data.get("items")
    if result.op == "generate" and isinstance(items, list):
        return "\n".join(str(item) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cnpj.ok"), Text(f"  {result.op}", style="cnpj.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="cnpj.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    console.print(Text("  meta:", style="dim"))
    for key, value in (result.meta or {}).items():
        console.print(f"    {key}: {value}")


def _validation_table(items: list[dict[str, Any]]) -> Table:
    """Build a table with one row per validated input."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", no_wrap=True)
    table.add_column("CNPJ", style="cnpj.value", no_wrap=True)
    table.add_column("Status")
    table.add_column("Message")

    for item in items:
        status = str(item.get("status", ""))
        table.add_row(
            Text(str(item.get("input", ""))),
            str(item.get("cnpj") or ""),
            Text(status, style=style_for_status(status)),
            str(item.get("message", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cnpj.error"),
        Text(f"  {result.op}", style="cnpj.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )

    items = result.data.get("items")
    if result.op == "validate" and items:
        console.print(_validation_table(items))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    console.print(_validation_table(result.data.get("items", [])))


def _render_generate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for item in result.data.get("items", []):
        console.print(Text(f"  {item}", style="cnpj.value"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs.

    Covers the single-value operations (mask, format, check digits).
    """
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "validate": _render_validate,
    "generate": _render_generate,
}
