"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from retailid.output.console import create_console, get_output, style_for_encoding

if TYPE_CHECKING:
    from rich.console import Console

    from retailid.services.result import ServiceResult


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

    URLs for encode-style ops, ``<batch_id> <index>`` for resolve.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("url", "")) for item in items if isinstance(item, dict))
    if "url" in result.data:
        return str(result.data["url"])
    if "batch_id" in result.data:
        return f"{result.data['batch_id']} {result.data.get('index', '')}".rstrip()
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="rid.ok")
    op = Text(f"  {result.op}", style="rid.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="rid.key")
    if key == "id" or key == "batch_id":
        v = Text(str(value), style="rid.id")
    elif key == "url":
        v = Text(str(value), style="rid.url")
    elif key == "encoding":
        v = Text(str(value), style=style_for_encoding(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  ! {warning}", style="rid.warning"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rid.error")
    op = Text(f"  {result.op}", style="rid.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_resolved(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render resolve/convert results."""
    _status_line(console, result)
    for key in ("batch_id", "index", "encoding", "domain", "short_code", "url"):
        if key in result.data and result.data[key] is not None:
            _field(console, key, result.data[key])
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_encoded(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render encode results."""
    _status_line(console, result)
    for key in ("url", "batch_id", "index", "encoding"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_generated(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render generate results as a table of batch IDs and URLs."""
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Batch ID", style="rid.id", no_wrap=True)
    table.add_column("Index", justify="right")
    table.add_column("URL", style="rid.url", no_wrap=True)
    for item in result.data.get("items", []):
        table.add_row(str(item.get("id", "")), str(item.get("index", "")), str(item.get("url", "")))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "resolve": _render_resolved,
    "convert": _render_resolved,
    "encode": _render_encoded,
    "generate": _render_generated,
}
