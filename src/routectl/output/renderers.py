"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from routectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from routectl.services.result import ServiceResult


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

    Route fragments and pattern lists are still printed (they are the
    payload); everything else collapses to a status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if result.op == "build_routes":
        return str(result.data.get("toml", "")).rstrip("\n")

    routes = result.data.get("routes")
    if routes and isinstance(routes, dict):
        return "\n".join(p for patterns in routes.values() for p in patterns)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="route.ok")
    op = Text(f"  {result.op}", style="route.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="route.key")
    v = Text(str(value), style="route.zone" if key == "zone_id" else "")
    console.print(k + v)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="route.error")
    op = Text(f"  {result.op}", style="route.op")
    console.print(label, op, Text(" - "), Text(msg))

    if err is None:
        return
    # Syntax errors are the point of a failed check; always list them.
    for line in err.detail.get("errors", []):
        console.print(Text(f"  {line}"))
    if verbose:
        for k, v in err.detail.items():
            if k != "errors":
                console.print(Text(f"  {k}: {v}", style="dim"))


# ── Route renderers ───────────────────────────────────────────────────


def _render_map(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-environment pattern lists, most specific first."""
    _status_line(console, result)
    for env, patterns in result.data.get("routes", {}).items():
        console.print(Text(f"  {env}:", style="route.env"))
        if not patterns:
            console.print(Text("    (no routes)", style="route.skipped"))
        for pattern in patterns:
            console.print(Text(f"    {pattern}", style="route.pattern"))
    if result.data.get("zone_id"):
        _field(console, "zone_id", result.data["zone_id"])
    if verbose:
        _field(console, "route_count", result.data.get("route_count", 0))


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Write the TOML fragment verbatim so stdout can be piped into a file."""
    console.out(str(result.data.get("toml", "")), end="", highlight=False)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "map_routes": _render_map,
    "build_routes": _render_build,
    "validate": _render_generic,
    "zone": _render_generic,
}
