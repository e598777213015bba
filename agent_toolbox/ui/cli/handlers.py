"""
Command handlers for CLI.
"""
from __future__ import annotations

import json
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.box import ROUNDED
from rich.text import Text

from agent_toolbox.interfaces.services.tools import IToolCatalog, IToolInvocationAdapter


def list_tools(console: Console, catalog: IToolCatalog) -> None:
    """Render a table of registered tools."""
    table = Table(title="Registered Tools", box=ROUNDED)
    table.add_column("Name", no_wrap=True)
    table.add_column("Description")
    table.add_column("Operations")

    for descriptor in catalog.list_tools():
        ops = ", ".join(op.name for op in descriptor.operations)
        table.add_row(descriptor.name, descriptor.description, ops or "-")

    console.print(table)


def show_operations(console: Console, catalog: IToolCatalog, parts: List[str]) -> None:
    """Handle /ops command: render the operations of one tool."""
    if len(parts) < 2:
        console.print("[warning]Usage: /ops <tool_name>[/warning]")
        return
    tool_name = parts[1].strip()
    descriptor = catalog.get_tool(tool_name)
    if descriptor is None:
        console.print(Panel(Text(f"Tool '{tool_name}' not found"), title="Error", box=ROUNDED, style="error"))
        return

    table = Table(title=f"Operations: {descriptor.name}", box=ROUNDED)
    table.add_column("Function", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required Params")

    for op in descriptor.operations:
        table.add_row(op.function_name, op.description, ", ".join(op.required) or "-")

    console.print(table)


def show_help(console: Console) -> None:
    """Print help panel."""
    console.print(
        Panel(
            "Commands\n"
            "/help      Show help\n"
            "/tools     List registered tools\n"
            "/ops       List operations of a tool (e.g., /ops inventory_management)\n"
            "/call      Execute an operation (e.g., /call inventory_management__check_inventory "
            "{\"sku\":\"A3045809\",\"quantity\":5})\n"
            "/theme     Toggle theme (dark/light)\n"
            "/clear     Clear the screen\n"
            "/exit      Exit",
            title="Help",
            box=ROUNDED
        )
    )


def handle_call(console: Console, invoker: IToolInvocationAdapter, parts: List[str]) -> bool:
    """
    Handle /call command.

    Returns:
        True if the call was executed and succeeded
    """
    if len(parts) < 2:
        console.print("[warning]Usage: /call <tool>__<operation> <json_params>[/warning]")
        return False
    name = parts[1].strip()
    params_raw = parts[2].strip() if len(parts) > 2 else "{}"
    try:
        params = json.loads(params_raw)
    except json.JSONDecodeError as e:
        console.print(f"[error]Invalid JSON: {e}[/error]")
        return False
    if not isinstance(params, dict):
        console.print("[error]Parameters must be a JSON object[/error]")
        return False

    result = invoker.execute(name, params)
    if result.ok:
        console.print(Panel(Text(result.observation), title=f"Tool Result: {name}", box=ROUNDED, style="success"))
    else:
        console.print(
            Panel(Text(result.observation), title=f"Tool Error ({result.error_kind}): {name}", box=ROUNDED, style="error")
        )
    return result.ok


def handle_theme(theme: str) -> str:
    """Handle /theme command."""
    return "light" if theme == "dark" else "dark"


def handle_clear(console: Console) -> None:
    """Handle /clear command."""
    console.clear()
