"""
Interactive CLI for calling agent-toolbox tools by hand.

Commands:
  /help      Show help
  /tools     List registered tools
  /ops       List operations of a tool
  /call      Execute an operation with JSON arguments
  /theme     Toggle theme (dark/light)
  /clear     Clear the screen
  /exit      Exit

Run:
  python -m agent_toolbox.ui.cli.app
  or
  agent-toolbox
"""

from __future__ import annotations

import logging
import os

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.completion import WordCompleter

from rich.panel import Panel
from rich.box import ROUNDED

from .console import make_console
from .handlers import list_tools, show_operations, show_help, handle_call, handle_theme, handle_clear
from agent_toolbox.api.di.cli_composition import build_tool_manager, build_tool_catalog, build_tool_invoker
from agent_toolbox.infrastructure.tools.config import Config


def run() -> None:
    """Main interactive loop."""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    theme = "light" if (os.getenv("CLI_THEME") or "").lower() in ("light", "white") else "dark"
    console = make_console(theme)
    session = PromptSession(history=InMemoryHistory())

    manager = build_tool_manager()
    catalog = build_tool_catalog(manager)
    invoker = build_tool_invoker(manager)

    console.print(
        Panel(
            "agent-toolbox CLI\n"
            "Call tool operations directly, the way an agent would.",
            title="Welcome",
            box=ROUNDED
        )
    )
    show_help(console)

    function_names = [op.function_name for d in catalog.list_tools() for op in d.operations]
    completer = WordCompleter(
        ["/help", "/tools", "/ops", "/call", "/theme", "/clear", "/exit"] + list(manager.tools) + function_names,
        ignore_case=True,
        match_middle=True,
    )

    while True:
        try:
            with patch_stdout():
                user_input = session.prompt("> ", completer=completer)
        except (KeyboardInterrupt, EOFError):
            console.print("\nExiting...", style="warning")
            break

        cmd = user_input.strip()
        if not cmd:
            continue

        if cmd == "/help":
            show_help(console)
        elif cmd == "/tools":
            list_tools(console, catalog)
        elif cmd.startswith("/ops"):
            show_operations(console, catalog, cmd.split(maxsplit=1))
        elif cmd.startswith("/call"):
            handle_call(console, invoker, cmd.split(maxsplit=2))
        elif cmd == "/theme":
            theme = handle_theme(theme)
            console = make_console(theme)
            console.print(Panel(f"Theme switched to [accent]{theme}[/accent]", title="Theme", box=ROUNDED))
        elif cmd == "/clear":
            handle_clear(console)
        elif cmd == "/exit":
            console.print("Exiting...", style="warning")
            break
        else:
            console.print("[warning]Unknown command. Type /help for the list of commands.[/warning]")


def main() -> None:
    run()


if __name__ == "__main__":
    main()
