"""
Console utilities for CLI.
"""

from typing import Optional
from rich.console import Console
from rich.theme import Theme
import os
import sys


def _build_theme(theme_name: str) -> Theme:
    if theme_name == "light":
        return Theme(
            {
                "accent": "dark_green",
                "warning": "dark_orange",
                "error": "red",
                "success": "green",
                "muted": "grey42",
            }
        )
    else:
        # dark
        return Theme(
            {
                "accent": "cyan",
                "warning": "yellow",
                "error": "bold red",
                "success": "green",
                "muted": "grey70",
            }
        )


def _should_enable_color(enable: Optional[bool]) -> bool:
    """
    Respect NO_COLOR unless AGENT_TOOLBOX_FORCE_COLOR is set.
    When enable is None, auto-detect via isatty.
    """
    force_color = (os.getenv("AGENT_TOOLBOX_FORCE_COLOR") or "").lower() in ("1", "true", "yes", "on")
    if force_color:
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if enable is None:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    return bool(enable)


def make_console(theme_name: str = "dark", use_color: Optional[bool] = None, **kwargs) -> Console:
    """Create a Rich console with the selected theme and color policy."""
    theme = _build_theme("light" if theme_name == "light" else "dark")
    desired = _should_enable_color(use_color)

    return Console(
        theme=theme,
        no_color=not desired,
        color_system="auto" if desired else None,
        markup=True,       # render style tags like [warning]...[/warning]
        highlight=False,
        **kwargs,
    )


__all__ = ["make_console"]
