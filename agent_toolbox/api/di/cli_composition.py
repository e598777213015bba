"""
Composition module for CLI DI (edge wiring).

The catalog and the invoker share one ToolManager so tool state (stock
levels, recorded transactions) is visible across calls in a session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from agent_toolbox.infrastructure.tools.tool_manager import ToolManager
    from agent_toolbox.interfaces.services.tools import IToolCatalog, IToolInvocationAdapter


def build_tool_manager() -> "ToolManager":
    """
    Construct a ToolManager with the bundled tools registered.
    """
    from agent_toolbox.infrastructure.tools.config import Config
    from agent_toolbox.infrastructure.tools.tool_manager import ToolManager
    Config.validate_settings()
    return ToolManager(register_defaults=True)


def build_tool_catalog(manager: Optional["ToolManager"] = None) -> "IToolCatalog":
    """
    Construct and return an IToolCatalog instance.
    """
    from agent_toolbox.infrastructure.tools.catalog_adapter import ToolManagerCatalogAdapter
    return ToolManagerCatalogAdapter(manager)


def build_tool_invoker(manager: Optional["ToolManager"] = None) -> "IToolInvocationAdapter":
    """
    Construct and return an IToolInvocationAdapter instance.
    """
    from agent_toolbox.infrastructure.tools.invocation_adapter import ToolInvocationAdapter
    return ToolInvocationAdapter(manager)
