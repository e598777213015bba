"""
Ports for discovering tools and calling their operations.

An orchestrator reads the catalog to tell the LLM which ``tool__operation``
functions exist, then routes the LLM's chosen call through the invocation
adapter.
"""
from __future__ import annotations
from typing import Protocol, List, Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from agent_toolbox.abstractions.dto.tools import ToolDescriptor, ToolInvocationResult


class IToolCatalog(Protocol):
    def list_tools(self) -> List["ToolDescriptor"]:
        """Descriptors of every registered tool, in registration order."""
        ...

    def get_tool(self, name: str) -> Optional["ToolDescriptor"]:
        """Descriptor of one tool, or None if no tool has that name."""
        ...

    def list_function_schemas(self, provider: str = "openai") -> List[Dict[str, Any]]:
        """Function definitions of every operation in ``provider``'s format."""
        ...


class IToolInvocationAdapter(Protocol):
    def execute(self, name: str, params: Dict[str, Any], call_id: Optional[str] = None) -> "ToolInvocationResult":
        """Run ``tool__operation`` (or ``tool`` plus ``params["operation"]``) and return a tagged result."""
        ...


__all__ = ["IToolCatalog", "IToolInvocationAdapter"]
