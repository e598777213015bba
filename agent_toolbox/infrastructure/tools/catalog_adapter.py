"""
Tool catalog adapter implementing IToolCatalog interface.
"""

from typing import Any, Dict, List, Optional, TYPE_CHECKING
from agent_toolbox.abstractions.dto.tools import ToolDescriptor

if TYPE_CHECKING:
    from agent_toolbox.interfaces.services.tools import IToolCatalog

from .tool_manager import ToolManager

_FORMATS = {
    "openai": "to_openai_format",
    "anthropic": "to_anthropic_format",
    "gemini": "to_google_gemini_format",
}


class ToolManagerCatalogAdapter:
    """
    Adapter for ToolManager to implement IToolCatalog interface.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager if manager is not None else ToolManager(register_defaults=True)

    def list_tools(self) -> List["ToolDescriptor"]:
        """
        List all registered tools as ToolDescriptor objects.
        """
        return self.manager.list_tools()

    def get_tool(self, name: str) -> Optional["ToolDescriptor"]:
        """
        Get a tool descriptor by name.
        """
        try:
            return self.manager.get_tool(name).describe()
        except KeyError:
            return None

    def list_function_schemas(self, provider: str = "openai") -> List[Dict[str, Any]]:
        """
        Function definitions for every registered operation, in the given
        provider's format ("openai", "anthropic" or "gemini").

        Raises:
            ValueError: If the provider format is unknown
        """
        method = _FORMATS.get((provider or "").strip().lower())
        if method is None:
            raise ValueError(f"Unknown schema format '{provider}'. Expected one of: {', '.join(_FORMATS)}")
        schemas: List[Dict[str, Any]] = []
        for tool in self.manager.tools.values():
            schemas.extend(getattr(tool, method)())
        return schemas
