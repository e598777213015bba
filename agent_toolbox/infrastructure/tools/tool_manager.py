# agent_toolbox/infrastructure/tools/tool_manager.py

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from agent_toolbox.abstractions.dto.tools import ToolDescriptor, ToolInvocationResult
from .tool_base import Tool

# Import all bundled tools
from .file_system import FileSystemTool
from .inventory_management import InventoryManagementTool
from .payment_gateway import PaymentGatewayTool
from .shipping_service import ShippingServiceTool

logger = logging.getLogger(__name__)


class ToolManager:
    """
    Manages a collection of tools and handles tool registration and execution.

    Tools keep their registration order and names are unique.
    """

    def __init__(self, tools: Optional[Iterable[Tool]] = None, register_defaults: bool = True):
        """
        Initialize tool registry.

        Args:
            tools: Tool instances to register after the defaults
            register_defaults: Whether to register the bundled tools
        """
        self.tools: Dict[str, Tool] = {}
        if register_defaults:
            self.register_default_tools()
        for tool in tools or []:
            self.register_tool(tool)

    def register_default_tools(self) -> None:
        """Register the bundled tools with configuration from the environment."""
        default_tools = [
            FileSystemTool(),
            InventoryManagementTool(),
            PaymentGatewayTool(),
            ShippingServiceTool(),
        ]
        for tool in default_tools:
            self.register_tool(tool)

    def register_tool(self, tool: Tool) -> None:
        """
        Register a tool instance.

        Args:
            tool: Tool instance to register

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self.tools[tool.name] = tool
        logger.info(f"Registered tool '{tool.name}' with {len(tool.list_operations())} operations")

    def register_tool_class(self, tool_class: Type[Tool], **kwargs) -> Tool:
        """
        Register a tool class by instantiating and registering it.

        Args:
            tool_class: Tool class to instantiate and register
            **kwargs: Arguments to pass to tool constructor

        Returns:
            The registered instance
        """
        tool = tool_class(**kwargs)
        self.register_tool(tool)
        return tool

    def get_tool(self, name: str) -> Tool:
        """
        Get a registered tool by name.

        Raises:
            KeyError: If tool is not found
        """
        if name not in self.tools:
            raise KeyError(f"Tool '{name}' not found")
        return self.tools[name]

    def list_tools(self) -> List[ToolDescriptor]:
        """Descriptors for all registered tools, in registration order."""
        return [tool.describe() for tool in self.tools.values()]

    def execute_tool(self, name: str, operation: str, args: Optional[Mapping[str, Any]] = None) -> ToolInvocationResult:
        """
        Execute an operation of a registered tool.

        Raises:
            KeyError: If tool is not found
        """
        tool = self.get_tool(name)
        return tool.invoke(operation, args)
