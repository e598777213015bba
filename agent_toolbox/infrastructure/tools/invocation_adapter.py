"""
Tool invocation adapter implementing IToolInvocationAdapter interface.
"""

import logging
from typing import Dict, Any, Optional, Tuple, TYPE_CHECKING
from agent_toolbox.abstractions.dto.tools import ToolInvocationResult

if TYPE_CHECKING:
    from agent_toolbox.interfaces.services.tools import IToolInvocationAdapter

from .annotations import FUNCTION_SEPARATOR
from .tool_manager import ToolManager

logger = logging.getLogger(__name__)


class ToolInvocationAdapter:
    """
    Adapter for ToolManager to implement IToolInvocationAdapter interface.

    ``name`` is either a function name (``<tool>__<operation>``) as produced
    by the schema exports, or a bare tool name with the operation passed as
    ``params["operation"]``.
    """

    def __init__(self, manager: Optional[ToolManager] = None):
        self.manager = manager if manager is not None else ToolManager(register_defaults=True)

    def execute(self, name: str, params: Dict[str, Any], call_id: Optional[str] = None) -> "ToolInvocationResult":
        """
        Execute a tool operation by name with given parameters.
        """
        tool_name, operation, args = self._split(name, params or {})
        logger.debug(f"Tool call {call_id or '-'}: {tool_name}.{operation}")

        try:
            tool = self.manager.get_tool(tool_name)
        except KeyError:
            return ToolInvocationResult.failure(
                tool_name,
                operation or "",
                f"Tool '{tool_name}' not found",
                kind="unknown_tool",
            )

        if not operation:
            return ToolInvocationResult.failure(
                tool_name,
                "",
                f"No operation given for tool '{tool_name}'",
                kind="unknown_operation",
            )

        return tool.invoke(operation, args)

    @staticmethod
    def _split(name: str, params: Dict[str, Any]) -> Tuple[str, Optional[str], Dict[str, Any]]:
        if FUNCTION_SEPARATOR in name:
            tool_name, operation = name.split(FUNCTION_SEPARATOR, 1)
            return tool_name, operation, params
        args = dict(params)
        operation = args.pop("operation", None)
        return name, operation, args
