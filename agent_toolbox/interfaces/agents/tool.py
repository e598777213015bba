"""
Tool port (contract only) used by orchestrators and infra adapters.
"""
from __future__ import annotations
from typing import Protocol, Dict, Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from agent_toolbox.abstractions.dto.tools import OperationDescriptor, ToolInvocationResult

class ITool(Protocol):
    name: str
    description: str

    def list_operations(self) -> List["OperationDescriptor"]:
        ...
    def invoke(self, operation: str, args: Optional[Dict[str, Any]] = None) -> "ToolInvocationResult":
        ...

__all__ = ["ITool"]
