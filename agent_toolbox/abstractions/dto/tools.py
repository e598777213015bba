"""
Shared tool DTOs for catalogs and invocation results.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional


class ErrorMessage(str):
    """
    Human-readable failure returned by a tool operation.

    Compares equal to the plain message so an orchestrator can treat it as an
    ordinary observation, while ``kind`` lets code tell failures apart.
    """

    kind: str

    def __new__(cls, message: str, kind: str = "error") -> "ErrorMessage":
        obj = super().__new__(cls, message)
        obj.kind = kind
        return obj

    def __repr__(self) -> str:
        return f"ErrorMessage({str.__repr__(self)}, kind={self.kind!r})"


@dataclass
class OperationDescriptor:
    name: str
    function_name: str
    description: str
    parameters: Dict[str, Any]

    @property
    def required(self) -> List[str]:
        return list(self.parameters.get("required", []))


@dataclass
class ToolDescriptor:
    name: str
    description: str
    operations: List[OperationDescriptor] = field(default_factory=list)
    raw_schema: List[Dict[str, Any]] = field(default_factory=list)


@dataclass
class ToolInvocationResult:
    ok: bool
    value: Optional[Any]
    error: Optional[str]
    tool_name: str
    operation: str
    error_kind: Optional[str] = None

    @classmethod
    def success(cls, tool_name: str, operation: str, value: Any) -> "ToolInvocationResult":
        return cls(ok=True, value=value, error=None, tool_name=tool_name, operation=operation)

    @classmethod
    def failure(cls, tool_name: str, operation: str, error: str, kind: str = "error") -> "ToolInvocationResult":
        return cls(
            ok=False,
            value=None,
            error=str(error),
            tool_name=tool_name,
            operation=operation,
            error_kind=kind,
        )

    @property
    def observation(self) -> str:
        """Text handed back to the reasoning loop as the next observation."""
        if not self.ok:
            return self.error or ""
        if isinstance(self.value, str):
            return self.value
        try:
            return json.dumps(self.value, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(self.value)


__all__ = ["ErrorMessage", "OperationDescriptor", "ToolDescriptor", "ToolInvocationResult"]
