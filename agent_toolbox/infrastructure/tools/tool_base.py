"""
Base class for tools exposed to an orchestrating agent.

A tool is a bundle of named operations. Each operation is a keyword-only
method on the tool, described by an entry in the tool's annotations document.
"""

import copy
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List, Mapping

import jsonschema

from agent_toolbox.abstractions.dto.tools import (
    ErrorMessage,
    OperationDescriptor,
    ToolDescriptor,
    ToolInvocationResult,
)
from .annotations import annotations_path, load_annotations, parse_operations, validate_arguments
from .errors import ToolDefinitionError

logger = logging.getLogger(__name__)


class Tool(ABC):
    """
    Abstract base class for tools.

    Subclasses provide ``name`` and ``description``, implement one method per
    annotated operation and call ``super().__init__()`` so the annotations are
    loaded and checked at construction time.
    """

    # Directory holding ``<tool_name>/<tool_name>.json``
    annotations_dir: str = os.path.dirname(os.path.abspath(__file__))

    def __init__(self):
        self._annotations = load_annotations(self.annotations_path)
        self._operations: Dict[str, OperationDescriptor] = {
            op.name: op for op in parse_operations(self.name, self._annotations)
        }
        for op_name in self._operations:
            method = getattr(self, op_name, None)
            if op_name.startswith("_") or not callable(method):
                raise ToolDefinitionError(
                    f"Tool '{self.name}' annotates operation '{op_name}' but has no public method for it"
                )

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name, unique within a registry."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description used to decide whether the tool applies."""
        pass

    @property
    def annotations_path(self) -> str:
        return annotations_path(self.annotations_dir, self.name)

    @property
    def annotations(self) -> List[Dict[str, Any]]:
        """The annotations document as loaded from disk."""
        return copy.deepcopy(self._annotations)

    def list_operations(self) -> List[OperationDescriptor]:
        """Operations in annotation order."""
        return list(self._operations.values())

    def get_operation(self, operation: str) -> Optional[OperationDescriptor]:
        return self._operations.get(operation)

    def describe(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            operations=self.list_operations(),
            raw_schema=self.annotations,
        )

    def invoke(self, operation: str, args: Optional[Mapping[str, Any]] = None) -> ToolInvocationResult:
        """
        Validate ``args`` against the operation schema and run the operation.

        Unknown operations and malformed arguments come back as failure
        results. Exceptions raised by the operation itself propagate.
        """
        op = self.get_operation(operation)
        if op is None:
            logger.warning(f"Rejected call to unknown operation '{operation}' on tool '{self.name}'")
            return ToolInvocationResult.failure(
                self.name,
                operation,
                f"Unknown operation '{operation}' for tool '{self.name}'",
                kind="unknown_operation",
            )

        if args is None:
            args = {}
        if not isinstance(args, Mapping):
            return self._invalid(op, f"expected an object, got {type(args).__name__}")

        try:
            validate_arguments(op, args)
        except jsonschema.ValidationError as e:
            return self._invalid(op, e.message)

        logger.debug(f"Invoking {op.function_name} with {dict(args)}")
        result = getattr(self, operation)(**args)

        if isinstance(result, ErrorMessage):
            logger.debug(f"{op.function_name} returned {result.kind}: {result}")
            return ToolInvocationResult.failure(self.name, operation, str(result), kind=result.kind)
        return ToolInvocationResult.success(self.name, operation, result)

    def _invalid(self, op: OperationDescriptor, reason: str) -> ToolInvocationResult:
        logger.warning(f"Rejected call to {op.function_name}: {reason}")
        return ToolInvocationResult.failure(
            self.name,
            op.name,
            f"Invalid arguments for {op.function_name}: {reason}",
            kind="invalid_arguments",
        )

    @staticmethod
    def failure(kind: str, message: str) -> ErrorMessage:
        """Build the error string an operation returns for an expected failure."""
        return ErrorMessage(message, kind=kind)

    def to_openai_format(self) -> List[Dict[str, Any]]:
        """Function definitions in OpenAI's tools format."""
        return [
            {
                "type": "function",
                "function": {
                    "name": op.function_name,
                    "description": op.description,
                    "parameters": copy.deepcopy(op.parameters),
                },
            }
            for op in self.list_operations()
        ]

    def to_anthropic_format(self) -> List[Dict[str, Any]]:
        """Function definitions in Anthropic's tool use format."""
        return [
            {
                "name": op.function_name,
                "description": op.description,
                "input_schema": {
                    "type": "object",
                    "properties": copy.deepcopy(op.parameters.get("properties", {})),
                    "required": list(op.parameters.get("required", [])),
                },
            }
            for op in self.list_operations()
        ]

    def to_google_gemini_format(self) -> List[Dict[str, Any]]:
        """Function declarations in Google Gemini's format."""
        return [
            {
                "name": op.function_name,
                "description": op.description,
                "parameters": copy.deepcopy(op.parameters),
            }
            for op in self.list_operations()
        ]
