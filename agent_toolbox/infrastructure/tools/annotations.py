"""
Loading and checking of tool annotations.

Every tool ships a JSON document at ``<tool_name>/<tool_name>.json`` next to
its module. The document is a list of OpenAI-style function entries::

    [{"type": "function",
      "function": {"name": "<tool_name>__<operation>",
                   "description": "...",
                   "parameters": {"type": "object", "properties": {...},
                                  "required": [...]}}}]
"""

import copy
import json
import logging
import os
from typing import Any, Dict, List, Mapping

import jsonschema

from agent_toolbox.abstractions.dto.tools import OperationDescriptor
from .errors import ToolDefinitionError

logger = logging.getLogger(__name__)

FUNCTION_SEPARATOR = "__"

EMPTY_PARAMETERS: Dict[str, Any] = {"type": "object", "properties": {}, "required": []}


def annotations_path(base_dir: str, tool_name: str) -> str:
    """Return the conventional annotations path for a tool."""
    return os.path.join(base_dir, tool_name, f"{tool_name}.json")


def function_name(tool_name: str, operation: str) -> str:
    return f"{tool_name}{FUNCTION_SEPARATOR}{operation}"


def load_annotations(path: str) -> List[Dict[str, Any]]:
    """
    Read an annotations document from disk.

    Raises:
        ToolDefinitionError: If the file is missing or is not a JSON list
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError:
        raise ToolDefinitionError(f"Annotations file not found: {path}")
    except json.JSONDecodeError as e:
        raise ToolDefinitionError(f"Annotations file is not valid JSON: {path}: {e}")

    if not isinstance(document, list):
        raise ToolDefinitionError(f"Annotations document must be a list of functions: {path}")
    logger.debug(f"Loaded {len(document)} annotated functions from {path}")
    return document


def parse_operations(tool_name: str, document: List[Dict[str, Any]]) -> List[OperationDescriptor]:
    """
    Turn an annotations document into operation descriptors.

    Raises:
        ToolDefinitionError: On entries without a function name, names not
            prefixed with the tool name, duplicates or invalid JSON Schemas
    """
    operations: List[OperationDescriptor] = []
    seen = set()
    prefix = f"{tool_name}{FUNCTION_SEPARATOR}"

    for entry in document:
        function = (entry or {}).get("function") if isinstance(entry, dict) else None
        if not isinstance(function, dict) or not function.get("name"):
            raise ToolDefinitionError(f"Annotation entry for '{tool_name}' has no function name: {entry!r}")

        full_name = function["name"]
        if not full_name.startswith(prefix):
            raise ToolDefinitionError(f"Function '{full_name}' is not namespaced with '{prefix}'")

        operation = full_name[len(prefix):]
        if not operation or operation in seen:
            raise ToolDefinitionError(f"Duplicate or empty operation '{operation}' in '{tool_name}' annotations")
        seen.add(operation)

        parameters = function.get("parameters") or copy.deepcopy(EMPTY_PARAMETERS)
        try:
            jsonschema.Draft7Validator.check_schema(parameters)
        except jsonschema.SchemaError as e:
            raise ToolDefinitionError(f"Invalid parameter schema for '{full_name}': {e.message}")

        operations.append(
            OperationDescriptor(
                name=operation,
                function_name=full_name,
                description=function.get("description", ""),
                parameters=parameters,
            )
        )

    return operations


def validate_arguments(operation: OperationDescriptor, args: Mapping[str, Any]) -> None:
    """
    Check call arguments against the operation's parameter schema.

    Raises:
        jsonschema.ValidationError: If the arguments do not match
    """
    jsonschema.validate(dict(args), operation.parameters, cls=jsonschema.Draft7Validator)
