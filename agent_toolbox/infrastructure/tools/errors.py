"""
Exceptions raised by tool infrastructure.

Expected operational failures are returned as ``ErrorMessage`` values, not
raised; these exceptions cover broken tool definitions and misuse.
"""


class ToolError(Exception):
    """Base exception for tool infrastructure errors."""
    pass


class ToolDefinitionError(ToolError):
    """A tool's annotations are missing, malformed or name a missing method."""
    pass
