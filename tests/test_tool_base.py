"""Tests for the Tool base class, annotations and result types."""

import json

import pytest

from agent_toolbox.abstractions.dto.tools import ErrorMessage, ToolInvocationResult
from agent_toolbox.infrastructure.tools.errors import ToolDefinitionError
from agent_toolbox.infrastructure.tools.tool_base import Tool


ECHO_ANNOTATIONS = [
    {
        "type": "function",
        "function": {
            "name": "echo__say",
            "description": "Echo Tool: Repeat a message",
            "parameters": {
                "type": "object",
                "properties": {
                    "message": {"type": "string", "description": "Message to repeat"},
                    "times": {"type": "integer", "minimum": 1, "description": "Repetitions"},
                },
                "required": ["message"],
                "additionalProperties": False,
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "echo__fail",
            "description": "Echo Tool: Always fails",
        },
    },
]


def write_annotations(base_dir, tool_name, document):
    tool_dir = base_dir / tool_name
    tool_dir.mkdir(parents=True, exist_ok=True)
    (tool_dir / f"{tool_name}.json").write_text(json.dumps(document), encoding="utf-8")


def make_echo_class(annotations_dir):
    class EchoTool(Tool):
        def __init__(self):
            super().__init__()
            self.calls = []

        @property
        def name(self) -> str:
            return "echo"

        @property
        def description(self) -> str:
            return "Repeats messages"

        def say(self, *, message: str, times: int = 1) -> str:
            self.calls.append((message, times))
            return " ".join([message] * times)

        def fail(self) -> ErrorMessage:
            return self.failure("broken", "Echo is broken")

    EchoTool.annotations_dir = str(annotations_dir)
    return EchoTool


@pytest.fixture
def echo_tool(tmp_path):
    write_annotations(tmp_path, "echo", ECHO_ANNOTATIONS)
    return make_echo_class(tmp_path)()


def test_tool_base_interface():
    """Test that Tool base class has required interface."""
    assert hasattr(Tool, 'name')
    assert hasattr(Tool, 'description')
    assert hasattr(Tool, 'list_operations')
    assert hasattr(Tool, 'invoke')
    assert hasattr(Tool, 'to_openai_format')
    assert hasattr(Tool, 'to_anthropic_format')
    assert hasattr(Tool, 'to_google_gemini_format')

    with pytest.raises(TypeError):
        Tool()


def test_list_operations_in_annotation_order(echo_tool):
    ops = echo_tool.list_operations()
    assert [op.name for op in ops] == ["say", "fail"]
    assert ops[0].function_name == "echo__say"
    assert ops[0].required == ["message"]
    # operations without parameters get an empty object schema
    assert ops[1].parameters == {"type": "object", "properties": {}, "required": []}


def test_invoke_success(echo_tool):
    result = echo_tool.invoke("say", {"message": "hi", "times": 2})
    assert result.ok
    assert result.value == "hi hi"
    assert result.error is None
    assert result.tool_name == "echo"
    assert result.operation == "say"
    assert echo_tool.calls == [("hi", 2)]


def test_invoke_returned_error_message_becomes_failure(echo_tool):
    result = echo_tool.invoke("fail")
    assert not result.ok
    assert result.error == "Echo is broken"
    assert result.error_kind == "broken"
    assert result.observation == "Echo is broken"


def test_invoke_unknown_operation(echo_tool):
    result = echo_tool.invoke("shout", {"message": "hi"})
    assert not result.ok
    assert result.error_kind == "unknown_operation"
    assert result.error == "Unknown operation 'shout' for tool 'echo'"


@pytest.mark.parametrize(
    "args",
    [
        {},                                   # missing required
        {"message": 5},                       # wrong type
        {"message": "hi", "times": 0},        # below minimum
        {"message": "hi", "loud": True},      # unexpected property
    ],
)
def test_invoke_rejects_invalid_arguments_before_calling(echo_tool, args):
    result = echo_tool.invoke("say", args)
    assert not result.ok
    assert result.error_kind == "invalid_arguments"
    assert result.error.startswith("Invalid arguments for echo__say: ")
    assert echo_tool.calls == []


def test_invoke_rejects_non_mapping_arguments(echo_tool):
    result = echo_tool.invoke("say", ["hi"])
    assert not result.ok
    assert result.error_kind == "invalid_arguments"
    assert "expected an object, got list" in result.error


def test_exceptions_inside_operations_propagate(tmp_path):
    write_annotations(tmp_path, "echo", ECHO_ANNOTATIONS)
    EchoTool = make_echo_class(tmp_path)

    class BrokenEcho(EchoTool):
        def say(self, *, message: str, times: int = 1) -> str:
            raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        BrokenEcho().invoke("say", {"message": "hi"})


def test_missing_annotations_file_is_a_definition_error(tmp_path):
    with pytest.raises(ToolDefinitionError, match="not found"):
        make_echo_class(tmp_path)()


def test_annotation_without_method_is_a_definition_error(tmp_path):
    document = ECHO_ANNOTATIONS + [
        {"type": "function", "function": {"name": "echo__whisper", "description": "missing"}}
    ]
    write_annotations(tmp_path, "echo", document)
    with pytest.raises(ToolDefinitionError, match="whisper"):
        make_echo_class(tmp_path)()


def test_annotation_with_foreign_prefix_is_a_definition_error(tmp_path):
    document = [{"type": "function", "function": {"name": "other__say", "description": "x"}}]
    write_annotations(tmp_path, "echo", document)
    with pytest.raises(ToolDefinitionError, match="namespaced"):
        make_echo_class(tmp_path)()


def test_invalid_parameter_schema_is_a_definition_error(tmp_path):
    document = [
        {
            "type": "function",
            "function": {"name": "echo__say", "parameters": {"type": "object", "required": "message"}},
        }
    ]
    write_annotations(tmp_path, "echo", document)
    with pytest.raises(ToolDefinitionError, match="Invalid parameter schema"):
        make_echo_class(tmp_path)()


def test_export_formats(echo_tool):
    openai = echo_tool.to_openai_format()
    assert openai[0] == ECHO_ANNOTATIONS[0]

    anthropic = echo_tool.to_anthropic_format()
    assert anthropic[0]["name"] == "echo__say"
    assert anthropic[0]["input_schema"]["required"] == ["message"]
    assert anthropic[1]["input_schema"] == {"type": "object", "properties": {}, "required": []}

    gemini = echo_tool.to_google_gemini_format()
    assert gemini[0]["name"] == "echo__say"
    assert gemini[0]["parameters"]["properties"]["message"]["type"] == "string"


def test_exports_are_copies(echo_tool):
    echo_tool.to_openai_format()[0]["function"]["parameters"]["required"].append("times")
    assert echo_tool.get_operation("say").required == ["message"]


def test_describe(echo_tool):
    descriptor = echo_tool.describe()
    assert descriptor.name == "echo"
    assert descriptor.description == "Repeats messages"
    assert [op.name for op in descriptor.operations] == ["say", "fail"]
    assert descriptor.raw_schema == ECHO_ANNOTATIONS


def test_error_message_is_a_plain_string_with_a_kind():
    message = ErrorMessage("No such file: x", kind="not_found")
    assert message == "No such file: x"
    assert isinstance(message, str)
    assert message.kind == "not_found"
    assert ErrorMessage("oops").kind == "error"


def test_observation_rendering():
    assert ToolInvocationResult.success("t", "op", "text").observation == "text"
    assert ToolInvocationResult.success("t", "op", True).observation == "true"
    assert ToolInvocationResult.success("t", "op", {"a": 1}).observation == '{"a": 1}'
    assert ToolInvocationResult.failure("t", "op", "bad", kind="x").observation == "bad"
