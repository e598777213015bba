"""
Agents runtime port (contract only). No implementations here.

An implementation alternates LLM calls and tool invocations: it asks the LLM
for the next thought/action, parses the action into tool + operation +
arguments, invokes the tool, feeds the observation into the next prompt and
stops on a final answer or after ``max_steps``.
"""
from __future__ import annotations
from typing import Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from agent_toolbox.domain.entities.agent_transcript import AgentTranscript
    from agent_toolbox.interfaces.agents.tool import ITool

class IAgentRuntime(Protocol):
    def run(self, question: str, tools: Sequence["ITool"], max_steps: int = 10) -> "AgentTranscript":
        ...

__all__ = ["IAgentRuntime"]
