"""
LLM service port. Orchestrators depend on this; no implementation ships here.
"""
from __future__ import annotations
from typing import Protocol

class ILLM(Protocol):
    @property
    def model(self) -> str:
        ...
    def complete(self, prompt: str) -> str:
        """Return free text for the prompt. Format is up to the orchestrator's parser."""
        ...

__all__ = ["ILLM"]
