"""Agent abstraction, shared models and the agent registry."""

from codeforge.core.agent import Agent
from codeforge.core.models import (
    DEFAULT_VERSION,
    AgentDescriptor,
    GenerationContext,
    GenerationResult,
)
from codeforge.core.registry import AgentRegistry

__all__ = [
    "DEFAULT_VERSION",
    "Agent",
    "AgentDescriptor",
    "AgentRegistry",
    "GenerationContext",
    "GenerationResult",
]
