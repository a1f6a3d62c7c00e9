"""Built-in TypeScript code generators.

Quick usage::

    from codeforge.agents import create_default_registry

    registry = create_default_registry()
    agent = registry.get("FunctionGenerator")
    result = await agent.generate({"name": "calculateSum", "returnType": "number"})
"""

from __future__ import annotations

from typing import Optional

from codeforge.agents.class_gen import ClassGeneratorAgent, ClassInput, Method, Property
from codeforge.agents.function_gen import FunctionGeneratorAgent, FunctionInput, Parameter
from codeforge.core.registry import AgentRegistry
from codeforge.files import FileAccess

BUILTIN_AGENTS = (FunctionGeneratorAgent, ClassGeneratorAgent)


def create_default_registry(file_access: Optional[FileAccess] = None) -> AgentRegistry:
    """Return a registry holding one instance of every built-in agent."""
    registry = AgentRegistry()
    for agent_cls in BUILTIN_AGENTS:
        registry.register(agent_cls(file_access=file_access))
    return registry


__all__ = [
    "BUILTIN_AGENTS",
    "ClassGeneratorAgent",
    "ClassInput",
    "FunctionGeneratorAgent",
    "FunctionInput",
    "Method",
    "Parameter",
    "Property",
    "create_default_registry",
]
