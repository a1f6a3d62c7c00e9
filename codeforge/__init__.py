"""codeforge -- pluggable agents that generate source code from templates.

Quick usage::

    from codeforge import FunctionGeneratorAgent, GenerationContext

    agent = FunctionGeneratorAgent()
    result = await agent.generate(
        {"name": "calculateSum", "returnType": "number", "body": "return a + b;"},
        GenerationContext(output_path="src/sum.ts"),
    )
    if result.success:
        print(result.code)
"""

from codeforge.agents import (
    ClassGeneratorAgent,
    ClassInput,
    FunctionGeneratorAgent,
    FunctionInput,
    create_default_registry,
)
from codeforge.core import (
    Agent,
    AgentDescriptor,
    AgentRegistry,
    GenerationContext,
    GenerationResult,
)
from codeforge.files import FileAccess, LocalFileAccess
from codeforge.templates import TemplateEngine, substitute, substitute_with_conditionals

__version__ = "0.1.0"

__all__ = [
    "Agent",
    "AgentDescriptor",
    "AgentRegistry",
    "ClassGeneratorAgent",
    "ClassInput",
    "FileAccess",
    "FunctionGeneratorAgent",
    "FunctionInput",
    "GenerationContext",
    "GenerationResult",
    "LocalFileAccess",
    "TemplateEngine",
    "create_default_registry",
    "substitute",
    "substitute_with_conditionals",
]
