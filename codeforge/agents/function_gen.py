"""TypeScript function generation.

Builds a single function declaration from a ``FunctionInput``::

    async function fetchUser(id: string): Promise<User> {
      // TODO: Implement function body
    }
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from codeforge.core.agent import Agent
from codeforge.core.models import AgentDescriptor
from codeforge.files import FileAccess
from codeforge.templates import substitute_with_conditionals


FUNCTION_TEMPLATE = (
    "{{#if is_async}}async {{/if}}function {{ name }}({{ params }}){{ return_type }} {\n"
    "  {{ body }}\n"
    "}"
)

DEFAULT_BODY = "// TODO: Implement function body"


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------


class Parameter(BaseModel):
    """One ``name: type`` function parameter."""

    name: str
    type: str


class FunctionInput(BaseModel):
    """Description of the function to generate."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", description="Function name; required")
    parameters: list[Parameter] = Field(default_factory=list)
    return_type: Optional[str] = Field(default=None, alias="returnType")
    is_async: bool = Field(default=False, alias="isAsync")
    body: Optional[str] = Field(default=None, description="Function body, without braces")


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------


class FunctionGeneratorAgent(Agent[FunctionInput]):
    """Agent that generates TypeScript functions."""

    input_model = FunctionInput

    def __init__(self, file_access: Optional[FileAccess] = None) -> None:
        super().__init__(
            AgentDescriptor(
                name="FunctionGenerator",
                description="Generates TypeScript function code",
                version="1.0.0",
            ),
            file_access=file_access,
        )

    def check_input(self, model: FunctionInput) -> Optional[str]:
        if not model.name:
            return "Invalid input: function name is required"
        return None

    def render(self, model: FunctionInput) -> str:
        return substitute_with_conditionals(FUNCTION_TEMPLATE, build_variables(model))


def build_variables(model: FunctionInput) -> dict[str, object]:
    """Return the template variables for *model*."""
    return_type = model.return_type or "void"
    body = model.body if model.body and model.body.strip() else DEFAULT_BODY
    return {
        "is_async": model.is_async,
        "name": model.name,
        "params": ", ".join(f"{p.name}: {p.type}" for p in model.parameters),
        # void is left implicit
        "return_type": f": {return_type}" if return_type != "void" else "",
        "body": "\n  ".join(body.splitlines()),
    }
