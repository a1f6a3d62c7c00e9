"""TypeScript class generation.

Produces a class declaration with property declarations in input order, a
constructor stub when the class has properties, and one stub per method.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from codeforge.core.agent import Agent
from codeforge.core.models import AgentDescriptor
from codeforge.files import FileAccess
from codeforge.templates import substitute_with_conditionals


CLASS_TEMPLATE = (
    "class {{ name }}"
    "{{#if extends}} extends {{ extends }}{{/if}}"
    "{{#if implements}} implements {{ implements }}{{/if}}"
    " {\n{{ body }}}"
)

Visibility = Literal["public", "private", "protected"]


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------


class Property(BaseModel):
    name: str
    type: str
    visibility: Visibility = "public"


class Method(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    parameters: list[str] = Field(
        default_factory=list, description="Parameter declarations, e.g. ``'email: string'``"
    )
    return_type: Optional[str] = Field(default=None, alias="returnType")


class ClassInput(BaseModel):
    """Description of the class to generate."""

    name: str = Field(default="", description="Class name; required")
    properties: list[Property] = Field(default_factory=list)
    methods: list[Method] = Field(default_factory=list)
    extends: Optional[str] = None
    implements: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------


class ClassGeneratorAgent(Agent[ClassInput]):
    """Agent that generates TypeScript classes."""

    input_model = ClassInput

    def __init__(self, file_access: Optional[FileAccess] = None) -> None:
        super().__init__(
            AgentDescriptor(
                name="ClassGenerator",
                description="Generates TypeScript class code",
                version="1.0.0",
            ),
            file_access=file_access,
        )

    def check_input(self, model: ClassInput) -> Optional[str]:
        if not model.name:
            return "Invalid input: class name is required"
        return None

    def render(self, model: ClassInput) -> str:
        variables = {
            "name": model.name,
            "extends": model.extends,
            "implements": ", ".join(model.implements),
            "body": _class_body(model),
        }
        return substitute_with_conditionals(CLASS_TEMPLATE, variables)


# ---------------------------------------------------------------------------
# Body builder
# ---------------------------------------------------------------------------

def _class_body(model: ClassInput) -> str:
    """Build everything between the class braces, one member per block."""
    lines: list[str] = []

    if model.properties:
        for prop in model.properties:
            lines.append(f"  {prop.visibility} {prop.name}: {prop.type};")
        lines.append("")
        lines.extend([
            "  constructor() {",
            "    // TODO: Initialize properties",
            "  }",
            "",
        ])

    for method in model.methods:
        params = ", ".join(method.parameters)
        return_type = method.return_type or "void"
        lines.extend([
            f"  {method.name}({params}): {return_type} {{",
            "    // TODO: Implement method",
            "  }",
            "",
        ])

    return "".join(f"{line}\n" for line in lines)
