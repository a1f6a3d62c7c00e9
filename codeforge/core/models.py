"""Pydantic v2 models shared by every agent.

Covers the agent descriptor, the optional per-call generation context, and
the success / failure result returned by ``Agent.generate``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


DEFAULT_VERSION = "1.0.0"


# ---------------------------------------------------------------------------
# Agent descriptor
# ---------------------------------------------------------------------------


class AgentDescriptor(BaseModel):
    """Immutable identity of an agent: name, description and version."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Registry key, unique per registry")
    description: str = Field(default="", description="Human-readable summary")
    version: str = Field(default=DEFAULT_VERSION)


# ---------------------------------------------------------------------------
# Generation context
# ---------------------------------------------------------------------------


class GenerationContext(BaseModel):
    """Optional parameters for one ``generate`` call.

    Accepts ``outputPath`` as well as ``output_path``.  Unknown keys are
    rejected so a misspelt output path cannot be silently ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    output_path: Optional[Path] = Field(
        default=None,
        alias="outputPath",
        description="Where to write the generated code, if anywhere",
    )
    metadata: Optional[dict[str, Any]] = Field(
        default=None, description="Free-form caller data, not interpreted by the core"
    )


# ---------------------------------------------------------------------------
# Generation result
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Outcome of one ``generate`` call.

    Callers must check ``success`` first: a successful result carries
    ``code`` (and ``file_path`` when the code was written), a failed one
    carries only ``error``.
    """

    success: bool
    code: Optional[str] = None
    file_path: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _one_variant(self) -> "GenerationResult":
        if self.success and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.success and (self.code is not None or self.file_path is not None):
            raise ValueError("a failed result cannot carry code or a file path")
        return self

    @classmethod
    def ok(cls, code: str, file_path: str | Path | None = None) -> "GenerationResult":
        """Build a success result."""
        return cls(
            success=True,
            code=code,
            file_path=str(file_path) if file_path is not None else None,
        )

    @classmethod
    def fail(cls, error: str) -> "GenerationResult":
        """Build a failure result."""
        return cls(success=False, error=error)
