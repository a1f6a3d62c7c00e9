"""Abstract base class for code generation agents.

An agent is a named, versioned unit that turns a structured input model into
source text.  ``Agent.generate`` is the single public entry point: it
validates the input, renders the code, optionally writes it through a
``FileAccess`` collaborator, and always returns a ``GenerationResult``.
Failures never escape as exceptions.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from codeforge.core.models import (
    DEFAULT_VERSION,
    AgentDescriptor,
    GenerationContext,
    GenerationResult,
)
from codeforge.files import FileAccess, LocalFileAccess

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)

INPUT_REQUIRED = "Invalid input: input must be provided"


class Agent(ABC, Generic[InputT]):
    """Base class for every generator.

    Subclasses set ``input_model`` to their pydantic input type and implement
    :meth:`render`.  They may override :meth:`check_input` to add structural
    checks that run before any rendering or I/O.

    Attributes:
        file_access: Collaborator used to persist generated code.
    """

    input_model: ClassVar[type[BaseModel]]

    def __init__(
        self,
        descriptor: Optional[AgentDescriptor] = None,
        file_access: Optional[FileAccess] = None,
        *,
        name: Optional[str] = None,
        description: str = "",
        version: str = DEFAULT_VERSION,
    ) -> None:
        if descriptor is None:
            if name is None:
                raise TypeError("Agent requires a descriptor or a name")
            descriptor = AgentDescriptor(name=name, description=description, version=version)
        self._descriptor = descriptor
        self.file_access: FileAccess = file_access or LocalFileAccess()

    # -- Identity ----------------------------------------------------------

    @property
    def descriptor(self) -> AgentDescriptor:
        return self._descriptor

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def description(self) -> str:
        return self._descriptor.description

    @property
    def version(self) -> str:
        return self._descriptor.version

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description

    def get_version(self) -> str:
        return self.version

    def describe(self) -> dict[str, str]:
        """Return the descriptor as a plain ``{name, description, version}`` dict."""
        return self._descriptor.model_dump()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, version={self.version!r})"

    # -- Generation --------------------------------------------------------

    async def generate(
        self,
        input_data: InputT | Mapping[str, Any] | None,
        context: GenerationContext | Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Generate code for *input_data*.

        Args:
            input_data: An instance of ``input_model`` or a mapping that
                validates against it.
            context: Optional output path and metadata.  When
                ``output_path`` is set the code is written there.

        Returns:
            A success result with the code (and the written path), or a
            failure result with a human-readable error.
        """
        if not self.validate_input(input_data):
            return self._failure(INPUT_REQUIRED)

        try:
            model = self.coerce_input(input_data)
        except ValidationError as exc:
            return self._failure(f"Invalid input: {_first_error(exc)}")
        except Exception as exc:
            return self._failure(_error_message(exc))

        try:
            ctx = _coerce_context(context)
        except ValidationError as exc:
            return self._failure(f"Invalid context: {_first_error(exc)}")

        try:
            problem = self.check_input(model)
        except Exception as exc:
            return self._failure(_error_message(exc))
        if problem:
            return self._failure(problem)

        try:
            code = self.render(model)
        except Exception as exc:
            return self._failure(_error_message(exc))

        if ctx.output_path is None:
            logger.debug("%s generated %d characters", self.name, len(code))
            return GenerationResult.ok(code)

        try:
            await self.file_access.write(ctx.output_path, code)
        except Exception as exc:
            return self._failure(_error_message(exc))

        logger.debug("%s wrote generated code to %s", self.name, ctx.output_path)
        return GenerationResult.ok(code, ctx.output_path)

    def validate_input(self, input_data: Any) -> bool:
        """Return ``True`` when *input_data* is present."""
        return input_data is not None

    def coerce_input(self, input_data: Any) -> InputT:
        """Return *input_data* as an ``input_model`` instance.

        Raises:
            ValidationError: If the data does not fit the model.
        """
        if isinstance(input_data, self.input_model):
            return input_data  # type: ignore[return-value]
        return self.input_model.model_validate(input_data)  # type: ignore[return-value]

    def check_input(self, model: InputT) -> Optional[str]:
        """Return an error message if *model* is structurally unusable."""
        return None

    @abstractmethod
    def render(self, model: InputT) -> str:
        """Build the source text for *model*."""

    # -- Internal ----------------------------------------------------------

    def _failure(self, error: str) -> GenerationResult:
        logger.warning("%s failed: %s", self.name, error)
        return GenerationResult.fail(error)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _coerce_context(context: GenerationContext | Mapping[str, Any] | None) -> GenerationContext:
    if context is None:
        return GenerationContext()
    if isinstance(context, GenerationContext):
        return context
    return GenerationContext.model_validate(context)


def _error_message(exc: BaseException) -> str:
    """Return the exception message, or ``"Unknown error"`` when it has none."""
    return str(exc) or "Unknown error"


def _first_error(exc: ValidationError) -> str:
    """Condense a pydantic error into ``"<field path>: <message>"``."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
