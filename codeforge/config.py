"""codeforge configuration.

Typed settings for the command-line driver.  Pydantic v2 validates values
at construction time and handles JSON round-tripping.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or validated."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class Config(BaseModel):
    """Global codeforge configuration.

    Created once by the CLI (usually via :meth:`from_env`) and used to build
    the file-access collaborator and to decide where generated files land.
    """

    output_dir: Path = Field(default=Path("./generated"))
    encoding: str = Field(default="utf-8")
    log_level: str = Field(default="WARNING")
    overwrite: bool = Field(
        default=False, description="Replace existing output files without --force"
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def log_level_number(self) -> int:
        """The numeric ``logging`` level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)

    def resolve_output(self, path: str | Path) -> Path:
        """Return *path* unchanged if absolute, else relative to :attr:`output_dir`."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.output_dir / candidate

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON.

        Raises:
            ConfigError: If the file is missing or does not validate.
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
            return cls.model_validate_json(raw)
        except (OSError, ValidationError) as exc:
            raise ConfigError(f"Cannot load configuration from {path}: {exc}") from exc

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CODEFORGE_OUTPUT_DIR, CODEFORGE_ENCODING, CODEFORGE_LOG_LEVEL,
            CODEFORGE_OVERWRITE.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CODEFORGE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CODEFORGE_OUTPUT_DIR"])
        if os.environ.get("CODEFORGE_ENCODING"):
            kwargs["encoding"] = os.environ["CODEFORGE_ENCODING"]
        if os.environ.get("CODEFORGE_LOG_LEVEL"):
            kwargs["log_level"] = os.environ["CODEFORGE_LOG_LEVEL"]
        if "CODEFORGE_OVERWRITE" in os.environ:
            kwargs["overwrite"] = _parse_bool(
                "CODEFORGE_OVERWRITE", os.environ["CODEFORGE_OVERWRITE"]
            )

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")
