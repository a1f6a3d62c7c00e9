"""Shared helpers for the codeforge command-line driver.

Provides structured input loading (JSON or YAML) through a ``FileAccess``
collaborator and Rich-based console output.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from codeforge.files import FileAccess

console = Console()


class InputFileError(Exception):
    """Raised when an input description file cannot be read or parsed."""


# ---------------------------------------------------------------------------
# Structured input loading
# ---------------------------------------------------------------------------

_YAML_SUFFIXES = {".yaml", ".yml"}


def parse_structured(text: str, suffix: str) -> dict[str, Any]:
    """Parse *text* as YAML when *suffix* is ``.yaml``/``.yml``, else as JSON.

    Raises:
        InputFileError: If the text does not parse or is not a mapping.
    """
    try:
        if suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InputFileError(f"Cannot parse input: {exc}") from exc

    if not isinstance(data, dict):
        raise InputFileError("Input must be a mapping at the top level")
    return data


async def load_input_file(path: str | Path, file_access: FileAccess) -> dict[str, Any]:
    """Read and parse the description file at *path*.

    Raises:
        InputFileError: If the file is missing, unreadable, or malformed.
    """
    file_path = Path(path)
    if not await file_access.exists(file_path):
        raise InputFileError(f"Input file not found: {file_path}")
    try:
        text = await file_access.read(file_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Cannot read {file_path}: {exc}") from exc
    return parse_structured(text, file_path.suffix)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(rows: list[dict[str, str]], title: str = "Agents") -> None:
    """Print a table with one column per key of the first row."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    if rows:
        for column in rows[0]:
            table.add_column(column.capitalize())
        for row in rows:
            table.add_row(*(str(value) for value in row.values()))

    console.print(table)
    console.print()


def print_code(code: str, language: str = "typescript") -> None:
    """Print generated source with syntax highlighting."""
    console.print(Syntax(code, language, theme="ansi_dark", line_numbers=False))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
