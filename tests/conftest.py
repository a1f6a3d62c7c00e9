"""Shared pytest fixtures for the codeforge test suite.

Provides reusable fixtures for:
- An in-memory ``FileAccess`` fake that counts calls
- A ``FileAccess`` fake whose writes always fail
- Agents wired to the fake
- Sample function and class descriptions
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from codeforge.agents import ClassGeneratorAgent, FunctionGeneratorAgent


# ---------------------------------------------------------------------------
# Fake file access
# ---------------------------------------------------------------------------

class FakeFileAccess:
    """In-memory ``FileAccess`` that records every call."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.calls: list[tuple[str, str]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def write(self, path: str | Path, content: str) -> None:
        self.calls.append(("write", str(path)))
        self.files[str(path)] = content

    async def read(self, path: str | Path) -> str:
        self.calls.append(("read", str(path)))
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    async def exists(self, path: str | Path) -> bool:
        self.calls.append(("exists", str(path)))
        return str(path) in self.files


class FailingFileAccess(FakeFileAccess):
    """``FileAccess`` whose writes raise ``PermissionError``."""

    def __init__(self, message: str = "Permission denied: /readonly/out.ts") -> None:
        super().__init__()
        self.message = message

    async def write(self, path: str | Path, content: str) -> None:
        self.calls.append(("write", str(path)))
        raise PermissionError(self.message)


@pytest.fixture
def fake_files() -> FakeFileAccess:
    return FakeFileAccess()


@pytest.fixture
def failing_files() -> FailingFileAccess:
    return FailingFileAccess()


# ---------------------------------------------------------------------------
# Agents
# ---------------------------------------------------------------------------

@pytest.fixture
def function_agent(fake_files: FakeFileAccess) -> FunctionGeneratorAgent:
    return FunctionGeneratorAgent(file_access=fake_files)


@pytest.fixture
def class_agent(fake_files: FakeFileAccess) -> ClassGeneratorAgent:
    return ClassGeneratorAgent(file_access=fake_files)


# ---------------------------------------------------------------------------
# Sample inputs
# ---------------------------------------------------------------------------

@pytest.fixture
def sum_input() -> dict[str, Any]:
    """The ``calculateSum`` function description."""
    return {
        "name": "calculateSum",
        "parameters": [
            {"name": "a", "type": "number"},
            {"name": "b", "type": "number"},
        ],
        "returnType": "number",
        "body": "return a + b;",
        "isAsync": False,
    }


@pytest.fixture
def user_input() -> dict[str, Any]:
    """The ``User`` class description."""
    return {
        "name": "User",
        "properties": [
            {"name": "id", "type": "string", "visibility": "private"},
            {"name": "name", "type": "string", "visibility": "public"},
        ],
    }
