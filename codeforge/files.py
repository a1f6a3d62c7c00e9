"""File access used by agents to persist generated code.

Agents only depend on the ``FileAccess`` protocol so tests can swap in an
in-memory fake.  ``LocalFileAccess`` is the real implementation and runs the
blocking filesystem calls in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class FileAccess(Protocol):
    """Asynchronous read / write / exists against some file store."""

    async def write(self, path: str | Path, content: str) -> None:
        """Write *content* to *path*, creating parent directories."""
        ...

    async def read(self, path: str | Path) -> str:
        """Return the text stored at *path*."""
        ...

    async def exists(self, path: str | Path) -> bool:
        """Return ``True`` if *path* exists."""
        ...


class LocalFileAccess:
    """``FileAccess`` backed by the local filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def write(self, path: str | Path, content: str) -> None:
        target = Path(path)
        await asyncio.to_thread(_write_file, target, content, self.encoding)
        logger.debug("Wrote %d characters to %s", len(content), target)

    async def read(self, path: str | Path) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding=self.encoding)

    async def exists(self, path: str | Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str, encoding: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding=encoding)
