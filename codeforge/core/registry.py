"""In-memory directory of agents keyed by name."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Optional

from codeforge.core.agent import Agent

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Name-keyed registry of :class:`Agent` instances.

    Registering under a name that is already taken replaces the previous
    agent.  Iteration order is registration order.  Not safe for concurrent
    mutation.
    """

    def __init__(self) -> None:
        self._agents: dict[str, Agent[Any]] = {}

    def register(self, agent: Agent[Any]) -> None:
        """Add *agent* under ``agent.name``, replacing any previous entry."""
        name = agent.get_name()
        if name in self._agents:
            logger.debug("Replacing registered agent %r", name)
        self._agents[name] = agent

    def unregister(self, name: str) -> bool:
        """Remove the agent called *name*.

        Returns:
            ``True`` if an agent was removed, ``False`` if none was registered.
        """
        removed = self._agents.pop(name, None) is not None
        if removed:
            logger.debug("Unregistered agent %r", name)
        return removed

    def get(self, name: str) -> Optional[Agent[Any]]:
        """Return the agent called *name*, or ``None``."""
        return self._agents.get(name)

    def get_all(self) -> list[Agent[Any]]:
        """Return every registered agent in registration order."""
        return list(self._agents.values())

    def list_names(self) -> list[str]:
        """Return the registered names, in the same order as :meth:`get_all`."""
        return list(self._agents.keys())

    def has(self, name: str) -> bool:
        """Return ``True`` if an agent is registered under *name*."""
        return name in self._agents

    def clear(self) -> None:
        """Remove every registered agent."""
        self._agents.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent[Any]]:
        return iter(self.get_all())
