"""Agent registry and the subagent status board."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from enum import Enum

log = logging.getLogger(__name__)


class AgentStatus(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ERROR = "error"


class SubAgentStatus(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class Agent:
    """A configured agent. Names are not required to be unique."""

    name: str
    description: str = ""
    model: str = ""
    system_prompt: str = ""
    status: AgentStatus = AgentStatus.IDLE


@dataclass(frozen=True)
class SubAgent:
    """Latest known state of a delegated subagent (display only)."""

    id: str
    name: str
    status: SubAgentStatus = SubAgentStatus.RUNNING
    progress: str | None = None


class AgentRegistry:
    """Agents in creation order.

    Lookup and deletion by name act on the first exact match; later
    agents sharing that name are only reachable through iteration.
    """

    def __init__(self) -> None:
        self._agents: list[Agent] = []

    def create(self, agent: Agent) -> None:
        self._agents.append(agent)
        log.info("agent created: %s (%s)", agent.name, agent.model)

    def find_by_name(self, name: str) -> Agent | None:
        for agent in self._agents:
            if agent.name == name:
                return agent
        return None

    def delete_by_name(self, name: str) -> bool:
        """Remove the first agent named *name*. Returns True if one was removed."""
        for idx, agent in enumerate(self._agents):
            if agent.name == name:
                del self._agents[idx]
                log.info("agent deleted: %s", name)
                return True
        return False

    def set_status(self, name: str, status: AgentStatus | str) -> Agent | None:
        """Replace the first agent named *name* with a copy in *status*.

        Used by the delegation side; the dialog itself never calls it.
        """
        status = AgentStatus(status)
        for idx, agent in enumerate(self._agents):
            if agent.name == name:
                updated = replace(agent, status=status)
                self._agents[idx] = updated
                return updated
        return None

    def list(self) -> list[Agent]:
        return list(self._agents)

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(list(self._agents))


class SubAgentBoard:
    """Stores the most recent snapshot of each subagent, keyed by id."""

    def __init__(self) -> None:
        self._subagents: dict[str, SubAgent] = {}
        self._listeners: list[Callable[[], None]] = []

    def update(self, snapshot: SubAgent) -> None:
        """Insert or replace the snapshot for ``snapshot.id``."""
        snapshot = replace(snapshot, status=SubAgentStatus(snapshot.status))
        self._subagents[snapshot.id] = snapshot
        self._notify()

    def remove(self, subagent_id: str) -> bool:
        if self._subagents.pop(subagent_id, None) is None:
            return False
        self._notify()
        return True

    def get(self, subagent_id: str) -> SubAgent | None:
        return self._subagents.get(subagent_id)

    def list(self) -> list[SubAgent]:
        return list(self._subagents.values())

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Call *listener* after every change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def __len__(self) -> int:
        return len(self._subagents)
