"""Sidebar listing configured agents and delegated subagents."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from arbiter_core.controller import DialogController
from arbiter_core.registry import Agent, AgentStatus, SubAgent, SubAgentStatus

log = logging.getLogger(__name__)

_AGENT_DOT: dict[AgentStatus, str] = {
    AgentStatus.IDLE: "green",
    AgentStatus.ACTIVE: "yellow",
    AgentStatus.ERROR: "red",
}

_SUBAGENT_DOT: dict[SubAgentStatus, str] = {
    SubAgentStatus.RUNNING: "yellow",
    SubAgentStatus.COMPLETED: "green",
    SubAgentStatus.FAILED: "red",
}


def render_agents(agents: list[Agent]) -> Text:
    if not agents:
        return Text("No agents yet", style="italic dim")
    text = Text()
    for i, agent in enumerate(agents):
        if i:
            text.append("\n")
        text.append("● ", style=_AGENT_DOT.get(agent.status, "white"))
        text.append(agent.name)
        text.append(f"  {agent.model}", style="dim")
    return text


def render_subagents(subagents: list[SubAgent]) -> Text:
    if not subagents:
        return Text("No active subagents", style="italic dim")
    text = Text()
    for i, sub in enumerate(subagents):
        if i:
            text.append("\n")
        text.append("● ", style=_SUBAGENT_DOT.get(sub.status, "white"))
        text.append(f"{sub.name} ({sub.status.value})")
        if sub.progress:
            text.append(f"\n    {sub.progress}", style="dim")
    return text


class AgentSidebar(Vertical):
    """Agent list with a "+ New" button, plus the subagent panel."""

    DEFAULT_CSS = """
    AgentSidebar {
        width: 32;
        border-right: solid $primary-darken-2;
        padding: 0 1;
    }
    AgentSidebar .section-title {
        text-style: bold;
        width: 1fr;
        padding: 1 0 0 0;
    }
    AgentSidebar #agents-header {
        height: auto;
    }
    AgentSidebar #new-agent {
        min-width: 9;
    }
    AgentSidebar #agent-list, AgentSidebar #subagent-list {
        height: auto;
        padding: 1 0;
    }
    """

    def __init__(self, controller: DialogController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._unsubscribers: list = []
        self.agents_text = render_agents([])
        self.subagents_text = render_subagents([])

    def compose(self) -> ComposeResult:
        with Horizontal(id="agents-header"):
            yield Static("Agents", classes="section-title")
            yield Button("+ New", id="new-agent", variant="primary")
        yield Static(id="agent-list")
        yield Static("Subagents", classes="section-title")
        yield Static(id="subagent-list")

    def on_mount(self) -> None:
        self.refresh_agents()
        self.refresh_subagents()
        self._unsubscribers = [
            self._controller.transcript.subscribe(lambda _msg: self.refresh_agents()),
            self._controller.subagents.subscribe(self.refresh_subagents),
        ]

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "new-agent":
            return
        event.stop()
        try:
            self._controller.open_wizard()
        except Exception as exc:
            log.exception("failed to open the agent wizard")
            self.notify(f"Error: {exc}", severity="error")

    def refresh_agents(self) -> None:
        self.agents_text = render_agents(self._controller.registry.list())
        self.query_one("#agent-list", Static).update(self.agents_text)

    def refresh_subagents(self) -> None:
        self.subagents_text = render_subagents(self._controller.subagents.list())
        self.query_one("#subagent-list", Static).update(self.subagents_text)
