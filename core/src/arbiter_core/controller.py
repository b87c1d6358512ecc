"""DialogController: the turn handler the UI talks to."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from . import wizard
from .commands import (
    HELP_TEXT,
    USAGE_DELETE,
    USAGE_NEW,
    Command,
    CreateAgentInline,
    DeleteAgent,
    InlineUsageError,
    ListAgents,
    ShowHelp,
    StartWizard,
    parse,
)
from .models import MODEL_OPTIONS
from .paths import Paths
from .registry import Agent, AgentRegistry, SubAgent, SubAgentBoard
from .scheduler import ReplyScheduler
from .settings import Settings
from .transcript import Message, Transcript

log = logging.getLogger(__name__)

NO_AGENTS_TEXT = "No agents configured. Use /agents new to create one."


class DialogController:
    """Owns one conversation: transcript, agents, subagents and wizard state.

    Routing for each submitted turn:
      1. Wizard running → the text answers the current wizard step
      2. ``/agents ...`` command → execute it
      3. Anything else → one delayed acknowledgement from the coordinator

    Turns are handled synchronously; only the acknowledgement (and the
    prompt from ``open_wizard``) go through the reply scheduler.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: AgentRegistry | None = None,
        transcript: Transcript | None = None,
    ) -> None:
        self._settings = settings or Settings(Paths())
        config = self._settings.load()
        self._default_model: str = self._settings.get_model()
        self._reply_delay = self._settings.get_delay("reply_delay")
        self._wizard_delay = self._settings.get_delay("wizard_delay")
        self._default_reply: str = config["default_reply"]
        self._models = dict(MODEL_OPTIONS)

        self.transcript = transcript or Transcript()
        self.registry = registry or AgentRegistry()
        self.subagents = SubAgentBoard()
        self._wizard: wizard.WizardState | None = None
        self._scheduler = ReplyScheduler(self._respond)
        self._wizard_prompt: tuple[asyncio.Future[Message], str] | None = None

    # ── Wizard state ─────────────────────────────────────────────────

    @property
    def wizard_state(self) -> wizard.WizardState | None:
        return self._wizard

    @property
    def wizard_active(self) -> bool:
        return self._wizard is not None

    @property
    def wizard_step(self) -> str | None:
        return wizard.step_of(self._wizard)

    @property
    def scheduler(self) -> ReplyScheduler:
        return self._scheduler

    # ── Input ────────────────────────────────────────────────────────

    def submit(self, raw_text: str) -> None:
        """Record a user turn and respond to it.

        Free text needs a running event loop for its delayed reply; without
        one this raises RuntimeError before the turn is recorded.
        """
        command = None
        if self._wizard is None:
            command = parse(raw_text, default_model=self._default_model)
            if command is None:
                asyncio.get_running_loop()

        self._flush_wizard_prompt()
        self.transcript.add_user(raw_text)

        if self._wizard is not None:
            log.debug("wizard step %s <- %r", self.wizard_step, raw_text)
            self._advance_wizard(raw_text)
            return

        if command is not None:
            log.debug("command %r", command)
            self._execute(command)
            return

        log.debug("free text, scheduling acknowledgement")
        self._scheduler.schedule(self._default_reply, delay=self._reply_delay)

    def select_option(self, option_text: str) -> None:
        """Quick-reply button press; same as typing the option."""
        self.submit(option_text)

    def open_wizard(self) -> bool:
        """Start the wizard from a button instead of a typed command.

        The first prompt arrives after ``wizard_delay``, or right before the
        next user turn if that comes sooner. Returns False and does nothing
        if a wizard is already running.
        """
        if self._wizard is not None:
            log.debug("open_wizard ignored, wizard already at %s", self.wizard_step)
            return False
        first = wizard.start()
        self._wizard = first.state
        self._wizard_prompt = (
            self._scheduler.schedule(first.reply, delay=self._wizard_delay),
            first.reply,
        )
        return True

    # ── Subagent feed ────────────────────────────────────────────────

    def update_subagent(self, snapshot: SubAgent) -> None:
        self.subagents.update(snapshot)

    def remove_subagent(self, subagent_id: str) -> bool:
        return self.subagents.remove(subagent_id)

    # ── Lifecycle ────────────────────────────────────────────────────

    async def drain(self) -> None:
        """Wait for every scheduled reply accepted so far."""
        await self._scheduler.drain()

    def close(self) -> None:
        self._scheduler.stop()

    # ── Commands ─────────────────────────────────────────────────────

    def _execute(self, command: Command) -> None:
        match command:
            case StartWizard():
                first = wizard.start()
                self._wizard = first.state
                self._respond(first.reply)
            case CreateAgentInline():
                self._create_inline(command)
            case InlineUsageError():
                self._respond(USAGE_NEW)
            case ListAgents():
                self._respond(self._format_agents())
            case DeleteAgent(name=name):
                self._delete(name)
            case ShowHelp():
                self._respond(HELP_TEXT)

    def _create_inline(self, command: CreateAgentInline) -> None:
        agent = Agent(
            name=command.name,
            description=command.description,
            model=command.model,
            system_prompt=command.system_prompt,
        )
        self.registry.create(agent)
        lines = [f"Agent '{agent.name}' created with model {agent.model}."]
        if agent.description:
            lines.append(f"Description: {agent.description}")
        if agent.system_prompt:
            lines.append(f"System prompt: {agent.system_prompt}")
        self._respond("\n".join(lines))

    def _format_agents(self) -> str:
        agents = self.registry.list()
        if not agents:
            return NO_AGENTS_TEXT
        return "\n".join(
            f"{i}. {a.name} ({a.status.value})"
            for i, a in enumerate(agents, start=1)
        )

    def _delete(self, name: str) -> None:
        if not name:
            self._respond(USAGE_DELETE)
            return
        if self.registry.delete_by_name(name):
            self._respond(f"Agent '{name}' deleted.")
        else:
            self._respond(f"No agent named '{name}'.")

    # ── Wizard ───────────────────────────────────────────────────────

    def _flush_wizard_prompt(self) -> None:
        """Post a still-pending ``open_wizard`` prompt now, ahead of the turn."""
        if self._wizard_prompt is None:
            return
        future, text = self._wizard_prompt
        self._wizard_prompt = None
        if future.done():
            return
        future.cancel()
        self._respond(text)

    def _advance_wizard(self, text: str) -> None:
        result = wizard.advance(self._wizard, text, self._models)
        self._wizard = result.state
        if result.agent is not None:
            self.registry.create(result.agent)
            log.info("wizard finished for agent %s", result.agent.name)
        self._respond(result.reply, result.options)

    # ── Output ───────────────────────────────────────────────────────

    def _respond(self, text: str, options: Sequence[str] = ()) -> Message:
        return self.transcript.add_coordinator(text, options)
