"""ArbiterApp: Textual shell around a DialogController."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Static

from arbiter_core.controller import DialogController

from .keybindings import GLOBAL_BINDINGS
from .widgets import AgentSidebar, ChatPanel

log = logging.getLogger(__name__)

BANNER = "Arbiter"
TAGLINE = "LLM Agent Coordinator"


class ArbiterApp(App):
    """Arbiter TUI: agent sidebar on the left, coordinator chat on the right."""

    ENABLE_COMMAND_PALETTE = False
    TITLE = BANNER
    BINDINGS = GLOBAL_BINDINGS

    DEFAULT_CSS = """
    #banner {
        height: auto;
        padding: 0 1;
        text-style: bold;
        color: $accent;
    }
    #tagline {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    #main-header {
        height: 1;
        background: $primary-darken-2;
        color: $text;
        padding: 0 1;
        text-style: bold;
    }
    #body {
        height: 1fr;
    }
    #left {
        width: 34;
    }
    #main {
        width: 1fr;
    }
    """

    def __init__(
        self,
        controller: DialogController | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.controller = controller or DialogController()

    def compose(self) -> ComposeResult:
        with Horizontal(id="body"):
            with Vertical(id="left"):
                yield Static(BANNER, id="banner")
                yield Static(TAGLINE, id="tagline")
                yield AgentSidebar(self.controller, id="sidebar")
            with Vertical(id="main"):
                yield Static("Agent Coordination Dashboard", id="main-header")
                yield ChatPanel(self.controller, id="chat")
        yield Footer()

    async def action_quit(self) -> None:
        """Drop pending replies and exit."""
        log.debug("shutting down, %d replies pending", self.controller.scheduler.pending)
        self.controller.close()
        self.exit()

    def action_new_agent(self) -> None:
        """Same as pressing the sidebar's "+ New" button."""
        try:
            self.controller.open_wizard()
        except Exception as exc:
            log.exception("failed to open the agent wizard")
            self.notify(f"Error: {exc}", severity="error")
