"""Chat panel: transcript log, quick-reply buttons, and text input."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Button, Input, RichLog

from arbiter_core.controller import DialogController
from arbiter_core.transcript import Message

log = logging.getLogger(__name__)


class ChatPanel(Widget):
    """Renders the controller's transcript and feeds user input back to it."""

    DEFAULT_CSS = """
    ChatPanel {
        height: 1fr;
        layout: vertical;
    }
    ChatPanel RichLog {
        height: 1fr;
        border: solid $primary-darken-2;
        padding: 0 1;
    }
    ChatPanel #options {
        height: auto;
        padding: 0 1;
    }
    ChatPanel #options Button {
        margin: 0 1 0 0;
        min-width: 8;
    }
    ChatPanel Input {
        dock: bottom;
    }
    """

    def __init__(self, controller: DialogController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        with Vertical():
            yield RichLog(id="chat-log", highlight=False, markup=False, wrap=True)
            yield Horizontal(id="options")
            yield Input(
                placeholder="Message the coordinator, or type /agents",
                id="chat-input",
            )

    def on_mount(self) -> None:
        log_widget = self.query_one("#chat-log", RichLog)
        for msg in self._controller.transcript:
            self._write(log_widget, msg)
        self._unsubscribe = self._controller.transcript.subscribe(self._on_transcript_message)
        self.query_one("#chat-input", Input).focus()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # ── input ────────────────────────────────────────────────────────

    def on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        if not text:
            return
        event.input.clear()
        try:
            self._controller.submit(text)
        except Exception as exc:
            log.exception("failed to handle input %r", text)
            self.notify(f"Error: {exc}", severity="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not event.button.has_class("option"):
            return
        event.stop()
        try:
            self._controller.select_option(event.button.name or "")
        except Exception as exc:
            log.exception("failed to handle quick reply %r", event.button.name)
            self.notify(f"Error: {exc}", severity="error")

    # ── rendering ────────────────────────────────────────────────────

    def _on_transcript_message(self, msg: Message) -> None:
        self._write(self.query_one("#chat-log", RichLog), msg)
        if not msg.from_user:
            self._show_options(msg.options)

    @staticmethod
    def _write(log_widget: RichLog, msg: Message) -> None:
        if msg.from_user:
            log_widget.write(Text(f"> {msg.content}", style="bold cyan"))
        else:
            log_widget.write(Text(msg.content))

    def _show_options(self, options: tuple[str, ...]) -> None:
        container = self.query_one("#options", Horizontal)
        container.remove_children()
        if options:
            container.mount_all(
                Button(label, name=label, classes="option")
                for label in options
            )
        log.debug("showing %d quick replies", len(options))

    @property
    def option_labels(self) -> list[str]:
        return [
            b.name or ""
            for b in self.query_one("#options", Horizontal).query(Button)
        ]
