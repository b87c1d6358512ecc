"""Built-in TUI widgets."""

from .agents import AgentSidebar
from .chat import ChatPanel

__all__ = ["AgentSidebar", "ChatPanel"]
