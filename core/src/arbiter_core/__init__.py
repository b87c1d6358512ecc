"""arbiter-core: conversational agent configuration engine."""

from .controller import DialogController
from .registry import Agent, AgentRegistry, AgentStatus, SubAgent, SubAgentStatus
from .transcript import Message, Transcript

__all__ = [
    "Agent",
    "AgentRegistry",
    "AgentStatus",
    "DialogController",
    "Message",
    "SubAgent",
    "SubAgentStatus",
    "Transcript",
]
