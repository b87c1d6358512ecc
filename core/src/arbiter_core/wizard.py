"""Step-by-step agent creation.

Each step is its own state class holding exactly the answers collected so
far. ``advance`` is a pure transition: it takes the current state and one
user reply and returns the next state together with what to say back. The
caller owns the state value; ``None`` means no wizard is running.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .models import MODEL_OPTIONS, model_labels, resolve_model
from .registry import Agent, AgentStatus

SKIP = "skip"


@dataclass(frozen=True)
class AwaitingName:
    step = "name"


@dataclass(frozen=True)
class AwaitingDescription:
    name: str
    step = "description"


@dataclass(frozen=True)
class AwaitingModel:
    name: str
    description: str
    step = "model"


@dataclass(frozen=True)
class AwaitingPrompt:
    name: str
    description: str
    model: str
    step = "systemPrompt"


WizardState = AwaitingName | AwaitingDescription | AwaitingModel | AwaitingPrompt


@dataclass(frozen=True)
class WizardStep:
    """Result of one transition.

    *agent* is set only on the final step, when *state* is None.
    """

    state: WizardState | None
    reply: str
    options: tuple[str, ...] = field(default_factory=tuple)
    agent: Agent | None = None


PROMPT_NAME = "Let's set up a new agent. What would you like to name this agent?"


def _skippable(text: str) -> str:
    return "" if text == SKIP else text


def start() -> WizardStep:
    return WizardStep(state=AwaitingName(), reply=PROMPT_NAME)


def step_of(state: WizardState | None) -> str | None:
    """Name of the field the next reply fills, or None when inactive."""
    return None if state is None else state.step


def advance(
    state: WizardState,
    text: str,
    models: Mapping[str, str] = MODEL_OPTIONS,
) -> WizardStep:
    """Apply one user reply to *state*."""
    if isinstance(state, AwaitingName):
        return WizardStep(
            state=AwaitingDescription(name=text),
            reply=(
                f"Agent name: {text}\n\n"
                "Give a short description of what this agent does "
                f"(or type '{SKIP}')."
            ),
        )

    if isinstance(state, AwaitingDescription):
        return WizardStep(
            state=AwaitingModel(name=state.name, description=_skippable(text)),
            reply="Which model should this agent use? Pick one or type a model id.",
            options=model_labels(models),
        )

    if isinstance(state, AwaitingModel):
        model = resolve_model(text, models)
        return WizardStep(
            state=AwaitingPrompt(
                name=state.name, description=state.description, model=model,
            ),
            reply=(
                f"Model: {model}\n\n"
                f"Finally, enter a system prompt for this agent (or type '{SKIP}')."
            ),
        )

    if isinstance(state, AwaitingPrompt):
        agent = Agent(
            name=state.name,
            description=state.description,
            model=state.model,
            system_prompt=_skippable(text),
            status=AgentStatus.IDLE,
        )
        return WizardStep(
            state=None,
            reply=f"Agent '{agent.name}' created with model {agent.model}.",
            agent=agent,
        )

    raise TypeError(f"not a wizard state: {state!r}")
