"""Tests for arbiter_core.wizard."""

import pytest

from arbiter_core import wizard
from arbiter_core.models import MODEL_OPTIONS
from arbiter_core.registry import AgentStatus
from arbiter_core.wizard import (
    AwaitingDescription,
    AwaitingModel,
    AwaitingName,
    AwaitingPrompt,
)


def _run(*answers):
    step = wizard.start()
    for answer in answers:
        step = wizard.advance(step.state, answer)
    return step


class TestStart:
    def test_opens_at_name(self):
        step = wizard.start()
        assert step.state == AwaitingName()
        assert wizard.step_of(step.state) == "name"
        assert "name" in step.reply.lower()
        assert step.agent is None

    def test_inactive_has_no_step(self):
        assert wizard.step_of(None) is None


class TestTransitions:
    def test_name_step(self):
        step = _run("scout")
        assert step.state == AwaitingDescription(name="scout")
        assert "skip" in step.reply

    def test_name_accepts_empty_and_commands_verbatim(self):
        assert _run("").state == AwaitingDescription(name="")
        assert _run("/agents list").state == AwaitingDescription(name="/agents list")

    def test_description_step_offers_models(self):
        step = _run("scout", "finds things")
        assert step.state == AwaitingModel(name="scout", description="finds things")
        assert step.options == tuple(MODEL_OPTIONS)

    def test_description_skip(self):
        step = _run("scout", "skip")
        assert step.state.description == ""

    def test_skip_is_case_sensitive(self):
        step = _run("scout", "Skip")
        assert step.state.description == "Skip"

    def test_model_label_resolves(self):
        label, ident = next(iter(MODEL_OPTIONS.items()))
        step = _run("scout", "d", label)
        assert step.state == AwaitingPrompt(name="scout", description="d", model=ident)
        assert "skip" in step.reply

    def test_model_custom_identifier_kept(self):
        step = _run("scout", "d", "mistral-large")
        assert step.state.model == "mistral-large"

    def test_custom_model_table(self):
        step = wizard.start()
        step = wizard.advance(step.state, "a")
        step = wizard.advance(step.state, "b", models={"Fast": "fast-1"})
        assert step.options == ("Fast",)
        step = wizard.advance(step.state, "Fast", models={"Fast": "fast-1"})
        assert step.state.model == "fast-1"


class TestCommit:
    def test_full_run_builds_agent(self):
        step = _run("scout", "finds things", "GPT-4o", "be thorough")
        assert step.state is None
        agent = step.agent
        assert agent.name == "scout"
        assert agent.description == "finds things"
        assert agent.model == "gpt-4o"
        assert agent.system_prompt == "be thorough"
        assert agent.status is AgentStatus.IDLE
        assert "scout" in step.reply

    def test_prompt_skip(self):
        step = _run("scout", "skip", "GPT-4o", "skip")
        assert step.agent.description == ""
        assert step.agent.system_prompt == ""


class TestInvalidState:
    def test_rejects_non_state(self):
        with pytest.raises(TypeError):
            wizard.advance("name", "x")
