"""Tests for arbiter_core.commands."""

import pytest

from arbiter_core.commands import (
    CreateAgentInline,
    DeleteAgent,
    InlineUsageError,
    ListAgents,
    ShowHelp,
    StartWizard,
    parse,
    scan_flags,
)
from arbiter_core.models import DEFAULT_MODEL


class TestNotACommand:
    @pytest.mark.parametrize("text", [
        "hello there",
        "",
        "   ",
        "/agent new",
        "/agentsnew",
        "/help",
        "please run /agents list",
    ])
    def test_returns_none(self, text):
        assert parse(text) is None


class TestNew:
    def test_bare_new_starts_wizard(self):
        assert parse("/agents new") == StartWizard()

    def test_trailing_whitespace_still_starts_wizard(self):
        assert parse("  /agents new   ") == StartWizard()

    def test_inline_all_flags(self):
        cmd = parse(
            '/agents new foo --description "hi there" --model gpt-4 --prompt "be nice"'
        )
        assert cmd == CreateAgentInline(
            name="foo",
            description="hi there",
            model="gpt-4",
            system_prompt="be nice",
        )

    def test_inline_name_only_uses_defaults(self):
        cmd = parse("/agents new researcher")
        assert cmd == CreateAgentInline(
            name="researcher", description="", model=DEFAULT_MODEL, system_prompt="",
        )

    def test_default_model_override(self):
        cmd = parse("/agents new bot", default_model="llama3")
        assert cmd.model == "llama3"

    def test_bare_prompt_is_greedy_to_end(self):
        cmd = parse("/agents new bot --prompt you are a careful reviewer")
        assert cmd.system_prompt == "you are a careful reviewer"

    def test_bare_prompt_stops_at_next_flag(self):
        cmd = parse("/agents new bot --prompt be brief and kind --model gpt-4o")
        assert cmd.system_prompt == "be brief and kind"
        assert cmd.model == "gpt-4o"

    def test_bare_description_takes_one_token(self):
        cmd = parse("/agents new bot --description helper extra words")
        assert cmd.description == "helper"

    def test_flags_in_any_order(self):
        cmd = parse('/agents new bot --model gpt-4o --description "a b"')
        assert cmd.model == "gpt-4o"
        assert cmd.description == "a b"

    def test_empty_quoted_description(self):
        cmd = parse('/agents new bot --description ""')
        assert cmd.description == ""

    def test_extra_words_after_name_are_ignored(self):
        cmd = parse("/agents new my agent --model gpt-4o")
        assert cmd.name == "my"
        assert cmd.model == "gpt-4o"

    def test_flag_in_name_position_is_usage_error(self):
        cmd = parse("/agents new --model gpt-4o")
        assert isinstance(cmd, InlineUsageError)

    def test_flag_text_inside_quoted_prompt_is_value(self):
        cmd = parse('/agents new foo --prompt "always pass --model gpt-4 to tools"')
        assert cmd.system_prompt == "always pass --model gpt-4 to tools"
        assert cmd.model == DEFAULT_MODEL

    def test_flag_text_inside_quoted_description_is_value(self):
        cmd = parse('/agents new foo --description "see --prompt docs"')
        assert cmd.description == "see --prompt docs"
        assert cmd.system_prompt == ""

    def test_quoted_value_does_not_hide_later_flags(self):
        cmd = parse('/agents new foo --description "uses --model x" --model gpt-4o')
        assert cmd.description == "uses --model x"
        assert cmd.model == "gpt-4o"

    def test_bare_prompt_keeps_quoted_flag_text(self):
        cmd = parse('/agents new foo --prompt say "--model x" now --model gpt-4o')
        assert cmd.system_prompt == 'say "--model x" now'
        assert cmd.model == "gpt-4o"

    def test_flag_without_value_is_ignored(self):
        cmd = parse("/agents new foo --description --model gpt-4o")
        assert cmd.description == ""
        assert cmd.model == "gpt-4o"

    def test_first_occurrence_wins(self):
        cmd = parse("/agents new foo --model one --model two")
        assert cmd.model == "one"


class TestScanFlags:
    def test_unknown_flags_ignored(self):
        assert scan_flags("--color red --model gpt-4o") == {"model": "gpt-4o"}

    def test_empty(self):
        assert scan_flags("") == {}

    def test_bare_prompt_preserves_inner_spacing(self):
        assert scan_flags("--prompt be   terse") == {"prompt": "be   terse"}


class TestList:
    def test_list(self):
        assert parse("/agents list") == ListAgents()

    def test_list_ignores_trailing_args(self):
        assert parse("/agents list all") == ListAgents()


class TestDelete:
    def test_single_token(self):
        assert parse("/agents delete foo") == DeleteAgent(name="foo")

    def test_multi_token_rejoined_with_single_spaces(self):
        assert parse("/agents delete my    old  agent") == DeleteAgent(name="my old agent")

    def test_missing_name(self):
        assert parse("/agents delete") == DeleteAgent(name="")


class TestHelp:
    def test_empty_subcommand(self):
        assert isinstance(parse("/agents"), ShowHelp)

    def test_unknown_subcommand(self):
        cmd = parse("/agents rename foo bar")
        assert cmd == ShowHelp(sub="rename")

    def test_subcommands_are_case_sensitive(self):
        assert isinstance(parse("/agents LIST"), ShowHelp)
