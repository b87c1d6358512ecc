"""Parsing for the ``/agents`` command family.

``parse`` turns one line of user input into a command object, or returns
None when the line is ordinary chat text. Parsing never raises: malformed
``/agents`` input comes back as ``InlineUsageError`` or ``ShowHelp`` so the
caller can answer with a message.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import DEFAULT_MODEL

NAMESPACE = "/agents"


@dataclass(frozen=True)
class StartWizard:
    """``/agents new`` with no arguments."""


@dataclass(frozen=True)
class CreateAgentInline:
    name: str
    description: str = ""
    model: str = DEFAULT_MODEL
    system_prompt: str = ""


@dataclass(frozen=True)
class InlineUsageError:
    """``/agents new <rest>`` where no name could be taken from *rest*."""

    rest: str


@dataclass(frozen=True)
class ListAgents:
    pass


@dataclass(frozen=True)
class DeleteAgent:
    name: str


@dataclass(frozen=True)
class ShowHelp:
    sub: str = ""


Command = (
    StartWizard | CreateAgentInline | InlineUsageError
    | ListAgents | DeleteAgent | ShowHelp
)

HELP_TEXT = """\
Agent commands:
  /agents new                  Create an agent step by step
  /agents new <name> [--description "..."] [--model "..."] [--prompt "..."]
                               Create an agent in one line
  /agents list                 List configured agents
  /agents delete <name>        Delete an agent"""

USAGE_NEW = (
    'Usage: /agents new <name> [--description "..."] [--model "..."] '
    '[--prompt "..."]'
)
USAGE_DELETE = "Usage: /agents delete <name>"

_FLAGS = ("description", "model", "prompt")

# A double-quoted string, or a run of non-space characters.
_TOKEN_RE = re.compile(r'"([^"]*)"|\S+')
_FLAG_NAME_RE = re.compile(r"--(\w[\w-]*)")


def _split_first(text: str) -> tuple[str, str, str]:
    """Split off the first whitespace-delimited token, like str.partition."""
    parts = text.split(None, 1)
    if not parts:
        return "", "", ""
    if len(parts) == 1:
        return parts[0], "", ""
    return parts[0], " ", parts[1].strip()


def _flag_name(token: re.Match[str]) -> str | None:
    """Name of the ``--flag`` in *token*; quoted tokens are never flags."""
    if token.group(1) is not None:
        return None
    m = _FLAG_NAME_RE.fullmatch(token.group(0))
    return m.group(1) if m else None


def _token_value(token: re.Match[str]) -> str:
    quoted = token.group(1)
    return quoted if quoted is not None else token.group(0)


def scan_flags(text: str) -> dict[str, str]:
    """Collect ``--description``/``--model``/``--prompt`` values from *text*.

    The text is read once, left to right. Each flag consumes its value before
    scanning resumes, so ``--flag`` text inside a quoted value stays part of
    that value. A bare ``--prompt`` value runs up to the next ``--flag``.
    The first occurrence of a flag wins; unknown flags are ignored.
    """
    tokens = list(_TOKEN_RE.finditer(text))
    values: dict[str, str] = {}
    i = 0
    while i < len(tokens):
        flag = _flag_name(tokens[i])
        i += 1
        if flag not in _FLAGS:
            continue
        if i == len(tokens) or _flag_name(tokens[i]) is not None:
            continue
        first = tokens[i]
        if flag == "prompt" and first.group(1) is None:
            last = i
            while last + 1 < len(tokens) and _flag_name(tokens[last + 1]) is None:
                last += 1
            value = text[first.start():tokens[last].end()]
            i = last + 1
        else:
            value = _token_value(first)
            i += 1
        values.setdefault(flag, value)
    return values


def parse_new_args(rest: str, default_model: str = DEFAULT_MODEL) -> Command:
    """Parse the text after ``/agents new``: ``<name> [--flag value ...]``."""
    name, _, flags = _split_first(rest)
    if not name or name.startswith("--"):
        return InlineUsageError(rest=rest)

    values = scan_flags(flags)
    return CreateAgentInline(
        name=name,
        description=values.get("description", ""),
        model=values.get("model") or default_model,
        system_prompt=values.get("prompt", ""),
    )


def parse(text: str, default_model: str = DEFAULT_MODEL) -> Command | None:
    """Return the command in *text*, or None for plain chat text."""
    head, _, arg = _split_first(text)
    if head != NAMESPACE:
        return None

    sub, _, sub_arg = _split_first(arg)

    if sub == "new":
        if not sub_arg:
            return StartWizard()
        return parse_new_args(sub_arg, default_model=default_model)
    if sub == "list":
        return ListAgents()
    if sub == "delete":
        return DeleteAgent(name=" ".join(sub_arg.split()))
    return ShowHelp(sub=sub)
