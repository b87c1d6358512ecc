"""Model catalog: quick-reply labels and the identifiers they stand for."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_MODEL = "claude-3-5-sonnet-20241022"

# Display label -> model identifier, in the order the wizard offers them.
MODEL_OPTIONS: dict[str, str] = {
    "Claude 3.5 Sonnet": "claude-3-5-sonnet-20241022",
    "Claude 3 Opus": "claude-3-opus-20240229",
    "Claude 3 Haiku": "claude-3-haiku-20240307",
    "GPT-4o": "gpt-4o",
    "GPT-4 Turbo": "gpt-4-turbo",
}


def model_labels(options: Mapping[str, str] = MODEL_OPTIONS) -> tuple[str, ...]:
    return tuple(options)


def resolve_model(reply: str, options: Mapping[str, str] = MODEL_OPTIONS) -> str:
    """Map a display label to its identifier.

    Anything that is not a known label is returned unchanged so a custom
    identifier can be typed in directly.
    """
    return options.get(reply, reply)
