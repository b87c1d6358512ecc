"""Settings system backed by JSON file, class-based."""

from __future__ import annotations

import json
import logging
from typing import Any

from .models import DEFAULT_MODEL
from .paths import Paths

log = logging.getLogger(__name__)

DEFAULT_REPLY = (
    "Got it. I can't delegate work to agents yet, but you can configure "
    "them here. Type /agents for the available commands."
)

DEFAULTS: dict[str, Any] = {
    "default_model": DEFAULT_MODEL,
    "reply_delay": 0.5,
    "wizard_delay": 0.3,
    "default_reply": DEFAULT_REPLY,
}

_DELAY_KEYS = ("reply_delay", "wizard_delay")


class Settings:
    """Settings backed by a JSON file.

    Usage:
        settings = Settings(paths)
        model = settings.get_model()
        settings.set("reply_delay", 0)
    """

    def __init__(self, paths: Paths) -> None:
        self.paths = paths

    def load(self) -> dict[str, Any]:
        """Read settings from disk, filling missing keys from defaults."""
        settings = dict(DEFAULTS)
        try:
            raw = self.paths.settings_file.read_text(encoding="utf-8")
            stored = json.loads(raw)
            settings.update(stored)
        except FileNotFoundError:
            pass
        except json.JSONDecodeError:
            log.warning(
                "ignoring unreadable settings file %s", self.paths.settings_file,
            )
        return settings

    def save(self, settings: dict[str, Any]) -> None:
        """Write settings to disk."""
        self.paths.settings_file.parent.mkdir(parents=True, exist_ok=True)
        self.paths.settings_file.write_text(
            json.dumps(settings, indent=4) + "\n", encoding="utf-8",
        )

    def get(self, key: str) -> Any:
        """Return a single setting value."""
        return self.load().get(key, DEFAULTS.get(key))

    def set(self, key: str, value: Any) -> None:
        """Update a single setting and persist.

        Raises KeyError for names that are not in DEFAULTS.
        """
        if not self.is_valid_key(key):
            raise KeyError(key)
        settings = self.load()
        settings[key] = value
        self.save(settings)

    @staticmethod
    def is_valid_key(key: str) -> bool:
        """Return True if *key* is a recognised setting name."""
        return key in DEFAULTS

    def get_model(self) -> str:
        """Model identifier for agents created without ``--model``."""
        return self.get("default_model") or DEFAULT_MODEL

    def get_delay(self, key: str) -> float:
        """Return a delay setting in seconds, clamped at zero.

        Non-numeric values fall back to the default.
        """
        if key not in _DELAY_KEYS:
            raise KeyError(key)
        try:
            value = float(self.get(key))
        except (TypeError, ValueError):
            log.warning("invalid %s setting, using default", key)
            value = float(DEFAULTS[key])
        return max(value, 0.0)
