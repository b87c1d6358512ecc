"""Transcript: the append-only log of user and coordinator turns."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

# ── Roles ───────────────────────────────────────────────────────────

ROLE_USER = "user"
ROLE_COORDINATOR = "coordinator"

_ROLES = (ROLE_USER, ROLE_COORDINATOR)

Listener = Callable[["Message"], None]


@dataclass(frozen=True)
class Message:
    """Immutable transcript entry.

    *options* holds the quick replies offered with a coordinator message,
    in display order.
    """

    id: int
    role: str
    content: str
    timestamp: str
    options: tuple[str, ...] = field(default_factory=tuple)

    @property
    def from_user(self) -> bool:
        return self.role == ROLE_USER


class Transcript:
    """Ordered log of messages. Entries are never edited or removed."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._seq = 0
        self._listeners: list[Listener] = []

    def append(
        self,
        role: str,
        content: str,
        options: Sequence[str] = (),
    ) -> Message:
        """Create the next message, store it, and notify listeners."""
        if role not in _ROLES:
            raise ValueError(f"unknown role: {role!r}")
        self._seq += 1
        msg = Message(
            id=self._seq,
            role=role,
            content=content,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            options=tuple(options),
        )
        self._messages.append(msg)
        for listener in list(self._listeners):
            listener(msg)
        return msg

    def add_user(self, content: str) -> Message:
        return self.append(ROLE_USER, content)

    def add_coordinator(
        self, content: str, options: Sequence[str] = (),
    ) -> Message:
        return self.append(ROLE_COORDINATOR, content, options)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* for every appended message.

        Returns a function that removes the subscription.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return _unsubscribe

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def by_role(self, role: str) -> list[Message]:
        return [m for m in self._messages if m.role == role]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))
