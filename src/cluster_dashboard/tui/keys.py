"""Key events and action descriptors.

An ``ActionDescriptor`` binds one keypress to a named action. Key names are
matched case-insensitively, so ``d`` and ``D`` trigger the same action.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual import events

CONFIRM_KEY = "y"
CANCEL_KEY = "n"


@dataclass(frozen=True)
class KeyEvent:
    """A keypress as reported by the input layer.

    Attributes:
        name: Key name (``"d"``, ``"y"``, ``"escape"``). ``None`` or empty
            for events the input layer could not name; those never match.
        character: Printable character, if any.
    """

    name: str | None
    character: str | None = None

    @property
    def normalized(self) -> str:
        return (self.name or "").lower()

    def matches(self, key: str) -> bool:
        """True if this event is the (case-insensitive) ``key``."""
        return bool(self.name) and self.normalized == key.lower()

    @classmethod
    def from_textual(cls, event: events.Key) -> KeyEvent:
        return cls(name=event.key, character=event.character)


@dataclass(frozen=True)
class ActionDescriptor:
    """An action offered in the action bar.

    Attributes:
        key: Single character bound to the action.
        label: Text shown next to the key in the action bar.
        requires_confirmation: Gate the action behind a Y/N prompt.
    """

    key: str
    label: str
    requires_confirmation: bool = False


def find_action(actions: Sequence[ActionDescriptor], key_event: KeyEvent) -> ActionDescriptor | None:
    """Return the first action bound to ``key_event``, or None."""
    for action in actions:
        if key_event.matches(action.key):
            return action
    return None
