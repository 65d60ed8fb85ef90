"""Action bar with Y/N confirmation for destructive actions.

The bar lists the available actions (``[D]: Delete [C]: Copy ``) and
listens for their keys on a shared ``KeypressStream``. Actions that require
confirmation switch the bar to ``Are you sure [Y/N]:`` and only fire once
``y`` is pressed; ``n`` cancels.

The confirmation state is a single slot owned by one ``ConfirmationEngine``:
while it is pending every listener of that engine only reacts to ``y`` and
``n``, so a second action's key cannot start another confirmation.

Usage:
    engine = ConfirmationEngine(actions, on_action_performed=handle)
    engine.mount(stream, stream.set_raw_mode)
    ...
    engine.unmount(stream)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import structlog
from rich.text import Text

from cluster_dashboard.tui.base import BaseWidget
from cluster_dashboard.tui.input import KEYPRESS_EVENT, KeypressStream
from cluster_dashboard.tui.keys import CANCEL_KEY, CONFIRM_KEY, ActionDescriptor, KeyEvent
from cluster_dashboard.tui.theme import Colors

logger = structlog.get_logger()

CONFIRMATION_PROMPT = "Are you sure [Y/N]:"

KeypressListener = Callable[[Any, KeyEvent], None]
ActionCallback = Callable[[KeyEvent], None]


@dataclass(frozen=True)
class PendingConfirmation:
    """Confirmation requested for the action triggered by ``key``."""

    key: KeyEvent


ConfirmationState = PendingConfirmation | None


@dataclass(frozen=True)
class Transition:
    """Result of feeding one key event to one action listener."""

    state: ConfirmationState
    fired: KeyEvent | None = None


def build_available_actions_label(actions: Sequence[ActionDescriptor]) -> str:
    """Format actions as ``"[D]: Delete [C]: Copy "`` (trailing space included)."""
    return "".join(f"[{action.key.upper()}]: {action.label} " for action in actions)


def transition(
    state: ConfirmationState,
    action: ActionDescriptor,
    key_event: KeyEvent,
) -> Transition:
    """Compute the next confirmation state for one action's listener.

    While a confirmation is pending only ``y`` (fire the pending key) and
    ``n`` (cancel) do anything; ``action`` is not consulted. Otherwise the
    event must match ``action.key``: confirmation-required actions become
    pending, the rest fire immediately.
    """
    if state is not None:
        if key_event.matches(CONFIRM_KEY):
            return Transition(state=None, fired=state.key)
        if key_event.matches(CANCEL_KEY):
            return Transition(state=None)
        return Transition(state=state)

    if not key_event.matches(action.key):
        return Transition(state=None)
    if action.requires_confirmation:
        return Transition(state=PendingConfirmation(key=key_event))
    return Transition(state=None, fired=key_event)


def render_action_bar(actions: Sequence[ActionDescriptor], state: ConfirmationState) -> str:
    """Text shown by the bar for ``actions`` in ``state``."""
    if not actions:
        return ""
    if state is not None:
        return CONFIRMATION_PROMPT
    return build_available_actions_label(actions)


class ConfirmationEngine:
    """Owns the confirmation state and keypress listeners of one action bar.

    The action set is fixed for the lifetime of the engine; to change
    actions, unmount and build a new engine.

    Args:
        actions: Actions to bind, in display order.
        on_action_performed: Called with the triggering key event when an
            action fires (after ``y`` for confirmed actions).
        on_state_change: Called after the confirmation state changes.
    """

    def __init__(
        self,
        actions: Sequence[ActionDescriptor],
        on_action_performed: ActionCallback,
        on_state_change: Callable[[], None] | None = None,
    ) -> None:
        self.actions: tuple[ActionDescriptor, ...] = tuple(actions)
        self.confirmation: ConfirmationState = None
        self.keypress_listeners: list[KeypressListener] = []
        self._on_action_performed = on_action_performed
        self._on_state_change = on_state_change

    @property
    def waiting_for_confirmation(self) -> bool:
        return self.confirmation is not None

    @property
    def text(self) -> str:
        return render_action_bar(self.actions, self.confirmation)

    def create_listener(self, action: ActionDescriptor) -> KeypressListener:
        """Build the keypress listener for ``action``."""

        def listener(raw: Any, key_event: KeyEvent) -> None:
            if not isinstance(key_event, KeyEvent):
                return
            previous = self.confirmation
            result = transition(previous, action, key_event)
            self.confirmation = result.state
            try:
                if result.fired is not None:
                    logger.debug("action_fired", key=result.fired.name, label=action.label)
                    self._on_action_performed(result.fired)
            finally:
                if result.state != previous and self._on_state_change is not None:
                    self._on_state_change()

        return listener

    def mount(self, stream: KeypressStream, set_raw_mode: Callable[[bool], None]) -> None:
        """Register one listener per action on the ``keypress`` channel."""
        assert not self.keypress_listeners, "engine is already mounted"
        set_raw_mode(True)
        for action in self.actions:
            listener = self.create_listener(action)
            stream.on(KEYPRESS_EVENT, listener)
            self.keypress_listeners.append(listener)
        logger.debug("listeners_registered", count=len(self.keypress_listeners))

    def unmount(self, stream: KeypressStream) -> None:
        """Remove every listener registered by ``mount``. No-op if not mounted."""
        if not self.keypress_listeners:
            return
        assert len(self.keypress_listeners) == len(self.actions), (
            "listener count does not match action count"
        )
        for listener in self.keypress_listeners:
            stream.remove_listener(KEYPRESS_EVENT, listener)
        logger.debug("listeners_removed", count=len(self.keypress_listeners))
        self.keypress_listeners = []
        self.confirmation = None


class ActionBar(BaseWidget):
    """Widget showing the available actions or the confirmation prompt."""

    DEFAULT_CSS = f"""
    ActionBar {{
        height: auto;
        padding: 1 0;
        color: {Colors.WARNING};
    }}
    """

    def __init__(
        self,
        actions: Sequence[ActionDescriptor],
        on_action_performed: ActionCallback,
        stream: KeypressStream,
        set_raw_mode: Callable[[bool], None],
        **kwargs: Any,
    ) -> None:
        """Initialize the action bar.

        Args:
            actions: Actions to offer.
            on_action_performed: Called with the key event of a fired action.
            stream: Keypress stream to listen on while mounted.
            set_raw_mode: Raw-mode setter, called with True on mount.
            **kwargs: Additional widget arguments.
        """
        super().__init__(**kwargs)
        self._stream = stream
        self._set_raw_mode = set_raw_mode
        self.engine = ConfirmationEngine(
            actions,
            on_action_performed=on_action_performed,
            on_state_change=self.refresh,
        )
        self.display = bool(self.engine.actions)

    def on_mount(self) -> None:
        self.engine.mount(self._stream, self._set_raw_mode)

    def on_unmount(self) -> None:
        self.engine.unmount(self._stream)

    def render(self) -> Text:
        return Text(self.engine.text)
