"""Keypress stream shared by every action bar of one application.

The Textual app forwards each key event into a ``KeypressStream``; action
bars subscribe per-action listeners on the ``"keypress"`` channel while
mounted and remove exactly those listeners when unmounted.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

logger = structlog.get_logger()

KEYPRESS_EVENT = "keypress"

Handler = Callable[..., None]


class KeypressStream:
    """Minimal event emitter with a raw-mode flag."""

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)
        self.raw_mode = False

    def on(self, event_name: str, handler: Handler) -> None:
        """Register ``handler`` for ``event_name``. Duplicates are kept."""
        self._handlers[event_name].append(handler)

    def remove_listener(self, event_name: str, handler: Handler) -> None:
        """Remove one registration of ``handler`` (by identity). Unknown handlers are ignored."""
        handlers = self._handlers.get(event_name, [])
        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                return

    def emit(self, event_name: str, *args: Any) -> int:
        """Call each handler of ``event_name`` in registration order.

        Handlers added or removed during dispatch take effect on the next
        emit. A handler that raises does not stop dispatch; the first error
        is re-raised once every handler has run. Returns the number of
        handlers called.
        """
        handlers = list(self._handlers.get(event_name, []))
        first_error: Exception | None = None
        for handler in handlers:
            try:
                handler(*args)
            except Exception as e:
                logger.exception("handler_failed", event=event_name)
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error
        return len(handlers)

    def listeners(self, event_name: str) -> list[Handler]:
        return list(self._handlers.get(event_name, []))

    def listener_count(self, event_name: str) -> int:
        return len(self._handlers.get(event_name, []))

    def set_raw_mode(self, enabled: bool) -> None:
        """Record the requested raw-mode state.

        Under Textual the driver already holds the terminal in raw mode, so
        this only tracks what consumers asked for.
        """
        if enabled != self.raw_mode:
            logger.debug("raw_mode_changed", enabled=enabled)
        self.raw_mode = enabled
