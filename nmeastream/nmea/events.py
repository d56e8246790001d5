"""Minimal observer list.

An ``Event`` keeps an ordered list of handlers, each wrapped in an
``EventHandler`` with a process-unique id. Subscribers keep the returned
handler (or just its id) to unsubscribe later::

    on_update = Event()
    token = on_update.register_handler(lambda: print("updated"))
    on_update()               # prints "updated"
    on_update -= token.id     # unsubscribe

``+=`` and ``-=`` are shorthands for ``register_handler`` / ``remove_handler``
when the caller does not need the token.
"""

import itertools
from collections.abc import Callable
from typing import Any

__all__ = ["Event", "EventHandler"]

_handler_ids = itertools.count(1)


class EventHandler:
    """A registered callback plus the id used to unsubscribe it."""

    def __init__(self, handler: Callable[..., Any]) -> None:
        self.id: int = next(_handler_ids)
        self.handler = handler

    def __call__(self, *args: Any) -> None:
        self.handler(*args)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventHandler):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"EventHandler(id={self.id}, handler={self.handler!r})"


class Event:
    """Ordered collection of handlers invoked in registration order.

    Attributes:
        enabled: When False, calling the event does nothing.
    """

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []
        self.enabled = True

    def __len__(self) -> int:
        return len(self._handlers)

    def call(self, *args: Any) -> None:
        """Invoke every handler with ``args``; exceptions propagate."""
        if not self.enabled:
            return
        for handler in list(self._handlers):
            handler(*args)

    __call__ = call

    def register_handler(
        self, handler: "Callable[..., Any] | EventHandler"
    ) -> EventHandler:
        """Append a handler and return its token.

        Registering an ``EventHandler`` that is already present is a no-op
        returning the same token.
        """
        if isinstance(handler, EventHandler):
            if handler not in self._handlers:
                self._handlers.append(handler)
            return handler

        wrapper = EventHandler(handler)
        self._handlers.append(wrapper)
        return wrapper

    def remove_handler(self, handler: "EventHandler | int") -> bool:
        """Remove a handler by token or id; returns False if it was absent."""
        handler_id = handler.id if isinstance(handler, EventHandler) else handler
        for index, registered in enumerate(self._handlers):
            if registered.id == handler_id:
                del self._handlers[index]
                return True
        return False

    def clear(self) -> None:
        self._handlers.clear()

    def __iadd__(self, handler: "Callable[..., Any] | EventHandler") -> "Event":
        self.register_handler(handler)
        return self

    def __isub__(self, handler: "EventHandler | int") -> "Event":
        self.remove_handler(handler)
        return self
