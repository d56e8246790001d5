"""Dispatch of parsed sentences to subscribers.

Two kinds of subscribers:

* wildcard handlers (``on_sentence``) run for every valid sentence, in
  registration order;
* at most one named handler per sentence name (case-sensitive), run after
  the wildcard handlers. Registering a second handler under the same name
  replaces the first.

Invalid sentences never reach a handler; they raise ``NMEAParseError``
instead. Exceptions raised by handlers are not caught here.
"""

from collections.abc import Callable

from nmeastream.nmea.diagnostics import Diagnostics
from nmeastream.nmea.events import Event
from nmeastream.nmea.types import NMEASentence

__all__ = ["HandlerRegistry", "SentenceHandler"]

SentenceHandler = Callable[[NMEASentence], None]

# Longest slice of an invalid sentence echoed in the error message
_ECHO_WIDTH = 35


def _echo(text: str) -> str:
    if len(text) > _ECHO_WIDTH:
        return f'Invalid text. ("{text[:_ECHO_WIDTH]}...")'
    return f'Invalid text. ("{text}")'


class HandlerRegistry:
    """Name-keyed sentence handlers plus a wildcard ``Event``.

    Args:
        diagnostics: Channel for info/warning messages and raised errors.
    """

    def __init__(self, diagnostics: Diagnostics | None = None) -> None:
        self.diagnostics = diagnostics or Diagnostics()
        self.on_sentence = Event()
        self._handlers: dict[str, SentenceHandler] = {}

    def set_sentence_handler(self, name: str, handler: SentenceHandler) -> None:
        """Register ``handler`` for sentences named ``name``, replacing any other."""
        self._handlers[name] = handler

    def remove_sentence_handler(self, name: str) -> None:
        self._handlers.pop(name, None)

    def sentence_handler(self, name: str) -> SentenceHandler | None:
        return self._handlers.get(name)

    def registered_sentence_handlers_csv(self) -> str:
        """Registered sentence names, sorted and comma separated ("" if none)."""
        return ",".join(
            name if callable(handler) else f"{name}(not callable)"
            for name, handler in sorted(self._handlers.items())
        )

    def dispatch(self, nmea: NMEASentence) -> None:
        """Deliver a parsed sentence to its subscribers.

        Raises:
            NMEAParseError: If ``nmea`` is not structurally valid. No handler
                is called in that case.
        """
        if not nmea.valid():
            self.diagnostics.error(nmea, _echo(nmea.text))

        # Wildcard handlers also see sentences whose checksum failed.
        self.diagnostics.info("Calling wildcard sentence handlers.")
        self.on_sentence(nmea)

        handler = self._handlers.get(nmea.name)
        if handler is None:
            self.diagnostics.warning(
                f'Null event handler for type (name: "{nmea.name}")'
            )
            return

        self.diagnostics.info(
            f'Calling specific handler for sentence named "{nmea.name}"'
        )
        handler(nmea)
