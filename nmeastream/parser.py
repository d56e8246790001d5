"""NMEAParser: byte stream in, dispatched sentences out.

Ties together the framer, the sentence parser and the handler registry::

    raw bytes -> SentenceFramer -> parse_sentence -> HandlerRegistry -> handlers

Usage::

    parser = NMEAParser()
    parser.set_sentence_handler("GPGGA", handle_gga)
    parser.on_sentence += lambda nmea: print(nmea.name)

    for chunk in device:
        try:
            parser.read_buffer(chunk)
        except NMEAParseError as e:
            print(e.message)  # parser is already reset; keep feeding

Everything runs synchronously in the caller's thread: by the time a
``read_*`` call returns, every complete sentence in the input has been
parsed and all of its handlers have run. Instances share no state, so
independent streams use independent parsers.
"""

import logging
from collections.abc import Iterable

from nmeastream.nmea.checksum import calculate_checksum
from nmeastream.nmea.diagnostics import Diagnostics
from nmeastream.nmea.events import Event
from nmeastream.nmea.framer import DEFAULT_MAX_BUFFER_SIZE, SentenceFramer
from nmeastream.nmea.registry import HandlerRegistry, SentenceHandler
from nmeastream.nmea.sentence import parse_sentence

__all__ = ["NMEAParser"]

logger = logging.getLogger(__name__)


class NMEAParser:
    """Frame, parse and dispatch NMEA sentences from a pushed byte stream.

    Args:
        max_buffer_size: Longest unterminated frame kept before it is
            silently discarded (default: 2000 bytes).
        log: Emit info/warning diagnostics to the ``nmeastream.parser``
            logger. Errors are raised either way.
    """

    def __init__(
        self,
        max_buffer_size: int = DEFAULT_MAX_BUFFER_SIZE,
        log: bool = False,
    ) -> None:
        self._diagnostics = Diagnostics(enabled=log, logger=logger)
        self._registry = HandlerRegistry(self._diagnostics)
        self._framer = SentenceFramer(self.read_sentence, max_buffer_size)

    @property
    def log(self) -> bool:
        return self._diagnostics.enabled

    @log.setter
    def log(self, enabled: bool) -> None:
        self._diagnostics.enabled = enabled

    @property
    def max_buffer_size(self) -> int:
        return self._framer.max_buffer_size

    @property
    def on_sentence(self) -> Event:
        """Wildcard event called with every valid sentence."""
        return self._registry.on_sentence

    @on_sentence.setter
    def on_sentence(self, event: Event) -> None:
        # Lets ``parser.on_sentence += handler`` rebind the same Event.
        self._registry.on_sentence = event

    # --- registration ---------------------------------------------------------

    def set_sentence_handler(self, name: str, handler: SentenceHandler) -> None:
        """Register the single handler for sentences named ``name``."""
        self._registry.set_sentence_handler(name, handler)

    def remove_sentence_handler(self, name: str) -> None:
        self._registry.remove_sentence_handler(name)

    def registered_sentence_handlers_csv(self) -> str:
        """Names that currently have handlers, e.g. ``"GPGGA,GPRMC"``."""
        return self._registry.registered_sentence_handlers_csv()

    # --- byte streaming -------------------------------------------------------

    def read_byte(self, byte: int) -> None:
        """Feed one byte (0-255)."""
        self._framer.read_byte(byte)

    def read_buffer(self, data: Iterable[int], size: int | None = None) -> None:
        """Feed a buffer of bytes, optionally only its first ``size`` bytes."""
        self._framer.read_buffer(data, size)

    def read_line(self, line: str) -> None:
        """Feed a line of text; a "\\r\\n" terminator is appended."""
        self._framer.read_line(line)

    def read_sentence(self, text: str) -> None:
        """Parse and dispatch one sentence, bypassing the framer.

        Raises:
            NMEAParseError: If the sentence is invalid or malformed.
        """
        self._diagnostics.info("Processing NEW string...")

        if not text:
            self._diagnostics.warning("Blank string -- Skipped processing.")
            return

        nmea = parse_sentence(text, self._diagnostics)
        self._registry.dispatch(nmea)

    @staticmethod
    def calculate_checksum(text: str | bytes) -> int:
        """XOR checksum of ``text`` (the part between '$' and '*')."""
        return calculate_checksum(text)
