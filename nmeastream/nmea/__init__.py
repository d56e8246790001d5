"""NMEA 0183 framing, sentence parsing, checksums and dispatch."""

from nmeastream.nmea.checksum import calculate_checksum, format_checksum
from nmeastream.nmea.commands import (
    NMEACommand,
    QueryRateCommand,
    QueryRateMode,
    SerialConfigurationCommand,
    add_checksum,
)
from nmeastream.nmea.errors import NMEAParseError, NumberConversionError
from nmeastream.nmea.events import Event, EventHandler
from nmeastream.nmea.framer import DEFAULT_MAX_BUFFER_SIZE, SentenceFramer
from nmeastream.nmea.registry import HandlerRegistry
from nmeastream.nmea.sentence import parse_sentence, validate_checksum
from nmeastream.nmea.types import MessageID, NMEASentence

__all__ = [
    "DEFAULT_MAX_BUFFER_SIZE",
    "Event",
    "EventHandler",
    "HandlerRegistry",
    "MessageID",
    "NMEACommand",
    "NMEAParseError",
    "NMEASentence",
    "NumberConversionError",
    "QueryRateCommand",
    "QueryRateMode",
    "SentenceFramer",
    "SerialConfigurationCommand",
    "add_checksum",
    "calculate_checksum",
    "format_checksum",
    "parse_sentence",
    "validate_checksum",
]
