"""Streaming NMEA 0183 parser with GPS fix aggregation."""

from nmeastream.gnss import GPSFix, GPSService
from nmeastream.nmea import (
    MessageID,
    NMEAParseError,
    NMEASentence,
    add_checksum,
    calculate_checksum,
    parse_sentence,
    validate_checksum,
)
from nmeastream.parser import NMEAParser

__all__ = [
    "GPSFix",
    "GPSService",
    "MessageID",
    "NMEAParseError",
    "NMEAParser",
    "NMEASentence",
    "add_checksum",
    "calculate_checksum",
    "parse_sentence",
    "validate_checksum",
]
