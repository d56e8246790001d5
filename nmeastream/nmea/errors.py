"""Exceptions raised while parsing and decoding NMEA data."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nmeastream.nmea.types import NMEASentence

__all__ = ["NMEAParseError", "NumberConversionError"]


class NMEAParseError(Exception):
    """Error-grade parse failure.

    Carries the diagnostic message and, where one had been built, the
    (partially filled) sentence that caused it.

    Attributes:
        message: Human readable description of the failure.
        sentence: The sentence being parsed or decoded, or ``None``.
    """

    def __init__(self, message: str, sentence: "NMEASentence | None" = None) -> None:
        super().__init__(message)
        self.message = message
        self.sentence = sentence


class NumberConversionError(ValueError):
    """A numeric NMEA field could not be converted."""
