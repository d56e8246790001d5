"""NMEA sentence record produced by the sentence parser.

Design Decisions:
    1. Separate structural and checksum verdicts: ``valid()`` says whether
       the text had the shape of an NMEA sentence (name, fields, characters).
       ``checksum_ok()`` says whether a declared checksum matched. A sentence
       may be structurally valid with a missing or failing checksum; it is up
       to consumers (for example the GPS fix decoders) to insist on one.

    2. Parameters stay strings: the core does not know per-sentence schemas,
       so numeric conversion is left to decoders (see ``nmea.fields``).
"""

from dataclasses import dataclass, field
from enum import IntEnum


class MessageID(IntEnum):
    """Standard NMEA message identifiers (SiRF Table 2-10 numbering)."""

    UNKNOWN = -1
    GGA = 0
    GLL = 1
    GSA = 2
    GSV = 3
    RMC = 4
    VTG = 5  # 6 and 7 are not sentence types
    ZDA = 8


@dataclass
class NMEASentence:
    """One parsed NMEA sentence.

    Attributes:
        text: Received text of the sentence, after line terminator and
            whitespace removal. Used to echo the input in diagnostics.

        name: Talker + sentence identifier (e.g. "GPGGA"). Empty only in
            invalid records.

        parameters: Field strings in sentence order. Empty fields are kept
            as empty strings. The checksum suffix is not part of the last
            field.

        checksum: Raw text found after '*', or "" when none was found.

        checksum_is_calculated: True when a checksum was declared and parsed
            as hexadecimal.

        parsed_checksum: Declared checksum value (0-255).

        calculated_checksum: Checksum computed over the received content.

        is_valid: Structural validity verdict.

    Example:
        >>> nmea = parse_sentence("$MYNMEA,1,3,3,7,Hello*A2\\r\\n")
        >>> nmea.name, nmea.parameters
        ('MYNMEA', ['1', '3', '3', '7', 'Hello'])
    """

    text: str = ""
    name: str = ""
    parameters: list[str] = field(default_factory=list)
    checksum: str = ""
    checksum_is_calculated: bool = False
    parsed_checksum: int = 0
    calculated_checksum: int = 0
    is_valid: bool = False

    def valid(self) -> bool:
        """Return the structural validity verdict."""
        return self.is_valid

    def checksum_ok(self) -> bool:
        """Return True iff a checksum was declared, parsed and matched."""
        return self.checksum_is_calculated and (
            self.parsed_checksum == self.calculated_checksum
        )

    def message_id(self) -> MessageID:
        """Map the sentence type (the name minus its talker prefix) to an id."""
        if len(self.name) < 5:
            return MessageID.UNKNOWN
        return MessageID.__members__.get(self.name[2:], MessageID.UNKNOWN)
