"""Preconditions shared by the GPS sentence decoders."""

from nmeastream.nmea.errors import NMEAParseError
from nmeastream.nmea.types import NMEASentence


def require_checksum(nmea: NMEASentence) -> None:
    """Reject sentences whose checksum is missing or wrong.

    Raises:
        NMEAParseError: If ``nmea.checksum_ok()`` is False.
    """
    if not nmea.checksum_ok():
        raise NMEAParseError("Checksum is invalid!", nmea)


def require_parameters(nmea: NMEASentence, count: int) -> None:
    """Reject sentences with fewer than ``count`` parameters.

    Raises:
        NMEAParseError: If the sentence is too short.
    """
    if len(nmea.parameters) < count:
        raise NMEAParseError("GPS data is missing parameters.", nmea)
