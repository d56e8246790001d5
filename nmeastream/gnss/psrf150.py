"""PSRF150 sentence decoder.

SiRF receivers send ``$PSRF150,1*3E`` when they are ready to accept input
and ``$PSRF150,0*3F`` when they are not.
"""

from nmeastream.gnss.checks import require_checksum, require_parameters
from nmeastream.gnss.types import GPSFix
from nmeastream.nmea.fields import parse_int_field
from nmeastream.nmea.types import NMEASentence


def decode_psrf150(fix: GPSFix, nmea: NMEASentence) -> bool:
    """Record the receiver's OK-to-send flag. Never changes the lock state."""
    require_checksum(nmea)
    require_parameters(nmea, 1)

    fix.ok_to_send = parse_int_field(nmea.parameters[0]) == 1
    return False
