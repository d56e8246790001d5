"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information.

VTG Sentence Format (parameter indices, name excluded):
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48
           |     | |     | |     | |     |
           0     1 2     3 4     5 6     7
           |       |       |       +-- speed, km/h
           |       |       +-- speed, knots
           |       +-- track, degrees magnetic
           +-- track, degrees true
"""

from nmeastream.gnss.checks import require_checksum, require_parameters
from nmeastream.gnss.types import GPSFix
from nmeastream.nmea.fields import parse_float_field
from nmeastream.nmea.types import NMEASentence

_MINIMUM_PARAMETER_COUNT = 8


def decode_vtg(fix: GPSFix, nmea: NMEASentence) -> bool:
    """Update ground speed (km/h). VTG never changes the lock state."""
    require_checksum(nmea)
    require_parameters(nmea, _MINIMUM_PARAMETER_COUNT)

    # An empty speed field converts to 0.
    fix.speed = parse_float_field(nmea.parameters[6])
    return False
