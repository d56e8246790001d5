"""GSA sentence decoder.

GSA (DOP and active satellites) reports the fix dimension and the dilution
of precision values.

GSA Sentence Format (parameter indices, name excluded):
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                     | |   |   |
           0 1 2 ...              13 14 15 16
           | | +-- PRNs of satellites used (12 slots)
           | +-- fix type: 1 = none, 2 = 2D, 3 = 3D
           +-- selection mode: M = manual, A = automatic
    14 = PDOP, 15 = HDOP, 16 = VDOP

Fix type 1 drops the lock and 3 takes it.
"""

from nmeastream.gnss.checks import require_checksum, require_parameters
from nmeastream.gnss.types import GPSFix
from nmeastream.nmea.fields import parse_float_field, parse_int_field
from nmeastream.nmea.types import NMEASentence

_MINIMUM_PARAMETER_COUNT = 17


def decode_gsa(fix: GPSFix, nmea: NMEASentence) -> bool:
    """Update fix type and dilution of precision; True if lock changed."""
    require_checksum(nmea)
    require_parameters(nmea, _MINIMUM_PARAMETER_COUNT)

    parameters = nmea.parameters
    lock_changed = False
    fix.type = parse_int_field(parameters[1])
    if fix.type == 1:
        lock_changed = fix.set_lock(False)
    elif fix.type == 3:
        lock_changed = fix.set_lock(True)

    fix.dilution = parse_float_field(parameters[14])
    fix.horizontal_dilution = parse_float_field(parameters[15])
    fix.vertical_dilution = parse_float_field(parameters[16])

    return lock_changed
