"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format (parameter indices, name excluded):
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | |
           0      1        2 3         4 5 6  7   8     9 10   11 12,13
           |      |        | |         | | |  |   |     +-- altitude units
           |      |        | |         | | |  |   +-- altitude above MSL
           |      |        | |         | | |  +-- HDOP
           |      |        | |         | | +-- number of satellites tracked
           |      |        | |         | +-- fix quality (0-6)
           |      |        | +---------+-- longitude + E/W
           |      +--------+-- latitude + N/S
           +-- UTC time (hhmmss.ss)

Fix quality 0 drops the lock and 1 takes it; other qualities leave the lock
state to RMC and GSA.
"""

from nmeastream.gnss.checks import require_checksum, require_parameters
from nmeastream.gnss.types import GPSFix
from nmeastream.nmea.fields import (
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
)
from nmeastream.nmea.types import NMEASentence

# GGA sentences have 14 standard parameters; the last two (DGPS age and
# station) are frequently empty.
_MINIMUM_PARAMETER_COUNT = 14


def decode_gga(fix: GPSFix, nmea: NMEASentence) -> bool:
    """Update ``fix`` from a GGA sentence.

    Returns:
        True if the lock state changed.

    Raises:
        NMEAParseError: On a bad checksum or too few parameters.
        NumberConversionError: If a numeric field is not a number.
    """
    require_checksum(nmea)
    require_parameters(nmea, _MINIMUM_PARAMETER_COUNT)

    parameters = nmea.parameters
    fix.timestamp.set_time(parse_float_field(parameters[0]))

    if parameters[1]:
        fix.latitude = convert_to_decimal_degrees(parameters[1], parameters[2])
    if parameters[3]:
        fix.longitude = convert_to_decimal_degrees(parameters[3], parameters[4])

    lock_changed = False
    fix.quality = parse_int_field(parameters[5])
    if fix.quality == 0:
        lock_changed = fix.set_lock(False)
    elif fix.quality == 1:
        lock_changed = fix.set_lock(True)

    fix.tracking_satellites = parse_int_field(parameters[6])
    if fix.visible_satellites < fix.tracking_satellites:
        fix.visible_satellites = fix.tracking_satellites

    # Empty altitude converts to 0.
    fix.altitude = parse_float_field(parameters[8])

    return lock_changed
