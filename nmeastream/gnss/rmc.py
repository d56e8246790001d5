"""RMC sentence decoder.

RMC (Recommended Minimum data) carries time, date, position, speed and
track, plus the receiver's own active/void verdict.

RMC Sentence Format (parameter indices, name excluded):
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           0      1 2        3 4         5 6     7     8      9     10
           |      | |        | |         | |     |     |      +-----+-- magnetic variation
           |      | |        | |         | |     |     +-- date (ddmmyy)
           |      | |        | |         | |     +-- track angle, degrees true
           |      | |        | |         | +-- speed over ground, knots
           |      | +--------+-+---------+-- latitude N/S, longitude E/W
           |      +-- status: A = active, V = void
           +-- UTC time (hhmmss.ss)

Status 'A' takes the lock; anything else drops it.
"""

from nmeastream.gnss.checks import require_checksum, require_parameters
from nmeastream.gnss.types import GPSFix
from nmeastream.nmea.fields import (
    convert_knots_to_kilometers_per_hour,
    convert_to_decimal_degrees,
    parse_float_field,
    parse_int_field,
)
from nmeastream.nmea.types import NMEASentence

_MINIMUM_PARAMETER_COUNT = 11


def decode_rmc(fix: GPSFix, nmea: NMEASentence) -> bool:
    """Update time, position, speed and status; True if lock changed."""
    require_checksum(nmea)
    require_parameters(nmea, _MINIMUM_PARAMETER_COUNT)

    parameters = nmea.parameters
    fix.timestamp.set_time(parse_float_field(parameters[0]))

    if parameters[2]:
        fix.latitude = convert_to_decimal_degrees(parameters[2], parameters[3])
    if parameters[4]:
        fix.longitude = convert_to_decimal_degrees(parameters[4], parameters[5])

    fix.status = parameters[1][:1] or "V"
    lock_changed = fix.set_lock(fix.status == "A")

    fix.speed = convert_knots_to_kilometers_per_hour(parse_float_field(parameters[6]))
    fix.travel_angle = parse_float_field(parameters[7])
    fix.timestamp.set_date(parse_int_field(parameters[8]))

    return lock_changed
