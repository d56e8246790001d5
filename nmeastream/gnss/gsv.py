"""GSV sentence decoder.

GSV (satellites in view) is sent as a cycle of pages, each carrying up to
four satellites.

GSV Sentence Format (parameter indices, name excluded):
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |  +-- next satellite...
           0 1 2  3  4  5   6
           | | |  +--+--+---+-- satellite: PRN, elevation, azimuth, SNR
           | | +-- satellites in view
           | +-- page number (1-based)
           +-- total pages

Page 1 starts a new cycle and clears the almanac.
"""

from nmeastream.gnss.checks import require_checksum, require_parameters
from nmeastream.gnss.types import GPSFix, GPSSatellite
from nmeastream.nmea.fields import parse_float_field, parse_int_field
from nmeastream.nmea.types import NMEASentence

_HEADER_PARAMETER_COUNT = 3
_SATELLITE_PARAMETER_COUNT = 4


def _read_satellite(fields: list[str]) -> GPSSatellite:
    satellite = GPSSatellite()
    prn, elevation, azimuth, snr = fields
    if prn:
        satellite.prn = parse_int_field(prn)
    if elevation:
        satellite.elevation = parse_float_field(elevation)
    if azimuth:
        satellite.azimuth = parse_float_field(azimuth)
    if snr:
        satellite.snr = parse_float_field(snr)
    return satellite


def decode_gsv(fix: GPSFix, nmea: NMEASentence) -> bool:
    """Add one page of satellites to the almanac.

    The page length varies with the number of satellites, so only the three
    header parameters are required. GSV never changes the lock state.

    Returns:
        Always False.
    """
    require_checksum(nmea)
    require_parameters(nmea, _HEADER_PARAMETER_COUNT)

    parameters = nmea.parameters
    fix.visible_satellites = parse_int_field(parameters[2])
    if fix.tracking_satellites == 0:
        fix.visible_satellites = 0

    almanac = fix.almanac
    total_pages = parse_int_field(parameters[0])
    current_page = parse_int_field(parameters[1])
    if current_page == 1:
        almanac.clear()

    almanac.last_page = current_page
    almanac.total_pages = total_pages
    almanac.visible_size = fix.visible_satellites

    entries = (len(parameters) - _HEADER_PARAMETER_COUNT) // _SATELLITE_PARAMETER_COUNT
    for entry in range(entries):
        start = _HEADER_PARAMETER_COUNT + entry * _SATELLITE_PARAMETER_COUNT
        almanac.update_satellite(
            _read_satellite(parameters[start : start + _SATELLITE_PARAMETER_COUNT])
        )

    almanac.processed_pages += 1

    if fix.visible_satellites == 0:
        almanac.clear()

    return False
