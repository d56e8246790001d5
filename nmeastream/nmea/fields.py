"""NMEA field conversion utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). The fix decoders treat an empty numeric field as zero, which
is what GPS receivers mean by an unset value, while text that is present but
not a number is a conversion error that the caller reports.
"""

import math

from nmeastream.nmea.errors import NumberConversionError

_KNOTS_TO_KILOMETERS_PER_HOUR = 1.852


def parse_float_field(value: str) -> float:
    """Parse a string field to float, returning 0.0 if empty.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or 0.0 if the field is empty

    Raises:
        NumberConversionError: If the field holds text that is not a number.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")
        0.0
    """
    if not value:
        return 0.0
    if "_" in value or value != value.strip():
        raise NumberConversionError(
            f'parse_float_field() error in argument "{value}", not a number.'
        )
    try:
        return float(value)
    except ValueError as e:
        raise NumberConversionError(
            f'parse_float_field() error in argument "{value}", not a number.'
        ) from e


def parse_int_field(value: str, base: int = 10) -> int:
    """Parse a string field to int, returning 0 if empty.

    Similar to parse_float_field but for integer values like satellite counts,
    fix quality indicators, or (with ``base=16``) checksums.

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("A2", 16)
        162
    """
    if not value:
        return 0
    if "_" in value or value != value.strip():
        raise NumberConversionError(
            f'parse_int_field() error in argument "{value}", not a number.'
        )
    try:
        return int(value, base)
    except ValueError as e:
        raise NumberConversionError(
            f'parse_int_field() error in argument "{value}", not a number.'
        ) from e


def convert_to_decimal_degrees(value: str, direction: str) -> float:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA uses degrees-minutes format with a hemisphere indicator.
    This function converts to decimal degrees with sign convention:
    - North/East = positive
    - South/West = negative

    The hundreds and above of the number are whole degrees, the rest are
    minutes:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        direction: Hemisphere indicator ("N", "S", "E", or "W"). Only the
            first character is looked at.

    Returns:
        Decimal degrees (positive for N/E, negative for S/W)

    Raises:
        NumberConversionError: If ``value`` is not a number.

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    number = parse_float_field(value)
    degrees = math.trunc(number / 100)
    minutes = number - degrees * 100
    decimal_degrees = degrees + minutes / 60.0

    if direction[:1] in ("S", "W"):
        return -decimal_degrees

    return decimal_degrees


def convert_knots_to_kilometers_per_hour(knots: float) -> float:
    """Convert a ground speed in knots to km/h."""
    return knots * _KNOTS_TO_KILOMETERS_PER_HOUR
