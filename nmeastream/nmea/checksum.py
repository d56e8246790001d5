"""NMEA checksum arithmetic.

The checksum of a sentence is the XOR of every byte between '$' and '*',
written after the '*' as two uppercase hex digits:

    $GPGGA,1,2,3*4A
     ^^^^^^^^^^^    XOR -> 0x4A

The same primitive checks incoming sentences (``parse_sentence``) and
stamps outgoing ones (``nmeastream.nmea.commands``). A yes/no check of a
whole line is ``nmeastream.nmea.sentence.validate_checksum``.
"""


def calculate_checksum(content: str | bytes) -> int:
    """XOR of the bytes of ``content`` (0-255).

    ``str`` input is taken one byte per character (latin-1), matching how
    the framer decodes received bytes.
    """
    if isinstance(content, str):
        content = content.encode("latin-1", errors="replace")

    result = 0
    for byte in content:
        result ^= byte
    return result


def format_checksum(value: int) -> str:
    """Render a checksum as the two uppercase hex digits used on the wire.

    Example:
        >>> format_checksum(0x0C)
        '0C'
    """
    return f"{value & 0xFF:02X}"
