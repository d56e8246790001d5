"""NMEA sentence parser.

Turns one line of text into an ``NMEASentence``. The parser never raises for
text that merely is not a sentence (empty lines, missing '$', bad names);
it returns a record with ``valid() == False``. Error-grade problems inside an
otherwise recognisable sentence (a checksum marker without digits, a checksum
that is not hex, a field with characters NMEA does not allow) raise
``NMEAParseError`` carrying the partially parsed record.

Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\\r\\n
     |     |                                                       | |
     |     +-- parameters (comma separated, may be empty)          | +-- terminator
     +-- name (talker "GP" + sentence type "GGA")                  +-- checksum (hex)

Recovery rules:
    - The text after the LAST '$' is taken as the sentence, so fragments of an
      earlier line or repeated start markers leaking into the buffer are
      dropped.
    - The LAST '*' marks the checksum.
    - Tabs and spaces are removed everywhere; NMEA fields never contain them.
"""

import string

from nmeastream.nmea.checksum import calculate_checksum
from nmeastream.nmea.diagnostics import Diagnostics
from nmeastream.nmea.errors import NMEAParseError, NumberConversionError
from nmeastream.nmea.fields import parse_int_field
from nmeastream.nmea.types import NMEASentence

__all__ = ["parse_sentence", "validate_checksum"]

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_PARAMETER_CHARACTERS = _ALPHANUMERIC | {"-", "."}
_WHITESPACE = ("\t", " ")


def _is_alphanumeric(text: str) -> bool:
    return all(character in _ALPHANUMERIC for character in text)


def _has_valid_parameter_characters(text: str) -> bool:
    return all(character in _PARAMETER_CHARACTERS for character in text)


def _strip_terminator(line: str, diagnostics: Diagnostics) -> str:
    """Remove a trailing "\\r\\n", or a bare "\\n" with a warning."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        diagnostics.warning("Malformed newline, missing carriage return (\\r) ")
        return line[:-1]
    return line


def _remove_whitespace(line: str, diagnostics: Diagnostics) -> str:
    squished = line
    for character in _WHITESPACE:
        squished = squished.replace(character, "")

    removed = len(line) - len(squished)
    if removed:
        diagnostics.warning(f"New NMEA string was full of {removed} whitespaces!")
    return squished


def _split_checksum(nmea: NMEASentence, diagnostics: Diagnostics) -> None:
    """Move a "*HH" suffix from the last parameter into the checksum fields."""
    last = nmea.parameters[-1]
    star = last.rfind("*")
    if star == -1:
        return

    nmea.parameters[-1] = last[:star]
    if star == len(last) - 1:
        diagnostics.error(nmea, "Checksum '*' character at end, but no data.")

    nmea.checksum = last[star + 1 :]
    diagnostics.info(f'Found checksum. ("*{nmea.checksum}")')

    try:
        nmea.parsed_checksum = parse_int_field(nmea.checksum, 16) & 0xFF
    except NumberConversionError:
        diagnostics.error(
            nmea,
            "Parsed checksum string was not readable as hex. "
            f'("{nmea.checksum}")',
        )
    nmea.checksum_is_calculated = True

    diagnostics.info(f"Checksum ok? {'YES' if nmea.checksum_ok() else 'NO'}!")


def _parse_text(nmea: NMEASentence, text: str, diagnostics: Diagnostics) -> None:
    """Fill ``nmea`` from cleaned sentence text, leaving it invalid on failure."""
    nmea.is_valid = False
    if not text:
        return

    nmea.text = text

    dollar = text.rfind("$")
    if dollar == -1:
        return
    text = text[dollar + 1 :]

    star = text.rfind("*")
    has_checksum = star != -1
    if has_checksum:
        nmea.calculated_checksum = calculate_checksum(text[:star])
    else:
        # Some talkers are configured to omit checksums.
        diagnostics.warning("No checksum information provided. Could not find '*'.")

    comma = text.find(",")
    if comma == -1:
        # "$NAME" with no parameters, or a bare "$"
        if not text or not _is_alphanumeric(text):
            return
        nmea.name = text
        nmea.is_valid = True
        return

    if comma == 0:
        return

    nmea.name = text[:comma]
    if not _is_alphanumeric(nmea.name):
        return

    if comma + 1 == len(text):
        nmea.parameters.append("")
        nmea.is_valid = True
        return

    text = text[comma + 1 :]
    nmea.parameters = text.split(",")
    diagnostics.info(f"Found {len(nmea.parameters)} parameters.")

    if text.endswith(","):
        # A trailing empty field is only legitimate without a checksum.
        if has_checksum:
            return
    else:
        _split_checksum(nmea, diagnostics)

    for index, parameter in enumerate(nmea.parameters):
        if not _has_valid_parameter_characters(parameter):
            diagnostics.error(
                nmea,
                f"Invalid character (non-alpha-num) in parameter {index} "
                f'(from 0): "{parameter}"',
            )

    nmea.is_valid = True


def parse_sentence(line: str, diagnostics: Diagnostics | None = None) -> NMEASentence:
    """Parse one line of text into an ``NMEASentence``.

    Args:
        line: Sentence text, optionally terminated by "\\r\\n".
        diagnostics: Channel for info/warning messages. Defaults to a silent
            one.

    Returns:
        The parsed sentence. Check ``valid()`` for structural validity and
        ``checksum_ok()`` for checksum agreement.

    Raises:
        NMEAParseError: For a '*' without checksum digits, a checksum that is
            not hexadecimal, or a parameter containing characters other than
            letters, digits, '.' and '-'.

    Example:
        >>> nmea = parse_sentence("$GPGGA,1,2,3*FF\\r\\n")
        >>> nmea.valid(), nmea.checksum_ok(), nmea.parameters
        (True, False, ['1', '2', '3'])
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    nmea = NMEASentence()
    if not line:
        return nmea

    text = _strip_terminator(line, diagnostics)
    text = _remove_whitespace(text, diagnostics)
    diagnostics.info(f'NMEA string: ("{text}")')

    try:
        _parse_text(nmea, text, diagnostics)
    except NMEAParseError:
        raise
    except (IndexError, ValueError) as e:
        raise RuntimeError(
            " >> NMEA Parser Internal Error: Indexing error?... " + str(e)
        ) from e

    return nmea


def validate_checksum(sentence: str) -> bool:
    """Yes/no check that ``sentence`` carries a matching checksum.

    Applies the same recovery rules as ``parse_sentence``; anything it would
    reject or raise for counts as a failed check.

    Example:
        >>> validate_checksum("xx$GPGGA,1,2,3*4A\\r\\n")
        True
    """
    try:
        return parse_sentence(sentence).checksum_ok()
    except NMEAParseError:
        return False
