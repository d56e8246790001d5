"""Tests for checksum arithmetic and the yes/no checksum check."""

from functools import reduce

import pytest

from nmeastream import calculate_checksum, parse_sentence, validate_checksum
from nmeastream.nmea import format_checksum

GGA = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_xor_of_each_character(self):
        content = "GPGGA,1,2,3"
        expected = reduce(lambda acc, ch: acc ^ ord(ch), content, 0)
        assert calculate_checksum(content) == expected

    def test_known_value(self):
        assert calculate_checksum("GPGGA,1,2,3") == 0x4A

    def test_bytes_and_str_agree(self):
        assert calculate_checksum(b"GPGGA,1,2,3") == calculate_checksum("GPGGA,1,2,3")

    def test_high_bytes_count_as_received(self):
        assert calculate_checksum("GPGGA,\xe9") == calculate_checksum(b"GPGGA,\xe9")

    def test_empty_is_zero(self):
        assert calculate_checksum("") == 0

    def test_result_fits_in_a_byte(self):
        assert 0 <= calculate_checksum(bytes(range(256))) <= 0xFF


class TestFormatChecksum:
    """Tests for format_checksum function."""

    def test_two_uppercase_digits(self):
        assert format_checksum(0x0C) == "0C"
        assert format_checksum(0xAB) == "AB"


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_matching(self):
        assert validate_checksum(GGA) is True
        assert validate_checksum(GGA + "\r\n") is True

    def test_mismatch(self):
        assert validate_checksum(GGA[:-2] + "FF") is False

    def test_no_checksum(self):
        assert validate_checksum(GGA.split("*")[0]) is False

    def test_not_a_sentence(self):
        assert validate_checksum("") is False
        assert validate_checksum(GGA[1:]) is False

    @pytest.mark.parametrize("suffix", ["*", "*ZZ"])
    def test_malformed_checksum_is_false(self, suffix):
        assert validate_checksum(GGA.split("*")[0] + suffix) is False

    @pytest.mark.parametrize(
        "line",
        [
            "xx$GPGGA,1,2,3*4A",
            "$GP$GPGGA,1,2,3*4A",
            "$GPGGA, 1,2,3*4A",
            "$GPGGA,1,2,3*FF",
            "$GPGGA,1,2,3*14A",
        ],
    )
    def test_agrees_with_parser(self, line):
        assert validate_checksum(line) is parse_sentence(line).checksum_ok()

    def test_recovers_from_leading_garbage(self):
        assert validate_checksum("xx$GPGGA,1,2,3*4A") is True
