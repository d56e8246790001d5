"""Tests for the NMEAParser ingestion pipeline."""

import logging
from unittest.mock import MagicMock

import pytest

from nmeastream import NMEAParseError, NMEAParser, add_checksum

STREAM = (
    "garbage before the first sentence"
    "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n"
    "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48\r\n"
    "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A\r\n"
    "$MYNMEA,1,3,3,7,Hello*A2\r\n"
)


def _recording_parser() -> tuple[NMEAParser, list]:
    parser = NMEAParser()
    received = []
    parser.on_sentence += lambda nmea: received.append(
        (nmea.name, tuple(nmea.parameters), nmea.checksum_ok())
    )
    return parser, received


class TestEntryPoints:
    """All ingestion entry points frame identically."""

    def test_byte_buffer_and_line_agree(self):
        by_byte, bytes_received = _recording_parser()
        for byte in STREAM.encode():
            by_byte.read_byte(byte)

        by_buffer, buffer_received = _recording_parser()
        data = STREAM.encode()
        by_buffer.read_buffer(data, len(data))

        by_line, line_received = _recording_parser()
        for line in STREAM.split("\r\n")[:-1]:
            by_line.read_line(line)

        assert len(bytes_received) == 4
        assert bytes_received == buffer_received == line_received

    def test_read_sentence_bypasses_framer(self):
        parser = NMEAParser()
        handler = MagicMock()
        parser.set_sentence_handler("GPGGA", handler)
        parser.read_sentence("$GPGGA,1,2,3*4A")
        handler.assert_called_once()
        assert handler.call_args.args[0].checksum_ok() is True

    def test_blank_sentence_is_skipped(self):
        parser = NMEAParser()
        handler = MagicMock()
        parser.on_sentence += handler
        parser.read_sentence("")
        handler.assert_not_called()


class TestErrors:
    """Errors propagate out of the ingestion call and leave the parser usable."""

    def test_invalid_sentence_raises(self):
        parser = NMEAParser()
        handler = MagicMock()
        parser.on_sentence += handler
        with pytest.raises(NMEAParseError):
            parser.read_line("$,")
        handler.assert_not_called()

    def test_checksum_covers_received_high_bytes(self):
        parser = NMEAParser()
        with pytest.raises(NMEAParseError) as excinfo:
            parser.read_buffer(b"$GPGGA,1,\xe9*00\r\n")
        nmea = excinfo.value.sentence
        assert nmea.calculated_checksum == NMEAParser.calculate_checksum(b"GPGGA,1,\xe9")

    def test_parser_resumes_after_error(self):
        parser, received = _recording_parser()
        with pytest.raises(NMEAParseError):
            parser.read_buffer(b"$GPGGA,1,2,3*\r\n")
        parser.read_buffer(b"$GPGGA,1,2,3*4A\r\n")
        assert received == [("GPGGA", ("1", "2", "3"), True)]

    def test_handler_error_propagates(self):
        parser = NMEAParser()
        parser.set_sentence_handler("GPGGA", MagicMock(side_effect=ValueError("bad")))
        with pytest.raises(ValueError, match="bad"):
            parser.read_line("$GPGGA,1,2,3*4A")
        parser.set_sentence_handler("GPGGA", MagicMock())
        parser.read_line("$GPGGA,1,2,3*4A")

    def test_overflow_then_valid_sentence(self):
        parser = NMEAParser(max_buffer_size=32)
        handler = MagicMock()
        parser.on_sentence += handler
        parser.read_buffer(b"$" + b"X" * 100)
        handler.assert_not_called()
        parser.read_buffer(add_checksum("GPGGA", "1,2,3").encode())
        handler.assert_called_once()
        assert handler.call_args.args[0].checksum_ok() is True


class TestConfiguration:
    """Constructor configuration."""

    def test_defaults(self):
        parser = NMEAParser()
        assert parser.max_buffer_size == 2000
        assert parser.log is False

    def test_registered_names(self):
        parser = NMEAParser()
        parser.set_sentence_handler("GPGGA", MagicMock())
        parser.set_sentence_handler("GPRMC", MagicMock())
        parser.set_sentence_handler("GPGGA", MagicMock())
        assert parser.registered_sentence_handlers_csv() == "GPGGA,GPRMC"
        parser.remove_sentence_handler("GPRMC")
        assert parser.registered_sentence_handlers_csv() == "GPGGA"

    def test_log_toggle(self, caplog):
        parser = NMEAParser(log=True)
        with caplog.at_level(logging.INFO, logger="nmeastream.parser"):
            parser.read_line("$GPGGA,1,2,3*4A")
        assert any("Found 3 parameters." in r.getMessage() for r in caplog.records)

        caplog.clear()
        parser.log = False
        with caplog.at_level(logging.INFO, logger="nmeastream.parser"):
            parser.read_line("$GPGGA,1,2,3*4A")
        assert caplog.records == []

    def test_independent_instances(self):
        first, first_received = _recording_parser()
        second, second_received = _recording_parser()
        first.read_buffer(b"$GPGGA,1")
        second.read_buffer(b"$GPVTG,2*00\r\n")
        first.read_buffer(b",2,3*4A\r\n")
        assert [name for name, *_ in first_received] == ["GPGGA"]
        assert [name for name, *_ in second_received] == ["GPVTG"]

    def test_static_checksum(self):
        assert NMEAParser.calculate_checksum("GPGGA,1,2,3") == 0x4A
