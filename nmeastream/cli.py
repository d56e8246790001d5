"""Command line NMEA reader.

Reads NMEA sentences from a text log or a serial GPS receiver, prints lock
changes and position updates, and finishes with the aggregated fix::

    nmeastream --file nmea_log.txt
    nmeastream --port /dev/ttyUSB0 --baud 4800 --log

Parse errors are reported and skipped; the parser resets itself after each
one, so reading simply continues.
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from serial import Serial, SerialException

from nmeastream.gnss import GPSService
from nmeastream.nmea.diagnostics import setup_logging
from nmeastream.nmea.errors import NMEAParseError
from nmeastream.nmea.framer import DEFAULT_MAX_BUFFER_SIZE
from nmeastream.nmea.types import NMEASentence
from nmeastream.parser import NMEAParser

__all__ = ["main", "parse_args"]

logger = logging.getLogger(__name__)

_SERIAL_TIMEOUT = 1.0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Read and aggregate NMEA 0183 GPS data")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=str, help="Path to a text file of NMEA sentences")
    source.add_argument("--port", type=str, help="Serial port of the GPS receiver")

    parser.add_argument("--baud", type=int, default=4800, help="Serial baud rate")
    parser.add_argument(
        "--max-buffer",
        dest="max_buffer",
        type=int,
        default=DEFAULT_MAX_BUFFER_SIZE,
        help="Longest unterminated frame kept, in bytes",
    )
    parser.add_argument(
        "--log", action="store_true", help="Log per-sentence parser diagnostics"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print the final fix"
    )

    return parser.parse_args(argv)


def _attach_printers(parser: NMEAParser, gps: GPSService, out: TextIO) -> None:
    def on_sentence(nmea: NMEASentence) -> None:
        quality = "good" if nmea.checksum_ok() else "bad"
        print(f"Received {quality} GPS Data: {nmea.name}", file=out)

    def on_lock_state_changed(locked: bool) -> None:
        if locked:
            print("\t\t\tGPS acquired LOCK!", file=out)
        else:
            print("\t\t\tGPS lost lock. Searching...", file=out)

    def on_update() -> None:
        fix = gps.fix
        print(f"\t\t\tPosition: {fix.latitude}'N, {fix.longitude}'E\n", file=out)

    parser.on_sentence += on_sentence
    gps.on_lock_state_changed += on_lock_state_changed
    gps.on_update += on_update


def read_lines(parser: NMEAParser, lines: Iterable[str]) -> int:
    """Feed text lines to ``parser``; returns the number of parse errors."""
    errors = 0
    for line in lines:
        try:
            parser.read_line(line.rstrip("\r\n"))
        except NMEAParseError as e:
            errors += 1
            logger.warning(e.message)
    return errors


def read_serial(parser: NMEAParser, port: str, baud: int) -> int:
    """Feed bytes from a serial port until interrupted; returns parse errors."""
    errors = 0
    with Serial(port, baud, timeout=_SERIAL_TIMEOUT) as device:
        try:
            while True:
                chunk = device.read(device.in_waiting or 1)
                # Byte by byte, so an error does not drop the rest of the chunk
                for byte in chunk:
                    try:
                        parser.read_byte(byte)
                    except NMEAParseError as e:
                        errors += 1
                        logger.warning(e.message)
        except KeyboardInterrupt:
            logger.info("Stopped.")
    return errors


def main(argv: list[str] | None = None, out: TextIO = sys.stdout) -> int:
    """Run the reader; returns a process exit code."""
    args = parse_args(argv)
    setup_logging(logging.INFO if args.log else logging.WARNING)

    parser = NMEAParser(max_buffer_size=args.max_buffer, log=args.log)
    gps = GPSService(parser)
    if not args.quiet:
        _attach_printers(parser, gps, out)

    try:
        if args.file:
            with open(args.file, encoding="latin-1") as log_file:
                errors = read_lines(parser, log_file)
        else:
            errors = read_serial(parser, args.port, args.baud)
    except (OSError, SerialException) as e:
        logger.error("Could not read NMEA source: %s", e)
        return 1

    print(gps.fix, file=out)
    if errors:
        logger.warning("%d sentences could not be parsed.", errors)
    return 0


if __name__ == "__main__":
    sys.exit(main())
